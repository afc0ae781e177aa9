import logging
import sys
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from sqlalchemy.ext.asyncio import AsyncEngine

from .database import build_engine, build_session_factory, create_tables
from .db_models import *  # noqa: F401,F403
from .config import Config, settings
from .errors import APIError, BadRequest
from .users.service import configure_password_hashing
from .articles.router import router as articles_router
from .comments.router import router as comments_router

logger = logging.getLogger(__name__)


def configure_logging(config: Config) -> None:
    log_level = getattr(logging, config.LOG_LEVEL.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stdout)  # stdout으로 명시적 출력
        ]
    )
    logging.getLogger("blogful").setLevel(log_level)


def _error_response(status_code: int, message: str, headers: Optional[dict] = None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message}, headers=headers)


def _validation_message(exc: RequestValidationError) -> str:
    for err in exc.errors():
        loc = err.get("loc", ())
        if loc and loc[0] == "body":
            field = loc[-1] if len(loc) > 1 else None
            if field is not None and err.get("type") in ("missing", "string_too_short"):
                return f"Missing '{field}' in request body"
    return BadRequest.message


async def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
    return _error_response(exc.status_code, exc.message, exc.headers)


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    # 라우팅 단계의 404/405 등도 {"error": ...} 형태로 맞춥니다.
    return _error_response(exc.status_code, str(exc.detail), getattr(exc, "headers", None))


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    message = _validation_message(exc)
    logger.info(f"Rejected request {request.method} {request.url.path}: {message}")
    return _error_response(status.HTTP_400_BAD_REQUEST, message)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
    return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


def create_app(config: Config = settings, engine: Optional[AsyncEngine] = None) -> FastAPI:
    """
    애플리케이션 팩토리.

    DB 엔진은 인자로 주입받을 수 있으며(테스트), 없으면 설정값으로 생성합니다.
    세션 팩토리는 app.state에 보관되고 SessionDep가 요청마다 꺼내 씁니다.
    """
    configure_logging(config)
    configure_password_hashing(config)
    engine = engine or build_engine(config)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if config.CREATE_TABLES_ON_STARTUP:
            logger.info("Creating tables on startup")
            await create_tables(engine)
        yield
        await engine.dispose()

    app = FastAPI(title="Blogful API", lifespan=lifespan)
    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(APIError, api_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    # 라우터 등록
    app.include_router(articles_router, prefix=config.API_PREFIX)
    app.include_router(comments_router, prefix=config.API_PREFIX)

    # 간단한 헬스 체크 엔드포인트
    @app.get("/health", tags=["health"])
    async def health():
        return {"status": "ok"}

    logger.info(f"Application created (environment={config.ENVIRONMENT}, log level={config.LOG_LEVEL})")
    return app


app = create_app()
