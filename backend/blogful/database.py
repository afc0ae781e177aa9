from typing import Annotated, AsyncGenerator

from fastapi import Depends, Request

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base
from sqlalchemy.pool import StaticPool

from .config import Config

Base = declarative_base()


def build_engine(config: Config) -> AsyncEngine:
    """설정값으로 비동기 엔진을 생성합니다."""
    if config.is_sqlite:
        # 인메모리 SQLite는 커넥션마다 DB가 따로 생기므로 하나의 커넥션을 공유
        return create_async_engine(
            config.DATABASE_URL,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    return create_async_engine(
        config.DATABASE_URL,
        pool_pre_ping=True,               # 연결 사전 체크
        pool_recycle=1800,                # 30분마다 재연결
        connect_args={
            "ssl": config.POSTGRES_SSLMODE == "require",
        },
    )


def build_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


async def create_tables(engine: AsyncEngine) -> None:
    # 모든 모델이 메타데이터에 등록되도록 임포트
    from . import db_models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    # 세션 팩토리는 create_app()에서 app.state에 주입됩니다.
    session_factory = request.app.state.session_factory
    async with session_factory() as sess:
        yield sess

# Annotated 별칭: 다른 모듈에서 `db: SessionDep` 만 적으면 세션이 주입됩니다.
SessionDep = Annotated[AsyncSession, Depends(get_db)]

# INTEGER 컬럼 상한. 이보다 큰 id는 드라이버에서 오버플로가 납니다.
DB_INT_MAX = 2_147_483_647
