import os
import sys
from pathlib import Path
import pytest

from httpx import AsyncClient, ASGITransport

# 테스트용 환경 변수 세팅 (blogful 모듈 임포트 전에 적용)
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("LOG_LEVEL", "WARNING")

# sys.path에 backend 추가하여 'blogful' 패키지 검색 가능하게 함
backend_path = Path(__file__).resolve().parents[1]
if str(backend_path) not in sys.path:
    sys.path.insert(0, str(backend_path))

from blogful.config import Config
from blogful.database import build_engine, build_session_factory, create_tables
from blogful.main import create_app

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture()
def test_config():
    return Config(DATABASE_URL=TEST_DATABASE_URL, ENVIRONMENT="test", LOG_LEVEL="WARNING")


@pytest.fixture()
async def test_engine(test_config):
    # 테스트마다 새로운 인메모리 SQLite
    engine = build_engine(test_config)
    await create_tables(engine)
    yield engine
    await engine.dispose()


@pytest.fixture()
async def db(test_engine):
    async with build_session_factory(test_engine)() as session:
        yield session


@pytest.fixture()
def app(test_config, test_engine):
    return create_app(test_config, engine=test_engine)


@pytest.fixture()
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
