import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
import src.domain  # noqa: F401


@pytest_asyncio.fixture
async def engine(tmp_path):
    # File-backed SQLite so the worker and requests share one database
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'exports_test.db'}", echo=False)

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
def session_factory(engine):
    return sessionmaker(engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)


@pytest_asyncio.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
def asset_root(tmp_path):
    root = tmp_path / "public"
    root.mkdir()
    return root


@pytest_asyncio.fixture
def test_config(tmp_path, asset_root):
    return type("TestConfig", (ApplicationConfig,), {
        "EXPORTS_DIR": str(tmp_path / "exports"),
        "ASSET_ROOT": str(asset_root),
        "CORS_ORIGINS": [],
        "EXPORT_WORKER_CONCURRENCY": 1,
        "EXPORT_QUEUE_SIZE": 10,
        "EXPORT_INCLUDE_ASSETS": True,
        "EXPORT_RETENTION_HOURS": 1,
    })


@pytest_asyncio.fixture
async def app(test_config, session_factory):
    from src.api.app import create_app

    app = create_app(test_config, session_factory=session_factory)

    # ASGITransport does not send lifespan events, so the worker is started here
    async with app.router.lifespan_context(app):
        yield app


@pytest_asyncio.fixture
async def client(app):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
