import pytest
from httpx import ASGITransport, AsyncClient
from movies_api.app import create_app
from movies_api.core.config import Settings
from movies_api.db.base import Base
from movies_api.db.session import create_engine, create_session_factory
from movies_api.scripts.seed_data import seed
from movies_api.services.movie_service import MovieService


@pytest.fixture
def settings(tmp_path):
    """Settings pointing at a throwaway sqlite file, one per test."""
    return Settings(
        DATABASE_URL=f"sqlite+aiosqlite:///{tmp_path / 'movies_test.db'}",
        ENV="test",
        LOG_LEVEL="DEBUG",
        CREATE_TABLES=False,
        _env_file=None,
    )


@pytest.fixture
def unreachable_settings(tmp_path):
    """The parent directory does not exist, so sqlite cannot open the file."""
    return Settings(
        DATABASE_URL=f"sqlite+aiosqlite:///{tmp_path / 'missing' / 'movies.db'}",
        ENV="test",
        LOG_LEVEL="DEBUG",
        CREATE_TABLES=False,
        _env_file=None,
    )


@pytest.fixture
async def db_engine(settings):
    engine = create_engine(settings)

    # create tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)  # Clean slate
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
def db_session_factory(db_engine):
    """Factory for extra sessions, e.g. to count rows independently of the session under test."""
    return create_session_factory(db_engine)


@pytest.fixture
async def seeded_movies(db_session_factory):
    """Gone With The Wind (id 1) and Back To The Future (id 2)."""
    async with db_session_factory() as session:
        movies = await seed(session)
    return movies


@pytest.fixture
async def db_session(db_session_factory, seeded_movies):
    async with db_session_factory() as session:
        yield session


@pytest.fixture
def movie_service(db_session):
    return MovieService(db_session)


@pytest.fixture
async def unreachable_engine(unreachable_settings):
    engine = create_engine(unreachable_settings)
    yield engine
    await engine.dispose()


@pytest.fixture
async def unreachable_session(unreachable_engine):
    async with create_session_factory(unreachable_engine)() as session:
        yield session


@pytest.fixture
async def app(settings):
    app = create_app(settings)
    async with app.state.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    async with app.state.session_factory() as session:
        await seed(session)
    yield app
    await app.state.engine.dispose()


@pytest.fixture
async def client(app):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client


@pytest.fixture
async def unreachable_client(unreachable_settings):
    app = create_app(unreachable_settings)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
    await app.state.engine.dispose()
