import pytest
from pydantic import ValidationError

from movies_api.core.config import Settings
from movies_api.db.session import create_engine


def test_database_url_is_required(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_settings_read_from_environment(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql+asyncpg://moviesuser:secret@db:5432/movies")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    settings = Settings(_env_file=None)
    assert settings.DATABASE_URL == "postgresql+asyncpg://moviesuser:secret@db:5432/movies"
    assert settings.LOG_LEVEL == "DEBUG"
    assert settings.API_PREFIX == "/api"


def test_postgres_engine_uses_pool_settings():
    settings = Settings(
        DATABASE_URL="postgresql+asyncpg://moviesuser:secret@db:5432/movies",
        DB_POOL_SIZE=3,
        _env_file=None,
    )
    engine = create_engine(settings)
    # no connection is made until first use
    assert engine.pool.size() == 3
    assert engine.url.database == "movies"
