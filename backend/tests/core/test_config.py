"""Settings: verifies environment-driven configuration."""

import pytest
from pydantic import ValidationError

from roomfinder.config import Settings


def test_postgres_url_gets_async_driver(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql://u:p@host:5432/rooms")

    assert Settings().database_url == "postgresql+asyncpg://u:p@host:5432/rooms"


def test_other_urls_untouched(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite+aiosqlite:///rooms.db")

    assert Settings().database_url == "sqlite+aiosqlite:///rooms.db"


def test_defaults(monkeypatch):
    monkeypatch.delenv("APP_NAME", raising=False)

    settings = Settings()
    assert settings.app_name == "roomfinderApp"
    assert settings.page_size_default == 20
    assert settings.page_size_max == 100


def test_page_size_max_is_bounded(monkeypatch):
    monkeypatch.setenv("PAGE_SIZE_MAX", str(2**40))

    with pytest.raises(ValidationError):
        Settings()
