"""Tests for Settings — URL normalization and defaults."""

import pytest
from pydantic import ValidationError

from artist_catalog.config import Settings


def test_plain_postgres_url_gets_asyncpg_driver():
    settings = Settings(database_url="postgresql://u:p@host:5432/db")
    assert settings.database_url == "postgresql+asyncpg://u:p@host:5432/db"


def test_other_urls_left_untouched():
    settings = Settings(database_url="sqlite+aiosqlite:///:memory:")
    assert settings.database_url == "sqlite+aiosqlite:///:memory:"


def test_listing_defaults():
    settings = Settings()
    assert settings.default_page_limit == 10
    assert settings.max_page_limit == 100


def test_service_identity_defaults():
    settings = Settings()
    assert settings.service_name == "Artist Catalog API"
    assert settings.version == "1.0.0"


def test_version_overridable_from_environment(monkeypatch):
    monkeypatch.setenv("VERSION", "2.3.0")
    assert Settings().version == "2.3.0"


@pytest.mark.parametrize("default, maximum", [(0, 100), (50, 20)])
def test_incoherent_page_limits_rejected(default, maximum):
    with pytest.raises(ValidationError):
        Settings(default_page_limit=default, max_page_limit=maximum)


def test_unknown_log_format_rejected():
    with pytest.raises(ValidationError):
        Settings(log_format="xml")
