"""Unit tests for application settings."""

import pytest

from core.config import Settings


class TestSettings:
    @pytest.mark.parametrize(
        "url, expected",
        [
            ("postgresql://u:p@db:5432/portfolio", "postgresql+asyncpg://u:p@db:5432/portfolio"),
            ("postgres://u:p@db:5432/portfolio", "postgresql+asyncpg://u:p@db:5432/portfolio"),
            (
                "postgresql+asyncpg://u:p@db:5432/portfolio",
                "postgresql+asyncpg://u:p@db:5432/portfolio",
            ),
            ("sqlite+aiosqlite:///:memory:", "sqlite+aiosqlite:///:memory:"),
        ],
    )
    def test_async_database_url(self, url: str, expected: str):
        assert Settings(database_url=url).async_database_url == expected

    def test_cors_origins_list(self):
        settings = Settings(cors_origins=" http://a.dev, ,http://b.dev ")

        assert settings.cors_origins_list == ["http://a.dev", "http://b.dev"]

    def test_is_production(self):
        assert Settings(app_env="production").is_production is True
        assert Settings(app_env="development").is_production is False

    def test_defaults(self):
        settings = Settings(_env_file=None)

        assert settings.api_prefix == "/api"
