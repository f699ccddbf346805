"""Unit tests for the core providers."""

import pytest
from dishka import make_async_container

from faf.config import ConfigurationError, Settings
from faf.util.di.core import ProdConfigProvider


async def resolve_settings() -> Settings:
    container = make_async_container(ProdConfigProvider())
    try:
        return await container.get(Settings)
    finally:
        await container.close()


class TestProvideSettings:
    @pytest.mark.asyncio
    async def test_production_rejects_placeholder_secrets(self, monkeypatch):
        monkeypatch.setenv("ENVIRONMENT", "production")
        monkeypatch.setenv("AUTH__JWT_SECRET", "jwt")
        monkeypatch.setenv("AUTH__TOKEN_SECRET", "claims")
        monkeypatch.delenv("STEAM__API_KEY", raising=False)

        with pytest.raises(ConfigurationError) as exc_info:
            await resolve_settings()

        assert "steam.api_key" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_production_with_secrets(self, monkeypatch):
        monkeypatch.setenv("ENVIRONMENT", "production")
        monkeypatch.setenv("AUTH__JWT_SECRET", "jwt")
        monkeypatch.setenv("AUTH__TOKEN_SECRET", "claims")
        monkeypatch.setenv("STEAM__API_KEY", "steam-key")

        settings = await resolve_settings()

        assert settings.placeholder_secrets() == []


def test_placeholders_allowed_outside_production():
    settings = Settings(environment="development")

    assert "steam.api_key" in settings.placeholder_secrets()
