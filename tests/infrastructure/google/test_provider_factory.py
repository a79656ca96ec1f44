"""Tests for the fact-check provider factory."""

from unittest.mock import patch

import pytest

from credibility_checker.infrastructure.google.fact_check_adapter import GoogleFactCheckAdapter
from credibility_checker.infrastructure.google.factory import FactCheckProviderFactory


@pytest.fixture
def provider_factory() -> FactCheckProviderFactory:
    """Create a provider factory."""
    return FactCheckProviderFactory()


def test_google_registered_by_default(provider_factory):
    assert provider_factory.list_providers() == {"google": False}


@pytest.mark.asyncio
async def test_register_provider(provider_factory, make_provider):
    """Test provider registration."""
    provider_factory.register_provider("stub", make_provider)

    provider = await provider_factory.create_provider("stub", provider_name="Test")

    assert provider.provider_name == "Test"
    assert provider.is_available
    assert provider_factory.list_active_providers() == ["stub"]


def test_register_duplicate_provider(provider_factory, make_provider):
    """Test error on duplicate provider registration."""
    provider_factory.register_provider("stub", make_provider)

    with pytest.raises(ValueError):
        provider_factory.register_provider("stub", make_provider)


@pytest.mark.asyncio
async def test_create_unknown_provider(provider_factory):
    """Test error when creating unknown provider."""
    with pytest.raises(ValueError):
        await provider_factory.create_provider("unknown")


@pytest.mark.asyncio
async def test_create_google_provider(provider_factory):
    with patch("httpx.AsyncClient"):
        provider = await provider_factory.create_provider("google", timeout=3.0)

    assert isinstance(provider, GoogleFactCheckAdapter)
    assert provider.is_available
    assert provider_factory.get_provider("google") is provider


@pytest.mark.asyncio
async def test_create_returns_active_instance(provider_factory, make_provider):
    provider_factory.register_provider("stub", make_provider)

    first = await provider_factory.create_provider("stub")
    second = await provider_factory.create_provider("stub")

    assert first is second


@pytest.mark.asyncio
async def test_initialization_failure(provider_factory, make_provider):
    class FailingProvider(make_provider):
        async def initialize(self) -> None:
            raise ConnectionError("down")

    provider_factory.register_provider("failing", FailingProvider)

    with pytest.raises(RuntimeError):
        await provider_factory.create_provider("failing")
    assert provider_factory.get_provider("failing") is None


def test_get_nonexistent_provider(provider_factory):
    """Test retrieval of non-existent provider."""
    assert provider_factory.get_provider("unknown") is None


@pytest.mark.asyncio
async def test_shutdown_all(provider_factory, make_provider):
    """Test shutting down every active provider."""
    provider_factory.register_provider("stub", make_provider)
    provider = await provider_factory.create_provider("stub")

    await provider_factory.shutdown_all()

    assert not provider.is_available
    assert provider_factory.get_provider("stub") is None
