"""Factory for creating and managing fact-check providers."""

from typing import Any, Dict, List, Optional, Type

from ...domain.ports.fact_check_provider import FactCheckProvider
from .fact_check_adapter import GoogleFactCheckAdapter, GoogleFactCheckConfig


class FactCheckProviderFactory:
    """Registry of fact-check provider classes and their live instances."""

    def __init__(self):
        """Initialize the factory."""
        self._provider_registry: Dict[str, Type[FactCheckProvider]] = {}
        self._active_providers: Dict[str, FactCheckProvider] = {}

        self.register_provider("google", GoogleFactCheckAdapter)

    def register_provider(self, name: str, provider_class: Type[FactCheckProvider]) -> None:
        """Register a new provider class.

        Args:
            name: Unique identifier for the provider
            provider_class: The provider class to register
        """
        if name in self._provider_registry:
            raise ValueError(f"Provider {name} already registered")
        self._provider_registry[name] = provider_class

    async def create_provider(self, name: str, **config: Any) -> FactCheckProvider:
        """Create and initialize a provider instance.

        An already active instance is returned as is.

        Args:
            name: Name of the provider to create
            **config: Provider-specific configuration

        Raises:
            ValueError: If provider not found
            RuntimeError: If initialization fails
        """
        if name not in self._provider_registry:
            raise ValueError(f"Provider {name} not registered")
        if name in self._active_providers:
            return self._active_providers[name]

        provider_class = self._provider_registry[name]
        if provider_class is GoogleFactCheckAdapter:
            provider = provider_class(config=GoogleFactCheckConfig(**config))
        else:
            provider = provider_class(**config)

        try:
            await provider.initialize()
        except Exception as e:
            raise RuntimeError(f"Failed to initialize provider {name}: {e}") from e
        self._active_providers[name] = provider
        return provider

    def get_provider(self, name: str) -> Optional[FactCheckProvider]:
        """Get an active provider instance by name."""
        return self._active_providers.get(name)

    async def shutdown_provider(self, name: str) -> None:
        """Shutdown a specific provider."""
        provider = self._active_providers.pop(name, None)
        if provider:
            await provider.shutdown()

    async def shutdown_all(self) -> None:
        """Shutdown all active providers."""
        for name in list(self._active_providers.keys()):
            await self.shutdown_provider(name)

    def list_providers(self) -> Dict[str, bool]:
        """Map registered provider names to whether they are active."""
        return {name: name in self._active_providers for name in self._provider_registry}

    def list_active_providers(self) -> List[str]:
        """Get list of active provider names."""
        return list(self._active_providers.keys())
