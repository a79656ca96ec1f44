"""Dependency wiring for the credibility checker."""

import logging
from typing import Optional

from ..config import FactCheckConfig
from ..domain.ports.key_value_storage import KeyValueStorage
from ..domain.services.credential_store import CredentialStore
from ..domain.services.fact_checking_service import FactCheckingService
from ..domain.services.fallback_generator import FallbackGenerator
from ..domain.services.history_store import HistoryStore
from .google.factory import FactCheckProviderFactory
from .storage.json_file_storage import JsonFileStorage

logger = logging.getLogger(__name__)

DEFAULT_PROVIDER = "google"


class ServiceContainer:
    """Builds and owns the stores and services of one application instance.

    Construct it once at startup and hand the services it returns to the UI
    layer. The API key is taken from the configuration, or else reloaded from
    the credential store.
    """

    def __init__(
        self,
        config: Optional[FactCheckConfig] = None,
        storage: Optional[KeyValueStorage] = None,
        provider_factory: Optional[FactCheckProviderFactory] = None,
    ):
        """Initialize the container.

        Args:
            config: Settings; read from the environment when omitted
            storage: Backing storage; a JSON file at ``config.storage_path`` when omitted
            provider_factory: Provider registry; the default one when omitted
        """
        logger.info("🔧 Setting up service container...")
        config = config or FactCheckConfig.from_env()
        self.storage = storage or JsonFileStorage(config.storage_path)
        self.credentials = CredentialStore(self.storage)

        stored_key = self.credentials.load()
        if not config.api_key and stored_key:
            config = config.model_copy(update={"api_key": stored_key})
        if not config.api_key:
            logger.warning("⚠️ No fact check API key configured")

        self.config = config
        self.history = HistoryStore(self.storage, limit=config.history_limit)
        self.fallback = FallbackGenerator(delay=config.fallback_delay)
        self.provider_factory = provider_factory or FactCheckProviderFactory()
        self._fact_checking_service: Optional[FactCheckingService] = None
        logger.info("✅ Service container setup completed")

    async def get_fact_checking_service(self) -> FactCheckingService:
        """Get the fact checking service, creating its provider on first use."""
        if self._fact_checking_service is None:
            logger.info("🔧 Creating FactCheckingService with provider...")
            stored_key = self.credentials.get_api_key()
            if not self.config.api_key and stored_key:
                # A key set through an earlier service instance this session
                self.config = self.config.model_copy(update={"api_key": stored_key})
            provider = self.provider_factory.get_provider(DEFAULT_PROVIDER)
            if provider is None:
                provider = await self.provider_factory.create_provider(
                    DEFAULT_PROVIDER,
                    base_url=self.config.base_url,
                    timeout=self.config.timeout,
                )
            self._fact_checking_service = FactCheckingService(
                config=self.config,
                provider=provider,
                history=self.history,
                fallback=self.fallback,
                credentials=self.credentials,
            )
        return self._fact_checking_service

    async def shutdown(self) -> None:
        """Close all active providers."""
        if self._fact_checking_service is not None:
            # Keep settings changed through the service, such as a new API key
            self.config = self._fact_checking_service.config
        await self.provider_factory.shutdown_all()
        self._fact_checking_service = None
