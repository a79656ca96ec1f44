"""Google Fact Check Tools implementation of the fact-check provider interface."""

import logging
from typing import Dict, Optional

import httpx
from pydantic import BaseModel, ValidationError

from ...config import DEFAULT_BASE_URL
from ...domain.errors import (
    ConfigurationError,
    UpstreamParseError,
    UpstreamRequestError,
    UpstreamStatusClass,
)
from ...domain.ports.fact_check_provider import ClaimSearchResponse, FactCheckProvider

logger = logging.getLogger(__name__)

CLAIM_SEARCH_PATH = "/claims:search"


class GoogleFactCheckConfig(BaseModel):
    """Configuration for the Google Fact Check Tools adapter."""

    base_url: str = DEFAULT_BASE_URL
    timeout: float = 10.0
    language_code: Optional[str] = None  # BCP-47, e.g. "en-US"


class GoogleFactCheckAdapter(FactCheckProvider):
    """Searches published fact checks through the ``claims:search`` endpoint.

    Free-text queries are sent as ``query``; URL queries restrict results to
    reviews published on that site via ``reviewPublisherSiteFilter``.
    """

    def __init__(
        self,
        config: Optional[GoogleFactCheckConfig] = None,
        provider_name: str = "Google Fact Check",
    ):
        """Initialize the adapter."""
        self._config = config or GoogleFactCheckConfig()
        self._name = provider_name
        self._client: Optional[httpx.AsyncClient] = None
        self._initialized = False

    async def initialize(self) -> None:
        """Create the HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self._config.base_url,
                timeout=self._config.timeout,
            )
        self._initialized = True
        logger.info(f"✅ {self._name} provider ready: {self._config.base_url}")

    async def search_claims(
        self,
        query: str,
        *,
        api_key: str,
        is_url_query: bool = False,
    ) -> ClaimSearchResponse:
        """Run one claim search."""
        if not api_key:
            raise ConfigurationError("API key not provided")
        if not self._client:
            raise RuntimeError("Provider not initialized")

        params = {"key": api_key}
        if is_url_query:
            params["reviewPublisherSiteFilter"] = query
        else:
            params["query"] = query
        if self._config.language_code:
            params["languageCode"] = self._config.language_code

        try:
            response = await self._client.get(CLAIM_SEARCH_PATH, params=params)
        except httpx.HTTPError as e:
            raise UpstreamRequestError(
                f"Fact check request failed: {e}",
                status_class=UpstreamStatusClass.NETWORK,
            ) from e

        if not 200 <= response.status_code < 300:
            logger.warning(f"⚠️ {self._name} returned status {response.status_code}")
            raise UpstreamRequestError.from_status(response.status_code)

        try:
            result = ClaimSearchResponse.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            raise UpstreamParseError(f"Invalid fact check response: {e}") from e

        logger.debug(f"📚 {self._name} returned {len(result.claim_list)} claims")
        return result

    async def shutdown(self) -> None:
        """Clean up resources."""
        if self._client:
            await self._client.aclose()
            self._client = None
        self._initialized = False

    @property
    def provider_name(self) -> str:
        """Get the provider name."""
        return self._name

    @property
    def is_available(self) -> bool:
        """Check if the provider is available."""
        return self._initialized and self._client is not None

    @property
    def capabilities(self) -> Dict[str, bool]:
        """Get the provider capabilities."""
        return {
            "claim_search": True,
            "site_filter": True,
            "language_filter": bool(self._config.language_code),
        }
