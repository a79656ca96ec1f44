"""Test configuration and common fixtures."""

from typing import Dict, List, Optional

import pytest

from credibility_checker.config import FactCheckConfig
from credibility_checker.domain.ports.fact_check_provider import (
    ClaimSearchResponse,
    FactCheckProvider,
)
from credibility_checker.domain.services.fallback_generator import FallbackGenerator
from credibility_checker.domain.services.history_store import HistoryStore
from credibility_checker.infrastructure.storage.memory_storage import InMemoryStorage


class StubFactCheckProvider(FactCheckProvider):
    """Provider that replays a canned response or raises a canned error."""

    def __init__(
        self,
        response: Optional[dict] = None,
        error: Optional[Exception] = None,
        provider_name: str = "Stub",
    ):
        self.response = response if response is not None else {}
        self.error = error
        self.calls: List[Dict] = []
        self._name = provider_name
        self._initialized = False

    async def initialize(self) -> None:
        self._initialized = True

    async def search_claims(
        self,
        query: str,
        *,
        api_key: str,
        is_url_query: bool = False,
    ) -> ClaimSearchResponse:
        self.calls.append({"query": query, "api_key": api_key, "is_url_query": is_url_query})
        if self.error is not None:
            raise self.error
        return ClaimSearchResponse.model_validate(self.response)

    async def shutdown(self) -> None:
        self._initialized = False

    @property
    def provider_name(self) -> str:
        return self._name

    @property
    def is_available(self) -> bool:
        return self._initialized

    @property
    def capabilities(self) -> Dict[str, bool]:
        return {"claim_search": True}


@pytest.fixture
def storage() -> InMemoryStorage:
    """Provide empty in-memory storage."""
    return InMemoryStorage()


@pytest.fixture
def history(storage: InMemoryStorage) -> HistoryStore:
    """Provide a history store over in-memory storage."""
    return HistoryStore(storage)


@pytest.fixture
def config(tmp_path) -> FactCheckConfig:
    """Provide a configuration with a test key and no fallback delay."""
    return FactCheckConfig(
        api_key="test-key",
        fallback_delay=0,
        storage_path=tmp_path / "storage.json",
    )


@pytest.fixture
def fallback() -> FallbackGenerator:
    """Provide a fallback generator with a fixed draw and no delay."""
    return FallbackGenerator(delay=0, random_source=lambda: 0.75)


@pytest.fixture
def google_response() -> dict:
    """Sample claims:search response with two reviews on the first claim."""
    return {
        "claims": [
            {
                "text": "The earth is flat",
                "claimant": "Flat Earth Society",
                "claimDate": "2023-01-04T00:00:00Z",
                "claimReview": [
                    {
                        "publisher": {"name": "PolitiFact", "site": "politifact.com"},
                        "url": "https://www.politifact.com/flat-earth",
                        "title": "No, the earth is not flat",
                        "reviewDate": "2023-01-05T00:00:00Z",
                        "textualRating": "False",
                        "languageCode": "en",
                    },
                    {
                        "publisher": {"site": "example.org"},
                        "url": "https://example.org/earth",
                        "reviewDate": "2023-01-06T00:00:00Z",
                        "textualRating": "Pants on Fire",
                        "languageCode": "en",
                    },
                ],
            },
            {"text": "The moon is made of cheese"},
        ],
        "nextPageToken": "CAE",
    }


@pytest.fixture
def make_provider():
    """Provide a factory for stub providers."""
    return StubFactCheckProvider
