"""Fact-check provider interface and the upstream response it returns."""

from typing import Dict, List, Optional, Protocol

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _UpstreamModel(BaseModel):
    """Base for loosely structured upstream payloads: unknown keys are ignored."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class Publisher(_UpstreamModel):
    """Organisation that published a claim review."""

    name: Optional[str] = None
    site: Optional[str] = None


class ClaimReview(_UpstreamModel):
    """One publisher's adjudication of a claim."""

    publisher: Optional[Publisher] = None
    url: Optional[str] = None
    title: Optional[str] = None
    review_date: Optional[str] = None
    textual_rating: Optional[str] = None
    language_code: Optional[str] = None


class ClaimEntry(_UpstreamModel):
    """A claim as indexed by the fact-check service."""

    text: Optional[str] = None
    claimant: Optional[str] = None
    claim_date: Optional[str] = None
    claim_review: Optional[List[ClaimReview]] = None

    @property
    def reviews(self) -> List[ClaimReview]:
        return self.claim_review or []


class ClaimSearchResponse(_UpstreamModel):
    """Body of a claim search response."""

    claims: Optional[List[ClaimEntry]] = None
    next_page_token: Optional[str] = None

    @property
    def claim_list(self) -> List[ClaimEntry]:
        return self.claims or []

    @property
    def first_claim(self) -> Optional[ClaimEntry]:
        """The claim whose reviews drive the verdict, if any."""
        claims = self.claim_list
        return claims[0] if claims else None


class FactCheckProvider(Protocol):
    """Protocol for services that can search published fact checks."""

    async def initialize(self) -> None:
        """Initialize the provider and its resources."""
        ...

    async def search_claims(
        self,
        query: str,
        *,
        api_key: str,
        is_url_query: bool = False,
    ) -> ClaimSearchResponse:
        """Run one claim search.

        Args:
            query: Free-text claim, or a URL used as a publisher site filter
            api_key: Credential sent with the request
            is_url_query: Whether ``query`` is a URL

        Returns:
            Parsed search response

        Raises:
            ConfigurationError: If no API key is configured
            UpstreamRequestError: On a non-2xx response or transport failure
            UpstreamParseError: If the body is not a valid search response
        """
        ...

    async def shutdown(self) -> None:
        """Release resources held by the provider."""
        ...

    @property
    def provider_name(self) -> str:
        """Get the provider name."""
        ...

    @property
    def is_available(self) -> bool:
        """Check if the provider is ready to search."""
        ...

    @property
    def capabilities(self) -> Dict[str, bool]:
        """Get the provider's capabilities."""
        ...
