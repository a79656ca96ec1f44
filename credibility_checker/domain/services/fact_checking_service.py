"""Service for coordinating fact checks against the upstream provider."""

import asyncio
import logging
from typing import List, Optional
from urllib.parse import urlparse

from ...config import FactCheckConfig
from ..errors import ConfigurationError, UpstreamParseError, UpstreamRequestError
from ..models.fact_check_record import FactCheckDraft, FactCheckRecord, Rating, Verdict
from ..ports.fact_check_provider import ClaimSearchResponse, FactCheckProvider
from .confidence_estimator import estimate_confidence
from .credential_store import CredentialStore
from .fallback_generator import FallbackGenerator
from .history_store import HistoryStore
from .rating_classifier import classify_ratings, review_rating_texts
from .source_extractor import extract_sources

logger = logging.getLogger(__name__)

# Labels the classifier derives from keyword counts; anything else is a raw upstream label
CLASSIFIED_LABELS = frozenset({Rating.TRUE.value, Rating.FALSE.value, Rating.MIXED.value})


def is_url(text: str) -> bool:
    """Check whether text parses as an absolute URL.

    Any scheme is accepted, so ``mailto:`` and other host-less URLs count.
    Text containing whitespace never does.
    """
    text = text.strip()
    if not text or any(ch.isspace() for ch in text):
        return False
    try:
        parsed = urlparse(text)
        parsed.port  # raises ValueError on a malformed port
    except ValueError:
        return False
    return bool(parsed.scheme and (parsed.netloc or parsed.path))


def build_verdict(response: ClaimSearchResponse) -> Verdict:
    """Normalize a claim search response into a verdict.

    Only the first claim is considered. Its reviews drive the rating and the
    source list; the number of claims and reviews drives confidence.
    """
    claim = response.first_claim
    reviews = claim.reviews if claim else []

    confidence = estimate_confidence(len(response.claim_list), len(reviews))
    if reviews:
        label = classify_ratings(review_rating_texts(reviews))
    else:
        label = Rating.UNKNOWN.value
    if label in CLASSIFIED_LABELS:
        rating, raw_label = Rating(label), None
    else:
        rating = Rating.UNKNOWN
        raw_label = None if label == Rating.UNKNOWN.value else label

    return Verdict(
        claim_text=claim.text if claim else None,
        claimant=claim.claimant if claim else None,
        rating=rating,
        rating_label=raw_label,
        confidence=confidence,
        sources=extract_sources(reviews),
    )


class FactCheckingService:
    """Runs fact checks and records every outcome in the history."""

    def __init__(
        self,
        config: FactCheckConfig,
        provider: FactCheckProvider,
        history: HistoryStore,
        fallback: Optional[FallbackGenerator] = None,
        credentials: Optional[CredentialStore] = None,
    ):
        """Initialize the service.

        Args:
            config: Settings, including the API key
            provider: Upstream fact-check provider
            history: Store that receives every result
            fallback: Generator for simulated results
            credentials: Store that persists API key changes
        """
        self._config = config
        self._provider = provider
        self._history = history
        self._fallback = fallback or FallbackGenerator(delay=config.fallback_delay)
        self._credentials = credentials
        logger.info(f"🔧 FactCheckingService initialized with {provider.provider_name}")

    @property
    def config(self) -> FactCheckConfig:
        return self._config

    @property
    def history(self) -> HistoryStore:
        return self._history

    def set_api_key(self, api_key: str) -> None:
        """Use a new API key for this session and persist it."""
        api_key = api_key.strip()
        if not api_key:
            raise ValueError("API key cannot be empty")
        if self._credentials is not None:
            self._credentials.set_api_key(api_key)
        self._config = self._config.model_copy(update={"api_key": api_key})

    async def check_fact(self, query: str) -> FactCheckRecord:
        """Fact check a claim or URL.

        Failures talking to the provider are not raised. They produce a stored
        record rated ``Error`` with zero confidence instead.

        Args:
            query: Claim text or URL

        Returns:
            The stored record

        Raises:
            ConfigurationError: If no API key is configured
        """
        if not self._config.api_key:
            raise ConfigurationError("API key not provided")

        is_url_query = is_url(query)
        logger.info(
            f"🔍 Starting fact check for {'URL' if is_url_query else 'claim'}: {query[:100]}"
        )

        try:
            response = await self._provider.search_claims(
                query,
                api_key=self._config.api_key,
                is_url_query=is_url_query,
            )
            verdict = build_verdict(response)
        except (UpstreamRequestError, UpstreamParseError) as e:
            logger.error(f"❌ Fact check failed: {e}")
            verdict = self._error_verdict()
        except Exception as e:
            logger.error(f"❌ Unexpected fact check failure: {e}", exc_info=True)
            verdict = self._error_verdict()
        else:
            logger.info(
                f"✅ Fact check complete: {verdict.rating.value}, "
                f"{len(verdict.sources)} sources, confidence: {verdict.confidence:.2f}"
            )

        return await self._save(
            FactCheckDraft(query=query, is_url_query=is_url_query, verdict=verdict)
        )

    async def fallback_fact_check(self, query: str) -> FactCheckRecord:
        """Produce and store a simulated, non-authoritative result."""
        draft = await self._fallback.generate(query, is_url(query))
        return await self._save(draft)

    async def check_with_fallback(self, query: str) -> List[FactCheckRecord]:
        """Fact check ``query``, adding a simulated result when nothing was found.

        Args:
            query: Claim text or URL; surrounding whitespace is ignored

        Returns:
            The primary record, followed by a fallback record when the primary
            one has zero confidence

        Raises:
            ValueError: If the query is blank
            ConfigurationError: If no API key is configured
        """
        query = query.strip()
        if not query:
            raise ValueError("Please enter some text or a URL to fact check")

        records = [await self.check_fact(query)]
        if records[0].verdict.confidence == 0:
            logger.info("🎭 No fact checks found - trying fallback method")
            records.append(await self.fallback_fact_check(query))
        return records

    async def _save(self, draft: FactCheckDraft) -> FactCheckRecord:
        # History writes hit storage synchronously; keep them off the event loop
        return await asyncio.to_thread(self._history.save, draft)

    @staticmethod
    def _error_verdict() -> Verdict:
        return Verdict(rating=Rating.ERROR, confidence=0.0)
