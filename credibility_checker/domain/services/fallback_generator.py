"""Simulated fact check used when the real service gives no answer."""

import asyncio
import logging
import random
from datetime import date
from typing import Callable, List, Optional

from ..models.fact_check_record import (
    FALLBACK_SOURCE_NAME,
    FactCheckDraft,
    Rating,
    SourceRecord,
    Verdict,
)

logger = logging.getLogger(__name__)

URL_CLAIM_TEXT = "Content from this URL"
DEFAULT_FALLBACK_DELAY = 1.5

_ILLUSTRATIVE_SOURCES = (
    (
        "Fact Check Central",
        "https://example.com/factcheck1",
        "This claim requires further investigation.",
    ),
    (
        "Truth Detector",
        "https://example.com/factcheck2",
        "Our analysis shows this claim is partially accurate.",
    ),
    (
        "Fact Verification Institute",
        "https://example.com/factcheck3",
        "Multiple sources confirm this claim needs context.",
    ),
)


def rating_for_confidence(confidence: float) -> Rating:
    """Bucket a simulated confidence into a rating."""
    if confidence < 0.3:
        return Rating.FALSE
    elif confidence < 0.6:
        return Rating.MIXED
    else:
        return Rating.TRUE


class FallbackGenerator:
    """Produces synthetic, non-authoritative verdicts.

    The values are random; only the shape is fixed. Records are tagged with
    ``FALLBACK_SOURCE_NAME`` so callers can tell them apart from real checks.
    """

    def __init__(
        self,
        delay: float = DEFAULT_FALLBACK_DELAY,
        random_source: Optional[Callable[[], float]] = None,
        today: Optional[Callable[[], date]] = None,
    ):
        """Initialize the generator.

        Args:
            delay: Seconds to wait before answering, to mimic a real call
            random_source: Returns a float in [0, 1); defaults to random.random
            today: Returns the current date; defaults to date.today
        """
        self._delay = max(delay, 0.0)
        self._random = random_source or random.random
        self._today = today or date.today

    async def generate(self, query: str, is_url_query: bool) -> FactCheckDraft:
        """Build a simulated result for ``query``."""
        if self._delay:
            await asyncio.sleep(self._delay)

        confidence = min(max(self._random(), 0.0), 1.0)
        rating = rating_for_confidence(confidence)
        today = self._today().isoformat()
        logger.info(f"🎭 Using fallback verification: {rating.value} ({confidence:.2f})")

        return FactCheckDraft(
            query=query,
            is_url_query=is_url_query,
            verdict=Verdict(
                claim_text=URL_CLAIM_TEXT if is_url_query else query,
                rating=rating,
                confidence=confidence,
                sources=self._sources(today),
                primary_source_name=FALLBACK_SOURCE_NAME,
                review_date=today,
            ),
        )

    def _sources(self, today: str) -> List[SourceRecord]:
        return [
            SourceRecord(name=name, url=url, date=today, conclusion=conclusion)
            for name, url, conclusion in _ILLUSTRATIVE_SOURCES
        ]
