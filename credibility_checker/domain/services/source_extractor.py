"""Flattening of upstream claim reviews into source records."""

from typing import Iterable, List

from ..models.fact_check_record import DEFAULT_SOURCE_NAME, SourceRecord
from ..ports.fact_check_provider import ClaimReview


def extract_sources(reviews: Iterable[ClaimReview]) -> List[SourceRecord]:
    """Build one source record per review, keeping upstream order."""
    sources = []
    for review in reviews:
        publisher_name = review.publisher.name if review.publisher else None
        sources.append(
            SourceRecord(
                name=publisher_name or DEFAULT_SOURCE_NAME,
                url=review.url,
                date=review.review_date,
                conclusion=review.textual_rating,
            )
        )
    return sources
