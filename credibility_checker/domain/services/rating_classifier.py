"""Keyword classification of free-text review verdicts."""

import re
from typing import Iterable, List, Sequence

from ..models.fact_check_record import Rating
from ..ports.fact_check_provider import ClaimReview

FALSE_PATTERN = re.compile(r"false|fake|incorrect|wrong|misleading|untrue", re.IGNORECASE)
TRUE_PATTERN = re.compile(r"true|correct|accurate|right|valid", re.IGNORECASE)
MIXED_PATTERN = re.compile(r"mostly|partially|half|mixed|unverified", re.IGNORECASE)


def review_rating_texts(reviews: Iterable[ClaimReview]) -> List[str]:
    """Collect the textual rating of each review, using "Unknown" when missing."""
    return [review.textual_rating or Rating.UNKNOWN.value for review in reviews]


def classify_ratings(texts: Sequence[str]) -> str:
    """Reduce a list of review verdicts to a single rating label.

    Each text is counted once per keyword family it mentions (false, true,
    mixed). False wins ties with true and mixed, true wins ties with mixed.
    When no family matches at all the raw first text is returned, so the
    result can be a label outside :class:`Rating`.

    Args:
        texts: Textual ratings in upstream order

    Returns:
        "False", "True", "Mixed", the first raw text, or "Unknown" for no input
    """
    if not texts:
        return Rating.UNKNOWN.value

    lowered = [text.lower() for text in texts]
    false_count = sum(1 for text in lowered if FALSE_PATTERN.search(text))
    true_count = sum(1 for text in lowered if TRUE_PATTERN.search(text))
    mixed_count = sum(1 for text in lowered if MIXED_PATTERN.search(text))

    if false_count or true_count or mixed_count:
        if false_count >= true_count and false_count >= mixed_count:
            return Rating.FALSE.value
        if true_count >= false_count and true_count >= mixed_count:
            return Rating.TRUE.value
        if mixed_count > 0:
            return Rating.MIXED.value

    return texts[0] or Rating.UNKNOWN.value
