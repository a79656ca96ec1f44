"""Confidence scoring from the size of a claim search result."""

NO_CLAIMS_CONFIDENCE = 0.0
UNREVIEWED_CLAIM_CONFIDENCE = 0.2
BASE_REVIEWED_CONFIDENCE = 0.5
PER_REVIEW_CONFIDENCE = 0.1
MAX_CONFIDENCE = 0.9


def estimate_confidence(claim_count: int, review_count: int = 0) -> float:
    """Estimate confidence from how many claims and reviews were found.

    More reviews of the first claim mean higher confidence, capped below
    certainty since a single search is never treated as proof.

    Args:
        claim_count: Number of claims returned
        review_count: Number of reviews on the first claim

    Returns:
        0.0 without claims, 0.2 for an unreviewed claim, otherwise
        ``min(0.5 + 0.1 * review_count, 0.9)``
    """
    if claim_count <= 0:
        return NO_CLAIMS_CONFIDENCE
    if review_count <= 0:
        return UNREVIEWED_CLAIM_CONFIDENCE
    confidence = BASE_REVIEWED_CONFIDENCE + review_count * PER_REVIEW_CONFIDENCE
    return round(min(confidence, MAX_CONFIDENCE), 10)
