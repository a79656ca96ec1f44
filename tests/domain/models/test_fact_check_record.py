"""Tests for fact-check record models."""

import pytest
from pydantic import ValidationError

from credibility_checker.domain.models.fact_check_record import (
    FALLBACK_SOURCE_NAME,
    FactCheckRecord,
    Rating,
    SourceRecord,
    Verdict,
)


def test_rating_from_label():
    assert Rating.from_label("Mixed") is Rating.MIXED
    assert Rating.from_label("Pants on Fire") is Rating.UNKNOWN
    assert Rating.from_label(None) is Rating.UNKNOWN


def test_source_record_default_name():
    assert SourceRecord().name == "Unknown Source"


@pytest.mark.parametrize("confidence", [-0.1, 1.01])
def test_confidence_out_of_range_rejected(confidence):
    with pytest.raises(ValidationError):
        Verdict(rating=Rating.TRUE, confidence=confidence)


def test_rating_outside_fixed_set_rejected():
    with pytest.raises(ValidationError):
        Verdict(rating="Pants on Fire", confidence=0.5)


def test_legacy_fields_mirror_first_source():
    verdict = Verdict(
        rating=Rating.FALSE,
        confidence=0.7,
        sources=[
            SourceRecord(name="PolitiFact", url="https://p.example", date="2023-01-05"),
            SourceRecord(name="Snopes"),
        ],
    )

    assert verdict.primary_source_name == "PolitiFact"
    assert verdict.review_date == "2023-01-05"
    assert verdict.source_url == "https://p.example"


def test_explicit_legacy_fields_are_kept():
    verdict = Verdict(
        rating=Rating.MIXED,
        confidence=0.4,
        sources=[SourceRecord(name="Truth Detector")],
        primary_source_name=FALLBACK_SOURCE_NAME,
    )

    assert verdict.primary_source_name == FALLBACK_SOURCE_NAME
    assert verdict.source_url is None


def test_no_sources_means_no_legacy_fields():
    verdict = Verdict(rating=Rating.ERROR, confidence=0.0)

    assert verdict.sources == ()
    assert verdict.primary_source_name is None


def test_record_is_immutable():
    record = FactCheckRecord(
        id="abc",
        query="q",
        is_url_query=False,
        created_at=1,
        verdict=Verdict(rating=Rating.UNKNOWN, confidence=0.0),
    )

    with pytest.raises(ValidationError):
        record.query = "changed"


def test_record_accepts_camel_case_payload():
    record = FactCheckRecord.model_validate(
        {
            "id": "abc",
            "query": "https://example.com/a",
            "isUrlQuery": True,
            "createdAt": 1700000000000,
            "verdict": {
                "rating": "True",
                "confidence": 0.9,
                "claimText": "Content from this URL",
                "primarySourceName": FALLBACK_SOURCE_NAME,
            },
        }
    )

    assert record.is_url_query is True
    assert record.verdict.claim_text == "Content from this URL"
    assert record.is_fallback
