"""Unit tests for the match value types."""

from datetime import datetime, timezone

import pytest

from clockwords.models import (
    ExpressionKind,
    MatchConfidence,
    ResolvedPoint,
    ResolvedRange,
    Span,
    TimeMatch,
)


UTC = timezone.utc


class TestSpan:
    """Tests for half-open text spans."""

    def test_rejects_negative_start(self):
        with pytest.raises(ValueError):
            Span(-1, 3)

    def test_rejects_end_before_start(self):
        with pytest.raises(ValueError):
            Span(5, 4)

    def test_length_and_empty(self):
        assert len(Span(2, 7)) == 5
        assert Span(3, 3).is_empty
        assert not Span(3, 4).is_empty

    def test_adjacent_spans_do_not_overlap(self):
        """[0, 5) and [5, 9) share no position."""
        assert not Span(0, 5).overlaps(Span(5, 9))
        assert Span(0, 5).overlaps(Span(4, 9))
        assert Span(4, 9).overlaps(Span(0, 5))

    def test_slice_extracts_text(self):
        text = "see you tomorrow"
        assert text[Span(8, 16).as_slice()] == "tomorrow"

    def test_byte_range_accounts_for_multibyte_characters(self):
        """ü and ß take two bytes each in UTF-8."""
        text = "Grüße morgen"
        span = Span(6, 12)

        assert text[span.as_slice()] == "morgen"
        assert span.byte_range(text) == (8, 14)
        assert text.encode("utf-8")[8:14] == b"morgen"


class TestResolvedTime:
    """Tests for resolved points and ranges."""

    def test_range_rejects_inverted_bounds(self):
        with pytest.raises(ValueError):
            ResolvedRange(
                start=datetime(2026, 2, 7, 12, tzinfo=UTC),
                end=datetime(2026, 2, 7, 11, tzinfo=UTC),
            )

    def test_empty_range_is_allowed(self):
        instant = datetime(2026, 2, 7, 12, tzinfo=UTC)
        assert ResolvedRange(instant, instant).start == instant

    def test_to_dict(self):
        point = ResolvedPoint(datetime(2026, 2, 8, 17, tzinfo=UTC))
        assert point.to_dict() == {"type": "point", "instant": "2026-02-08T17:00:00+00:00"}


class TestTimeMatch:
    """Tests for the match result."""

    def test_confidence_ordering(self):
        assert MatchConfidence.PARTIAL < MatchConfidence.COMPLETE

    def test_text_and_to_dict(self):
        source = "I worked yester"
        match = TimeMatch(
            span=Span(9, 15),
            kind=ExpressionKind.RELATIVE_DAY,
            confidence=MatchConfidence.PARTIAL,
            resolved=ResolvedRange(
                datetime(2026, 2, 7, tzinfo=UTC), datetime(2026, 2, 8, tzinfo=UTC)
            ),
        )

        assert match.text(source) == "yester"
        assert match.is_partial
        data = match.to_dict()
        assert data["start"] == 9
        assert data["end"] == 15
        assert data["kind"] == "relative_day"
        assert data["confidence"] == "partial"
        assert data["resolved"]["type"] == "range"
