"""Unit tests for overlap resolution."""

from datetime import datetime, timezone

from clockwords.models import (
    ExpressionKind,
    MatchConfidence,
    ResolvedRange,
    Span,
    TimeMatch,
)
from clockwords.ranking import deduplicate, dominates


_DAY = ResolvedRange(
    datetime(2026, 2, 7, tzinfo=timezone.utc), datetime(2026, 2, 8, tzinfo=timezone.utc)
)


def match(start, end, confidence=MatchConfidence.COMPLETE):
    return TimeMatch(
        span=Span(start, end),
        kind=ExpressionKind.RELATIVE_DAY,
        confidence=confidence,
        resolved=_DAY,
    )


def spans(matches):
    return [(m.span.start, m.span.end) for m in matches]


class TestPreference:
    """Tests for the dominance order."""

    def test_complete_beats_longer_partial(self):
        assert dominates(match(0, 3), match(0, 6, MatchConfidence.PARTIAL))

    def test_longer_beats_shorter(self):
        assert dominates(match(0, 10), match(4, 10))
        assert not dominates(match(4, 10), match(0, 10))

    def test_earlier_start_breaks_length_tie(self):
        assert dominates(match(0, 5), match(2, 7))
        assert not dominates(match(2, 7), match(0, 5))

    def test_identical_does_not_dominate(self):
        assert not dominates(match(0, 5), match(0, 5))


class TestDeduplicate:
    """Tests for the overlap sweep."""

    def test_disjoint_matches_kept_in_order(self):
        result = deduplicate([match(10, 14), match(0, 5)], max_matches=10)
        assert spans(result) == [(0, 5), (10, 14)]

    def test_contained_match_dropped(self):
        """'yesterday at 3pm' absorbs 'yesterday' and 'at 3pm'."""
        result = deduplicate([match(0, 9), match(10, 16), match(0, 16)], max_matches=10)
        assert spans(result) == [(0, 16)]

    def test_complete_replaces_partial(self):
        result = deduplicate(
            [match(0, 6, MatchConfidence.PARTIAL), match(0, 3)], max_matches=10
        )
        assert spans(result) == [(0, 3)]
        assert result[0].confidence is MatchConfidence.COMPLETE

    def test_chain_replaced_pairwise(self):
        """B replaces A, then C only overlaps B and is shorter."""
        result = deduplicate([match(0, 5), match(4, 12), match(10, 14)], max_matches=10)
        assert spans(result) == [(4, 12)]

    def test_losing_candidate_does_not_block_later_matches(self):
        """A discarded candidate is not kept around for later overlap checks."""
        result = deduplicate([match(0, 4), match(6, 10), match(3, 7)], max_matches=10)
        assert spans(result) == [(0, 4), (6, 10)]

    def test_result_is_non_overlapping_and_sorted(self):
        candidates = [match(s, s + length) for s in range(0, 30, 3) for length in (2, 4, 7)]
        result = deduplicate(candidates, max_matches=100)

        for left, right in zip(result, result[1:]):
            assert left.span.end <= right.span.start

    def test_cap(self):
        candidates = [match(i * 10, i * 10 + 5) for i in range(5)]
        assert spans(deduplicate(candidates, max_matches=3)) == [(0, 5), (10, 15), (20, 25)]

    def test_zero_cap(self):
        assert deduplicate([match(0, 5)], max_matches=0) == []
