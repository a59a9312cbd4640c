"""Surface tests for English expressions."""

from datetime import datetime, timezone

import pytest

from clockwords.models import ExpressionKind, ResolvedPoint, ResolvedRange


UTC = timezone.utc


def utc(*args):
    return datetime(*args, tzinfo=UTC)


def single(scanner, text, now):
    matches = scanner.scan(text, now=now)
    assert len(matches) == 1, matches
    return matches[0]


class TestRelativeDays:
    """today / tomorrow / yesterday and day offsets."""

    @pytest.mark.parametrize(
        "text,day",
        [("today", 7), ("Tomorrow", 8), ("YESTERDAY", 6)],
    )
    def test_relative_day(self, english, now, text, day):
        match = single(english, text, now)

        assert match.kind == ExpressionKind.RELATIVE_DAY
        assert match.resolved == ResolvedRange(utc(2026, 2, day), utc(2026, 2, day + 1))

    def test_in_days(self, english, now):
        match = single(english, "in 4 days", now)

        assert match.kind == ExpressionKind.RELATIVE_DAY_OFFSET
        assert match.resolved.start == utc(2026, 2, 11)

    def test_number_word_days_ago(self, english, now):
        match = single(english, "three days ago", now)
        assert match.resolved.start == utc(2026, 2, 4)

    def test_day_count_above_bound_declines(self, english, now):
        assert english.scan("in 45 days", now=now) == []


class TestClockTimes:
    """at 3pm, 3:30 pm, 5 o'clock."""

    def test_at_pm(self, english, now):
        match = single(english, "at 3pm", now)

        assert match.kind == ExpressionKind.TIME_SPECIFICATION
        assert match.resolved == ResolvedPoint(utc(2026, 2, 7, 15))

    def test_minutes(self, english, now):
        assert single(english, "at 3:30 pm", now).resolved == ResolvedPoint(utc(2026, 2, 7, 15, 30))

    def test_dotted_meridiem(self, english, now):
        text = "call at 9 a.m. sharp"
        match = single(english, text, now)

        assert match.text(text) == "at 9 a.m."
        assert match.resolved == ResolvedPoint(utc(2026, 2, 7, 9))

    def test_dotted_meridiem_without_at(self, english, now):
        text = "call me 3 p.m."
        match = single(english, text, now)

        assert match.text(text) == "3 p.m."
        assert match.resolved == ResolvedPoint(utc(2026, 2, 7, 15))

    def test_oclock(self, english, now):
        assert single(english, "5 o'clock", now).resolved == ResolvedPoint(utc(2026, 2, 7, 5))

    def test_trailing_period_not_included(self, english, now):
        text = "See you at 5pm."
        assert single(english, text, now).text(text) == "at 5pm"

    def test_invalid_12_hour_reading_declines(self, english, now):
        assert english.scan("at 13pm", now=now) == []


class TestRanges:
    """Trailing windows and hour ranges."""

    def test_last_hour_in_sentence(self, english, now):
        text = "The last hour I coded a new feature"
        match = single(english, text, now)

        assert match.kind == ExpressionKind.TIME_RANGE
        assert match.span.end <= 14
        assert match.resolved == ResolvedRange(utc(2026, 2, 7, 13, 30), now)

    def test_between(self, english, now):
        match = single(english, "between 9 and 17", now)
        assert match.resolved == ResolvedRange(utc(2026, 2, 7, 9), utc(2026, 2, 7, 17))

    def test_from_to_with_words(self, english, now):
        match = single(english, "from nine to eleven o'clock", now)
        assert match.resolved == ResolvedRange(utc(2026, 2, 7, 9), utc(2026, 2, 7, 11))

    def test_inverted_range_declines(self, english, now):
        assert english.scan("from nine to five", now=now) == []


class TestWeekdays:
    """Relative weekdays, reference Sunday 2026-02-08."""

    @pytest.mark.parametrize(
        "text,day",
        [("this friday", 13), ("next friday", 20), ("last Friday", 6), ("this Sunday", 8)],
    )
    def test_weekday(self, english, sunday, text, day):
        match = single(english, text, sunday)

        assert match.kind == ExpressionKind.RELATIVE_DAY
        assert match.resolved == ResolvedRange(utc(2026, 2, day), utc(2026, 2, day + 1))


class TestCombined:
    """Day or weekday followed by a time."""

    def test_yesterday_at(self, english, now):
        text = "yesterday at 3pm"
        match = single(english, text, now)

        assert match.kind == ExpressionKind.COMBINED
        assert match.text(text) == text
        assert match.resolved == ResolvedPoint(utc(2026, 2, 6, 15))

    def test_tomorrow_between(self, english, now):
        match = single(english, "tomorrow between 9 and 12", now)
        assert match.resolved == ResolvedRange(utc(2026, 2, 8, 9), utc(2026, 2, 8, 12))

    def test_next_monday_at(self, english, sunday):
        match = single(english, "next Monday at 9am", sunday)

        assert match.kind == ExpressionKind.COMBINED
        assert match.resolved == ResolvedPoint(utc(2026, 2, 16, 9))

    def test_last_friday_from_to(self, english, sunday):
        match = single(english, "last Friday from 9 to 12", sunday)
        assert match.resolved == ResolvedRange(utc(2026, 2, 6, 9), utc(2026, 2, 6, 12))
