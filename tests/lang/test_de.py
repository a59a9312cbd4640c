"""Surface tests for German expressions."""

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
    """heute / morgen / gestern and day offsets."""

    @pytest.mark.parametrize("text,day", [("heute", 7), ("Morgen", 8), ("gestern", 6)])
    def test_relative_day(self, german, now, text, day):
        match = single(german, text, now)

        assert match.kind == ExpressionKind.RELATIVE_DAY
        assert match.resolved == ResolvedRange(utc(2026, 2, day), utc(2026, 2, day + 1))

    def test_vor_tagen(self, german, now):
        match = single(german, "vor 3 Tagen", now)

        assert match.kind == ExpressionKind.RELATIVE_DAY_OFFSET
        assert match.resolved.start == utc(2026, 2, 4)

    def test_in_tagen_with_number_word(self, german, now):
        assert single(german, "in zwei Tagen", now).resolved.start == utc(2026, 2, 9)

    def test_singular_tag(self, german, now):
        assert single(german, "vor einem Tag", now).resolved.start == utc(2026, 2, 6)


class TestTimes:
    """um ... Uhr, letzte Stunde, von/bis, zwischen/und."""

    def test_um_uhr(self, german, now):
        match = single(german, "um 15 Uhr", now)

        assert match.kind == ExpressionKind.TIME_SPECIFICATION
        assert match.resolved == ResolvedPoint(utc(2026, 2, 7, 15))

    def test_um_uhr_with_minutes(self, german, now):
        assert single(german, "um 15:30 Uhr", now).resolved == ResolvedPoint(utc(2026, 2, 7, 15, 30))

    def test_letzte_stunde_in_sentence(self, german, now):
        text = "Die letzte Stunde habe ich gearbeitet"
        match = single(german, text, now)

        assert match.kind == ExpressionKind.TIME_RANGE
        assert match.text(text) == "Die letzte Stunde"
        assert match.resolved == ResolvedRange(utc(2026, 2, 7, 13, 30), now)

    def test_von_bis(self, german, now):
        match = single(german, "von 9 bis 12 Uhr", now)
        assert match.resolved == ResolvedRange(utc(2026, 2, 7, 9), utc(2026, 2, 7, 12))

    def test_zwischen_without_uhr(self, german, now):
        match = single(german, "zwischen 9 und 17", now)
        assert match.resolved == ResolvedRange(utc(2026, 2, 7, 9), utc(2026, 2, 7, 17))

    def test_hour_out_of_range_declines(self, german, now):
        assert german.scan("um 25 Uhr", now=now) == []


class TestWeekdays:
    """Relative weekdays, reference Sunday 2026-02-08."""

    @pytest.mark.parametrize(
        "text,day",
        [
            ("nächsten Freitag", 20),
            ("naechsten Freitag", 20),
            ("am letzten Freitag", 6),
            ("vergangenen Freitag", 6),
            ("diesen Freitag", 13),
            ("kommenden Sonnabend", 21),
        ],
    )
    def test_weekday(self, german, sunday, text, day):
        match = single(german, text, sunday)

        assert match.kind == ExpressionKind.RELATIVE_DAY
        assert match.resolved == ResolvedRange(utc(2026, 2, day), utc(2026, 2, day + 1))


class TestCombined:
    """Day or weekday followed by a time."""

    def test_gestern_um(self, german, now):
        text = "Gestern um 15 Uhr"
        match = single(german, text, now)

        assert match.kind == ExpressionKind.COMBINED
        assert match.text(text) == text
        assert match.resolved == ResolvedPoint(utc(2026, 2, 6, 15))

    def test_morgen_zwischen(self, german, now):
        match = single(german, "morgen zwischen 9 und 12 Uhr", now)
        assert match.resolved == ResolvedRange(utc(2026, 2, 8, 9), utc(2026, 2, 8, 12))

    def test_letzten_freitag_um(self, german, sunday):
        match = single(german, "letzten Freitag um 15 Uhr", sunday)

        assert match.kind == ExpressionKind.COMBINED
        assert match.resolved == ResolvedPoint(utc(2026, 2, 6, 15))

    def test_weekday_von_bis(self, german, sunday):
        match = single(german, "nächsten Montag von 9 bis 12 Uhr", sunday)
        assert match.resolved == ResolvedRange(utc(2026, 2, 16, 9), utc(2026, 2, 16, 12))
