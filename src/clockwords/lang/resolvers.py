"""Resolver building blocks shared by the language modules.

A combined expression ("tomorrow at 3pm", "nächsten Montag um 9 Uhr") is an
*anchor* that picks a calendar day followed by a time part resolved on that
day. Anchors and time parts are small factories so each language only has to
supply its vocabulary:

    anchor = day_word_anchor({"today": 0, "tomorrow": 1})
    GrammarRule.compile(pattern, ExpressionKind.COMBINED, clock_resolver(anchor))

All captures are read by group name; see the module docstrings of the
language modules for the names each rule exposes.
"""

from __future__ import annotations

import re
from datetime import datetime
from typing import Callable, Mapping, Optional, Tuple

from clockwords.lang.base import Resolver
from clockwords.lang.numbers import parse_number
from clockwords.models import ResolvedTime
from clockwords.resolve import (
    THIS_WEEK,
    resolve_day_offset,
    resolve_last_unit,
    resolve_relative_day,
    resolve_time_on_date,
    resolve_time_range_on_date,
    resolve_weekday,
    start_of_day,
    to_24h,
    weekday_start,
)


# Day counts accepted by "in N days" style rules
MIN_DAY_COUNT = 1
MAX_DAY_COUNT = 30

Anchor = Callable[[re.Match, datetime], Optional[datetime]]


def fold(word: str) -> str:
    """Lowercase a captured phrase, unify apostrophes and collapse whitespace."""
    return " ".join(word.lower().replace("’", "'").split())


def group(match: re.Match, *names: str) -> Optional[str]:
    """First non-empty named group among ``names``; absent groups are skipped."""
    groups = match.groupdict()
    for name in names:
        value = groups.get(name)
        if value:
            return value
    return None


# ---------------------------------------------------------------------------
# Captures
# ---------------------------------------------------------------------------


def capture_minute(match: re.Match) -> Optional[int]:
    """The ``minute`` group as an int, 0 when the rule has none."""
    raw = group(match, "minute")
    if raw is None:
        return 0
    return int(raw) if raw.isdecimal() else None


def capture_day_count(match: re.Match, lang: str) -> Optional[int]:
    """The ``count`` group, bounded to plausible relative day counts."""
    raw = group(match, "count")
    if raw is None:
        return None
    count = parse_number(raw, lang)
    if count is None or not MIN_DAY_COUNT <= count <= MAX_DAY_COUNT:
        return None
    return count


def meridiem_hour(hour: int, meridiem: Optional[str]) -> Optional[int]:
    """Apply an am/pm marker; 12-hour readings must lie in 1..12.

    Markers such as "o'clock" or "Uhr" leave the hour unchanged.
    """
    if not meridiem:
        return hour
    marker = meridiem.lower().replace(".", "")
    if marker not in ("am", "pm"):
        return hour
    if not 1 <= hour <= 12:
        return None
    return to_24h(hour, marker)


# ---------------------------------------------------------------------------
# Anchors
# ---------------------------------------------------------------------------


def today_anchor(match: re.Match, now: datetime) -> Optional[datetime]:
    return start_of_day(0, now)


def day_word_anchor(offsets: Mapping[str, int]) -> Anchor:
    """Anchor on the ``day`` group ("tomorrow" -> +1)."""

    def anchor(match: re.Match, now: datetime) -> Optional[datetime]:
        word = group(match, "day")
        offset = offsets.get(fold(word)) if word else None
        if offset is None:
            return None
        return start_of_day(offset, now)

    return anchor


def _weekday_selection(
    match: re.Match, weekdays: Mapping[str, int], directions: Mapping[str, int]
) -> Optional[Tuple[int, int]]:
    """``(weekday, direction)`` from the ``weekday`` and direction groups.

    The direction may be captured before the weekday (``direction``) or after
    it (``post_direction``) and defaults to this week when neither is present.
    """
    weekday_word = group(match, "weekday")
    weekday = weekdays.get(fold(weekday_word)) if weekday_word else None
    if weekday is None:
        return None
    direction_word = group(match, "direction", "post_direction")
    if direction_word is None:
        return weekday, THIS_WEEK
    direction = directions.get(fold(direction_word))
    if direction is None:
        return None
    return weekday, direction


def weekday_anchor(weekdays: Mapping[str, int], directions: Mapping[str, int]) -> Anchor:
    """Anchor on a relative weekday ("next Monday")."""

    def anchor(match: re.Match, now: datetime) -> Optional[datetime]:
        selection = _weekday_selection(match, weekdays, directions)
        if selection is None:
            return None
        return weekday_start(*selection, now)

    return anchor


# ---------------------------------------------------------------------------
# Resolvers
# ---------------------------------------------------------------------------


def relative_day_resolver(offsets: Mapping[str, int]) -> Resolver:
    """Full-day range for "today", "morgen", "hier", ..."""

    def resolve_day(match: re.Match, now: datetime) -> Optional[ResolvedTime]:
        word = group(match, "day")
        offset = offsets.get(fold(word)) if word else None
        if offset is None:
            return None
        return resolve_relative_day(offset, now)

    return resolve_day


def day_offset_resolver(lang: str, direction: int) -> Resolver:
    """Full-day range ``count`` days into the future or the past."""

    def resolve_offset(match: re.Match, now: datetime) -> Optional[ResolvedTime]:
        count = capture_day_count(match, lang)
        if count is None:
            return None
        return resolve_day_offset(count, direction, now)

    return resolve_offset


def clock_resolver(anchor: Anchor = today_anchor) -> Resolver:
    """Point at ``hour[:minute]`` (with optional ``meridiem``) on the anchored day."""

    def resolve_clock(match: re.Match, now: datetime) -> Optional[ResolvedTime]:
        raw_hour = group(match, "hour")
        if raw_hour is None or not raw_hour.isdecimal():
            return None
        hour = meridiem_hour(int(raw_hour), group(match, "meridiem"))
        minute = capture_minute(match)
        if hour is None or minute is None:
            return None
        date = anchor(match, now)
        if date is None:
            return None
        return resolve_time_on_date(date, hour, minute)

    return resolve_clock


def hour_range_resolver(lang: str, anchor: Anchor = today_anchor) -> Resolver:
    """Whole-hour range ``start_hour``..``end_hour`` on the anchored day."""

    def resolve_hours(match: re.Match, now: datetime) -> Optional[ResolvedTime]:
        raw_start = group(match, "start_hour")
        raw_end = group(match, "end_hour")
        if raw_start is None or raw_end is None:
            return None
        start_hour = parse_number(raw_start, lang)
        end_hour = parse_number(raw_end, lang)
        if start_hour is None or end_hour is None:
            return None
        date = anchor(match, now)
        if date is None:
            return None
        return resolve_time_range_on_date(date, start_hour, end_hour)

    return resolve_hours


def last_unit_resolver(units: Mapping[str, str]) -> Resolver:
    """Trailing window for "the last hour", "die letzte Minute", ..."""

    def resolve_unit(match: re.Match, now: datetime) -> Optional[ResolvedTime]:
        word = group(match, "unit")
        unit = units.get(fold(word)) if word else None
        if unit is None:
            return None
        return resolve_last_unit(unit, now)

    return resolve_unit


def weekday_resolver(weekdays: Mapping[str, int], directions: Mapping[str, int]) -> Resolver:
    """Full-day range for "next Friday", "letzten Montag", "ce lundi", ..."""

    def resolve_weekday_range(match: re.Match, now: datetime) -> Optional[ResolvedTime]:
        selection = _weekday_selection(match, weekdays, directions)
        if selection is None:
            return None
        return resolve_weekday(*selection, now)

    return resolve_weekday_range
