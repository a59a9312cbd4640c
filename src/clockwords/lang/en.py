"""English time expressions.

Recognized forms (case-insensitive):
- relative days: "today", "tomorrow", "yesterday"
- day offsets: "in 3 days", "two days ago"
- clock times: "at 3pm", "3:30 pm", "5 o'clock"
- trailing windows: "the last hour", "last minute"
- hour ranges: "between 9 and 17", "from nine to five o'clock"
- weekdays: "next Friday", "last Monday", "this Sunday"
- any relative day or weekday followed by a clock time or hour range

Combined forms are listed first so they win over their parts during ranking.
"""

from __future__ import annotations

from typing import List

from clockwords.lang.base import GrammarRule, LanguageParser
from clockwords.lang.numbers import number_pattern
from clockwords.lang.resolvers import (
    clock_resolver,
    day_offset_resolver,
    day_word_anchor,
    hour_range_resolver,
    last_unit_resolver,
    relative_day_resolver,
    weekday_anchor,
    weekday_resolver,
)
from clockwords.models import ExpressionKind
from clockwords.resolve import (
    FRIDAY,
    LAST_WEEK,
    MONDAY,
    NEXT_WEEK,
    SATURDAY,
    SUNDAY,
    THIS_WEEK,
    THURSDAY,
    TUESDAY,
    WEDNESDAY,
)


KEYWORDS = (
    "today", "tomorrow", "yesterday", "ago", "last", "hour", "hours",
    "o'clock", "o’clock", "oclock", "am", "pm", "a.m.", "p.m.", "between", "from", "at", "in",
    "day", "days", "minute", "minutes", "next", "this",
    "monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday",
)

PREFIXES = (
    "tod", "toda",
    "tom", "tomo", "tomor", "tomorr", "tomorro",
    "yes", "yest", "yeste", "yester", "yesterd", "yesterda",
    "bet", "betw", "betwe", "betwee",
    "mon", "mond", "monda",
    "tue", "tues", "tuesd", "tuesda",
    "wed", "wedn", "wedne", "wednes", "wednesd", "wednesda",
    "thu", "thur", "thurs", "thursd", "thursda",
    "fri", "frid", "frida",
    "sat", "satu", "satur", "saturd", "saturda",
    "sun", "sund", "sunda",
)

DAY_OFFSETS = {"today": 0, "tomorrow": 1, "yesterday": -1}

WEEKDAYS = {
    "monday": MONDAY,
    "tuesday": TUESDAY,
    "wednesday": WEDNESDAY,
    "thursday": THURSDAY,
    "friday": FRIDAY,
    "saturday": SATURDAY,
    "sunday": SUNDAY,
}

DIRECTIONS = {"next": NEXT_WEEK, "last": LAST_WEEK, "this": THIS_WEEK}

LAST_UNITS = {"hour": "hour", "minute": "minute"}

_NUM = number_pattern("en")
_OCLOCK = r"o['’]?clock"
_DAY = r"(?P<day>today|tomorrow|yesterday)"
_WEEKDAY = r"(?P<direction>next|last|this)\s+(?P<weekday>" + "|".join(WEEKDAYS) + r")"
_MERIDIEM = r"(?P<meridiem>[ap]\.m\.|[ap]m|" + _OCLOCK + r")(?!\w)"
_AT_CLOCK = r"at\s+(?P<hour>\d{1,2})(?::(?P<minute>\d{2}))?\s*" + _MERIDIEM
_BETWEEN = (
    r"between\s+(?P<start_hour>" + _NUM + r")\s+and\s+(?P<end_hour>" + _NUM + r")"
    r"(?:\s*" + _OCLOCK + r")?\b"
)
_FROM_TO = (
    r"from\s+(?P<start_hour>" + _NUM + r")\s+to\s+(?P<end_hour>" + _NUM + r")"
    r"(?:\s*" + _OCLOCK + r")?\b"
)


class English(LanguageParser):
    code = "en"
    name = "English"
    keywords = KEYWORDS
    prefixes = PREFIXES

    def build_rules(self) -> List[GrammarRule]:
        on_day = day_word_anchor(DAY_OFFSETS)
        on_weekday = weekday_anchor(WEEKDAYS, DIRECTIONS)
        combined = ExpressionKind.COMBINED
        return [
            GrammarRule.compile(
                rf"\b{_WEEKDAY}\s+{_AT_CLOCK}", combined, clock_resolver(on_weekday),
                name="en.weekday_at",
            ),
            GrammarRule.compile(
                rf"\b{_WEEKDAY}\s+{_BETWEEN}", combined, hour_range_resolver("en", on_weekday),
                name="en.weekday_between",
            ),
            GrammarRule.compile(
                rf"\b{_WEEKDAY}\s+{_FROM_TO}", combined, hour_range_resolver("en", on_weekday),
                name="en.weekday_from_to",
            ),
            GrammarRule.compile(
                rf"\b{_DAY}\s+{_AT_CLOCK}", combined, clock_resolver(on_day),
                name="en.day_at",
            ),
            GrammarRule.compile(
                rf"\b{_DAY}\s+{_BETWEEN}", combined, hour_range_resolver("en", on_day),
                name="en.day_between",
            ),
            GrammarRule.compile(
                rf"\b{_DAY}\s+{_FROM_TO}", combined, hour_range_resolver("en", on_day),
                name="en.day_from_to",
            ),
            GrammarRule.compile(
                rf"\b{_DAY}\b", ExpressionKind.RELATIVE_DAY, relative_day_resolver(DAY_OFFSETS),
                name="en.day",
            ),
            GrammarRule.compile(
                rf"\bin\s+(?P<count>{_NUM})\s+days?\b",
                ExpressionKind.RELATIVE_DAY_OFFSET,
                day_offset_resolver("en", 1),
                name="en.in_days",
            ),
            GrammarRule.compile(
                rf"\b(?P<count>{_NUM})\s+days?\s+ago\b",
                ExpressionKind.RELATIVE_DAY_OFFSET,
                day_offset_resolver("en", -1),
                name="en.days_ago",
            ),
            GrammarRule.compile(
                r"\b(?:at\s+)?(?P<hour>\d{1,2})(?::(?P<minute>\d{2}))?\s*" + _MERIDIEM,
                ExpressionKind.TIME_SPECIFICATION,
                clock_resolver(),
                name="en.clock",
            ),
            GrammarRule.compile(
                r"\b(?:the\s+)?last\s+(?P<unit>hour|minute)\b",
                ExpressionKind.TIME_RANGE,
                last_unit_resolver(LAST_UNITS),
                name="en.last_unit",
            ),
            GrammarRule.compile(
                rf"\b{_BETWEEN}", ExpressionKind.TIME_RANGE, hour_range_resolver("en"),
                name="en.between",
            ),
            GrammarRule.compile(
                rf"\b{_FROM_TO}", ExpressionKind.TIME_RANGE, hour_range_resolver("en"),
                name="en.from_to",
            ),
            GrammarRule.compile(
                rf"\b{_WEEKDAY}\b", ExpressionKind.RELATIVE_DAY, weekday_resolver(WEEKDAYS, DIRECTIONS),
                name="en.weekday",
            ),
        ]
