"""German time expressions.

Recognized forms (case-insensitive, umlauts or their "ae" spellings):
- relative days: "heute", "morgen", "gestern"
- day offsets: "vor 3 Tagen", "in zwei Tagen"
- clock times: "um 15 Uhr", "um 15:30 Uhr"
- trailing windows: "die letzte Stunde", "letzte Minute"
- hour ranges: "von 9 bis 12 Uhr", "zwischen 9 und 12"
- weekdays: "nächsten Freitag", "am letzten Montag", "diesen Sonntag"
- any relative day or weekday followed by a clock time or hour range
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
    "heute", "morgen", "gestern", "vor", "tagen", "tag", "uhr", "um",
    "zwischen", "bis", "von", "letzte", "letzten", "stunde", "stunden",
    "minute", "minuten", "nächsten", "naechsten", "kommenden", "vergangenen",
    "diesen", "montag", "dienstag", "mittwoch", "donnerstag", "freitag",
    "samstag", "sonnabend", "sonntag",
)

PREFIXES = (
    "heu", "heut",
    "mor", "morg", "morge",
    "ges", "gest", "geste", "gester",
    "zwi", "zwis", "zwisc", "zwisch", "zwische",
    "mon", "mont", "monta",
    "die", "dien", "diens", "dienst", "diensta",
    "mit", "mitt", "mittw", "mittwo", "mittwoc",
    "don", "donn", "donne", "donner", "donners", "donnerst", "donnersta",
    "fre", "frei", "freit", "freita",
    "sam", "sams", "samst", "samsta",
    "son", "sonn", "sonnt", "sonnta",
)

DAY_OFFSETS = {"heute": 0, "morgen": 1, "gestern": -1}

WEEKDAYS = {
    "montag": MONDAY,
    "dienstag": TUESDAY,
    "mittwoch": WEDNESDAY,
    "donnerstag": THURSDAY,
    "freitag": FRIDAY,
    "samstag": SATURDAY,
    "sonnabend": SATURDAY,
    "sonntag": SUNDAY,
}

DIRECTIONS = {
    "nächsten": NEXT_WEEK,
    "naechsten": NEXT_WEEK,
    "nachsten": NEXT_WEEK,
    "kommenden": NEXT_WEEK,
    "letzten": LAST_WEEK,
    "vergangenen": LAST_WEEK,
    "diesen": THIS_WEEK,
}

LAST_UNITS = {"stunde": "hour", "minute": "minute"}

_NUM = number_pattern("de")
_DAY = r"(?P<day>heute|morgen|gestern)"
_WEEKDAY = (
    r"(?:am\s+)?(?P<direction>n(?:ä|ae|a)chsten|kommenden|letzten|vergangenen|diesen)"
    r"\s+(?P<weekday>" + "|".join(WEEKDAYS) + r")"
)
_UM_UHR = r"um\s+(?P<hour>\d{1,2})(?:[:.](?P<minute>\d{2}))?\s*Uhr\b"
_VON_BIS = (
    r"von\s+(?P<start_hour>" + _NUM + r")\s+bis\s+(?P<end_hour>" + _NUM + r")\s*Uhr\b"
)
_ZWISCHEN = (
    r"zwischen\s+(?P<start_hour>" + _NUM + r")\s+und\s+(?P<end_hour>" + _NUM + r")"
    r"(?:\s*Uhr)?\b"
)


class German(LanguageParser):
    code = "de"
    name = "Deutsch"
    keywords = KEYWORDS
    prefixes = PREFIXES

    def build_rules(self) -> List[GrammarRule]:
        on_day = day_word_anchor(DAY_OFFSETS)
        on_weekday = weekday_anchor(WEEKDAYS, DIRECTIONS)
        combined = ExpressionKind.COMBINED
        rules = []
        for label, anchor_pattern, anchor in (
            ("weekday", _WEEKDAY, on_weekday),
            ("day", _DAY, on_day),
        ):
            rules += [
                GrammarRule.compile(
                    rf"\b{anchor_pattern}\s+{_UM_UHR}", combined, clock_resolver(anchor),
                    name=f"de.{label}_um",
                ),
                GrammarRule.compile(
                    rf"\b{anchor_pattern}\s+{_VON_BIS}", combined,
                    hour_range_resolver("de", anchor),
                    name=f"de.{label}_von_bis",
                ),
                GrammarRule.compile(
                    rf"\b{anchor_pattern}\s+{_ZWISCHEN}", combined,
                    hour_range_resolver("de", anchor),
                    name=f"de.{label}_zwischen",
                ),
            ]
        rules += [
            GrammarRule.compile(
                rf"\b{_DAY}\b", ExpressionKind.RELATIVE_DAY, relative_day_resolver(DAY_OFFSETS),
                name="de.day",
            ),
            GrammarRule.compile(
                rf"\bvor\s+(?P<count>{_NUM})\s+Tagen?\b",
                ExpressionKind.RELATIVE_DAY_OFFSET,
                day_offset_resolver("de", -1),
                name="de.vor_tagen",
            ),
            GrammarRule.compile(
                rf"\bin\s+(?P<count>{_NUM})\s+Tagen?\b",
                ExpressionKind.RELATIVE_DAY_OFFSET,
                day_offset_resolver("de", 1),
                name="de.in_tagen",
            ),
            GrammarRule.compile(
                rf"\b{_UM_UHR}", ExpressionKind.TIME_SPECIFICATION, clock_resolver(),
                name="de.um_uhr",
            ),
            GrammarRule.compile(
                r"\b(?:die\s+)?letzte\s+(?P<unit>Stunde|Minute)\b",
                ExpressionKind.TIME_RANGE,
                last_unit_resolver(LAST_UNITS),
                name="de.letzte",
            ),
            GrammarRule.compile(
                rf"\b{_VON_BIS}", ExpressionKind.TIME_RANGE, hour_range_resolver("de"),
                name="de.von_bis",
            ),
            GrammarRule.compile(
                rf"\b{_ZWISCHEN}", ExpressionKind.TIME_RANGE, hour_range_resolver("de"),
                name="de.zwischen",
            ),
            GrammarRule.compile(
                rf"\b{_WEEKDAY}\b", ExpressionKind.RELATIVE_DAY, weekday_resolver(WEEKDAYS, DIRECTIONS),
                name="de.weekday",
            ),
        ]
        return rules
