"""French time expressions.

Recognized forms (case-insensitive, with or without accents):
- relative days: "aujourd'hui", "demain", "hier"
- day offsets: "il y a 3 jours", "dans deux jours"
- clock times: "à 14h", "a 13h30", "à 9 heures"
- trailing windows: "la dernière heure", "derniere minute"
- hour ranges: "entre 9 et 12 heures"
- weekdays: "ce lundi", "vendredi prochain", "mardi dernier"
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


# "a 14h" carries no keyword besides the hour mark itself
HOUR_MARKS = tuple(f"{digit}{space}h" for digit in "0123456789" for space in ("", " "))

KEYWORDS = (
    "aujourd'hui", "aujourd’hui", "aujourd", "demain", "hier", "il y a", "dans",
    "jours", "jour", "heure", "heures", "minute", "minutes", "entre",
    "dernière", "derniere", "la", "à",
    "lundi", "mardi", "mercredi", "jeudi", "vendredi", "samedi", "dimanche",
    "ce", "prochain", "dernier",
) + HOUR_MARKS

PREFIXES = (
    "auj", "aujo", "aujou", "aujour", "aujourd",
    "dem", "dema", "demai",
    "hie",
    "ent", "entr",
    "der", "dern", "derni",
    "lun", "lund",
    "mar", "mard",
    "mer", "merc", "mercr", "mercre", "mercred",
    "jeu", "jeud",
    "ven", "vend", "vendr", "vendre", "vendred",
    "sam", "same", "samed",
    "dim", "dima", "diman", "dimanc", "dimanch",
    "pro", "proc", "proch", "procha", "prochai",
)

DAY_OFFSETS = {"aujourd'hui": 0, "demain": 1, "hier": -1}

WEEKDAYS = {
    "lundi": MONDAY,
    "mardi": TUESDAY,
    "mercredi": WEDNESDAY,
    "jeudi": THURSDAY,
    "vendredi": FRIDAY,
    "samedi": SATURDAY,
    "dimanche": SUNDAY,
}

DIRECTIONS = {"ce": THIS_WEEK, "prochain": NEXT_WEEK, "dernier": LAST_WEEK}

LAST_UNITS = {"heure": "hour", "minute": "minute"}

_NUM = number_pattern("fr")
_WEEKDAY_NAMES = "|".join(WEEKDAYS)
_DAY = r"(?P<day>aujourd['’]hui|demain|hier)"
# "ce lundi" and "lundi prochain" need separate patterns: a group name may appear only once
_THIS_WEEKDAY = r"(?P<direction>ce)\s+(?P<weekday>" + _WEEKDAY_NAMES + r")"
_WEEKDAY_THEN_DIRECTION = (
    r"(?P<weekday>" + _WEEKDAY_NAMES + r")\s+(?P<post_direction>prochain|dernier)"
)
_A_HEURE = r"[àa]\s+(?P<hour>[0-9]{1,2}) ?h(?:eures?|(?P<minute>\d{2}))?\b"
_ENTRE = (
    r"entre\s+(?P<start_hour>" + _NUM + r")\s+et\s+(?P<end_hour>" + _NUM + r")"
    r"(?:\s*heures?)?\b"
)


class French(LanguageParser):
    code = "fr"
    name = "Français"
    keywords = KEYWORDS
    prefixes = PREFIXES

    def build_rules(self) -> List[GrammarRule]:
        on_day = day_word_anchor(DAY_OFFSETS)
        on_weekday = weekday_anchor(WEEKDAYS, DIRECTIONS)
        combined = ExpressionKind.COMBINED
        rules = []
        for label, anchor_pattern, anchor in (
            ("this_weekday", _THIS_WEEKDAY, on_weekday),
            ("weekday", _WEEKDAY_THEN_DIRECTION, on_weekday),
            ("day", _DAY, on_day),
        ):
            rules += [
                GrammarRule.compile(
                    rf"\b{anchor_pattern}\s+{_A_HEURE}", combined, clock_resolver(anchor),
                    name=f"fr.{label}_a",
                ),
                GrammarRule.compile(
                    rf"\b{anchor_pattern}\s+{_ENTRE}", combined,
                    hour_range_resolver("fr", anchor),
                    name=f"fr.{label}_entre",
                ),
            ]
        rules += [
            GrammarRule.compile(
                rf"\b{_DAY}\b", ExpressionKind.RELATIVE_DAY, relative_day_resolver(DAY_OFFSETS),
                name="fr.day",
            ),
            GrammarRule.compile(
                rf"\bil\s+y\s+a\s+(?P<count>{_NUM})\s+jours?\b",
                ExpressionKind.RELATIVE_DAY_OFFSET,
                day_offset_resolver("fr", -1),
                name="fr.il_y_a",
            ),
            GrammarRule.compile(
                rf"\bdans\s+(?P<count>{_NUM})\s+jours?\b",
                ExpressionKind.RELATIVE_DAY_OFFSET,
                day_offset_resolver("fr", 1),
                name="fr.dans",
            ),
            GrammarRule.compile(
                rf"\b{_A_HEURE}", ExpressionKind.TIME_SPECIFICATION, clock_resolver(),
                name="fr.a_heure",
            ),
            GrammarRule.compile(
                r"\b(?:la\s+)?derni[èe]re\s+(?P<unit>heure|minute)\b",
                ExpressionKind.TIME_RANGE,
                last_unit_resolver(LAST_UNITS),
                name="fr.derniere",
            ),
            GrammarRule.compile(
                rf"\b{_ENTRE}", ExpressionKind.TIME_RANGE, hour_range_resolver("fr"),
                name="fr.entre",
            ),
            GrammarRule.compile(
                rf"\b{_THIS_WEEKDAY}\b", ExpressionKind.RELATIVE_DAY,
                weekday_resolver(WEEKDAYS, DIRECTIONS),
                name="fr.this_weekday",
            ),
            GrammarRule.compile(
                rf"\b{_WEEKDAY_THEN_DIRECTION}\b", ExpressionKind.RELATIVE_DAY,
                weekday_resolver(WEEKDAYS, DIRECTIONS),
                name="fr.weekday",
            ),
        ]
        return rules
