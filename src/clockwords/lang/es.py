"""Spanish time expressions.

Recognized forms (case-insensitive, with or without accents):
- relative days: "hoy", "mañana", "ayer"
- day offsets: "hace 3 días", "en dos dias"
- clock times: "a las 3", "a las 15:30", "a la 1"
- trailing windows: "la última hora", "ultimo minuto"
- hour ranges: "entre las 9 y las 12"
- weekdays: "este lunes", "el próximo viernes", "el viernes pasado",
  "el martes que viene"
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
    "hoy", "mañana", "manana", "ayer", "hace", "en", "días", "dias", "día",
    "dia", "hora", "horas", "minuto", "minutos", "entre", "la", "las", "última",
    "ultima", "último", "ultimo",
    "lunes", "martes", "miércoles", "miercoles", "jueves", "viernes",
    "sábado", "sabado", "domingo",
    "este", "próximo", "proximo", "pasado", "viene",
)

PREFIXES = (
    "hoy",
    "man", "mana", "manan", "mañ", "maña", "mañan",
    "aye",
    "ent", "entr",
    "hac",
    "últ", "ulti", "últi", "ultim", "últim",
    "lun", "lune",
    "mar", "mart", "marte",
    "mié", "mie", "miér", "mier", "miérc", "mierc", "miérco", "mierco",
    "miercol", "miércol", "miercole", "miércole",
    "jue", "juev", "jueve",
    "vie", "vier", "vien", "viern", "vierne",
    "sáb", "sab", "sába", "saba", "sábad", "sabad",
    "dom", "domi", "domin", "doming",
    "pró", "pro", "próx", "prox", "próxi", "proxi", "próxim", "proxim",
)

DAY_OFFSETS = {"hoy": 0, "mañana": 1, "manana": 1, "ayer": -1}

WEEKDAYS = {
    "lunes": MONDAY,
    "martes": TUESDAY,
    "miércoles": WEDNESDAY,
    "miercoles": WEDNESDAY,
    "jueves": THURSDAY,
    "viernes": FRIDAY,
    "sábado": SATURDAY,
    "sabado": SATURDAY,
    "domingo": SUNDAY,
}

DIRECTIONS = {
    "este": THIS_WEEK,
    "próximo": NEXT_WEEK,
    "proximo": NEXT_WEEK,
    "que viene": NEXT_WEEK,
    "pasado": LAST_WEEK,
}

LAST_UNITS = {"hora": "hour", "minuto": "minute"}

_NUM = number_pattern("es")
_WEEKDAY_NAMES = "|".join(WEEKDAYS)
_DAY = r"(?P<day>hoy|ma[ñn]ana|ayer)"
# Direction before the weekday ("el próximo viernes") or after it ("el viernes pasado")
_DIRECTION_WEEKDAY = (
    r"(?:el\s+)?(?P<direction>este|pr[óo]ximo|pasado)\s+(?P<weekday>" + _WEEKDAY_NAMES + r")"
)
_WEEKDAY_DIRECTION = (
    r"(?:el\s+)?(?P<weekday>" + _WEEKDAY_NAMES + r")"
    r"\s+(?P<post_direction>pasado|pr[óo]ximo|que\s+viene)"
)
_A_LAS = r"a\s+las?\s+(?P<hour>\d{1,2})(?::(?P<minute>\d{2}))?\b"
_ENTRE = (
    r"entre\s+las\s+(?P<start_hour>" + _NUM + r")\s+y\s+las\s+(?P<end_hour>" + _NUM + r")\b"
)


class Spanish(LanguageParser):
    code = "es"
    name = "Español"
    keywords = KEYWORDS
    prefixes = PREFIXES

    def build_rules(self) -> List[GrammarRule]:
        on_day = day_word_anchor(DAY_OFFSETS)
        on_weekday = weekday_anchor(WEEKDAYS, DIRECTIONS)
        combined = ExpressionKind.COMBINED
        rules = []
        for label, anchor_pattern, anchor in (
            ("direction_weekday", _DIRECTION_WEEKDAY, on_weekday),
            ("weekday_direction", _WEEKDAY_DIRECTION, on_weekday),
            ("day", _DAY, on_day),
        ):
            rules += [
                GrammarRule.compile(
                    rf"\b{anchor_pattern}\s+{_A_LAS}", combined, clock_resolver(anchor),
                    name=f"es.{label}_a_las",
                ),
                GrammarRule.compile(
                    rf"\b{anchor_pattern}\s+{_ENTRE}", combined,
                    hour_range_resolver("es", anchor),
                    name=f"es.{label}_entre",
                ),
            ]
        rules += [
            GrammarRule.compile(
                rf"\b{_DAY}\b", ExpressionKind.RELATIVE_DAY, relative_day_resolver(DAY_OFFSETS),
                name="es.day",
            ),
            GrammarRule.compile(
                rf"\bhace\s+(?P<count>{_NUM})\s+d[ií]as?\b",
                ExpressionKind.RELATIVE_DAY_OFFSET,
                day_offset_resolver("es", -1),
                name="es.hace",
            ),
            GrammarRule.compile(
                rf"\ben\s+(?P<count>{_NUM})\s+d[ií]as?\b",
                ExpressionKind.RELATIVE_DAY_OFFSET,
                day_offset_resolver("es", 1),
                name="es.en_dias",
            ),
            GrammarRule.compile(
                rf"\b{_A_LAS}", ExpressionKind.TIME_SPECIFICATION, clock_resolver(),
                name="es.a_las",
            ),
            GrammarRule.compile(
                r"\b(?:la\s+|el\s+)?[úu]ltim[ao]\s+(?P<unit>hora|minuto)\b",
                ExpressionKind.TIME_RANGE,
                last_unit_resolver(LAST_UNITS),
                name="es.ultima",
            ),
            GrammarRule.compile(
                rf"\b{_ENTRE}", ExpressionKind.TIME_RANGE, hour_range_resolver("es"),
                name="es.entre",
            ),
            GrammarRule.compile(
                rf"\b{_DIRECTION_WEEKDAY}\b", ExpressionKind.RELATIVE_DAY,
                weekday_resolver(WEEKDAYS, DIRECTIONS),
                name="es.direction_weekday",
            ),
            GrammarRule.compile(
                rf"\b{_WEEKDAY_DIRECTION}\b", ExpressionKind.RELATIVE_DAY,
                weekday_resolver(WEEKDAYS, DIRECTIONS),
                name="es.weekday_direction",
            ),
        ]
        return rules
