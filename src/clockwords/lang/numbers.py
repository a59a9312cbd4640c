"""Written number words per language.

Covers the numbers that realistically appear in relative day counts and
hour ranges (1-20 and 30). Accent-free spellings are listed next to the
accented ones so "fuenf" resolves like "fünf".
"""

from __future__ import annotations

import re
from typing import Dict, Optional


NUMBER_WORDS: Dict[str, Dict[str, int]] = {
    "en": {
        "one": 1, "two": 2, "three": 3, "four": 4, "five": 5,
        "six": 6, "seven": 7, "eight": 8, "nine": 9, "ten": 10,
        "eleven": 11, "twelve": 12, "thirteen": 13, "fourteen": 14,
        "fifteen": 15, "sixteen": 16, "seventeen": 17, "eighteen": 18,
        "nineteen": 19, "twenty": 20, "thirty": 30,
    },
    "de": {
        "ein": 1, "eins": 1, "eine": 1, "einem": 1, "einen": 1,
        "zwei": 2, "drei": 3, "vier": 4,
        "fünf": 5, "fuenf": 5, "funf": 5,
        "sechs": 6, "sieben": 7, "acht": 8, "neun": 9, "zehn": 10,
        "elf": 11, "zwölf": 12, "zwoelf": 12,
        "dreizehn": 13, "vierzehn": 14, "fünfzehn": 15, "fuenfzehn": 15,
        "sechzehn": 16, "siebzehn": 17, "achtzehn": 18, "neunzehn": 19,
        "zwanzig": 20, "dreißig": 30, "dreissig": 30,
    },
    "fr": {
        "un": 1, "une": 1, "deux": 2, "trois": 3, "quatre": 4, "cinq": 5,
        "six": 6, "sept": 7, "huit": 8, "neuf": 9, "dix": 10,
        "onze": 11, "douze": 12, "treize": 13, "quatorze": 14,
        "quinze": 15, "seize": 16, "vingt": 20, "trente": 30,
    },
    "es": {
        "un": 1, "uno": 1, "una": 1, "dos": 2, "tres": 3, "cuatro": 4,
        "cinco": 5, "seis": 6, "siete": 7, "ocho": 8, "nueve": 9,
        "diez": 10, "once": 11, "doce": 12, "trece": 13, "catorce": 14,
        "quince": 15, "veinte": 20, "treinta": 30,
    },
}


# Day counts stop at 30 and hours at 23, so two digits cover every number a rule uses
MAX_DIGITS = 2


def number_pattern(lang: str) -> str:
    """Regex alternation matching digits or any number word of ``lang``.

    Longer words come first so "dreizehn" is not cut short at "drei".
    """
    words = sorted(NUMBER_WORDS[lang], key=len, reverse=True)
    return rf"(?:\d{{1,{MAX_DIGITS}}}|" + "|".join(re.escape(word) for word in words) + ")"


def parse_number(token: str, lang: str) -> Optional[int]:
    """Parse a digit string or a number word of ``lang``.

    Returns ``None`` for words outside the lexicon and for digit strings
    longer than ``MAX_DIGITS``.
    """
    token = token.strip()
    if token.isdecimal():
        if len(token) > MAX_DIGITS:
            return None
        return int(token)
    return NUMBER_WORDS.get(lang, {}).get(token.lower())
