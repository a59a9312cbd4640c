"""Built-in language modules.

Each language is a :class:`LanguageParser` subclass registered here under its
ISO-639-1 code. Use :func:`get_language` to instantiate one by code.
"""

from __future__ import annotations

import logging
from typing import Dict, Optional, Type

from clockwords.lang.base import GrammarRule, LanguageParser, apply_rules, validate_language
from clockwords.lang.de import German
from clockwords.lang.en import English
from clockwords.lang.es import Spanish
from clockwords.lang.fr import French

logger = logging.getLogger(__name__)


LANGUAGES: Dict[str, Type[LanguageParser]] = {
    English.code: English,
    German.code: German,
    French.code: French,
    Spanish.code: Spanish,
}


def get_language(code: str) -> Optional[LanguageParser]:
    """Instantiate the built-in language for ``code``.

    Returns ``None`` (and logs a warning) when no such language exists.
    """
    language_cls = LANGUAGES.get(code.strip().lower())
    if language_cls is None:
        logger.warning(f"Unknown language code '{code}' ignored")
        return None
    return language_cls()


__all__ = [
    "LANGUAGES",
    "English",
    "French",
    "German",
    "GrammarRule",
    "LanguageParser",
    "Spanish",
    "apply_rules",
    "get_language",
    "validate_language",
]
