"""Multilingual relative time expression detection.

Finds expressions such as "yesterday at 3pm", "vor 3 Tagen", "ce lundi à 14h"
or "el viernes pasado" in free text and resolves each to a concrete UTC
instant or interval relative to a reference time.

Usage:
    from clockwords import default_scanner

    matches = default_scanner().scan("See you tomorrow at 5pm")
"""

from clockwords.config import (
    DEFAULT_LANGUAGES,
    ParserConfig,
    ScannerSettings,
    load_settings,
    save_settings,
    settings_from_env,
)
from clockwords.errors import ClockwordsError, ConfigurationError, LanguageModuleError
from clockwords.lang import LANGUAGES, GrammarRule, LanguageParser, get_language
from clockwords.models import (
    # Enums
    ExpressionKind,
    MatchConfidence,
    # Values
    ResolvedPoint,
    ResolvedRange,
    ResolvedTime,
    Span,
    TimeMatch,
)
from clockwords.prefilter import KeywordPrefilter
from clockwords.scanner import (
    TimeExpressionScanner,
    default_scanner,
    scanner_for_languages,
    scanner_from_settings,
)

__version__ = "0.1.0"

__all__ = [
    # Scanning
    "TimeExpressionScanner",
    "default_scanner",
    "scanner_for_languages",
    "scanner_from_settings",
    # Models
    "ExpressionKind",
    "MatchConfidence",
    "ResolvedPoint",
    "ResolvedRange",
    "ResolvedTime",
    "Span",
    "TimeMatch",
    # Languages
    "LANGUAGES",
    "GrammarRule",
    "LanguageParser",
    "KeywordPrefilter",
    "get_language",
    # Configuration
    "DEFAULT_LANGUAGES",
    "ParserConfig",
    "ScannerSettings",
    "load_settings",
    "save_settings",
    "settings_from_env",
    # Errors
    "ClockwordsError",
    "ConfigurationError",
    "LanguageModuleError",
]
