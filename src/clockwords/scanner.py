"""Time expression scanner.

Entry point for finding relative time expressions in free text:

    scanner = default_scanner()
    for match in scanner.scan("I worked on it yesterday at 3pm"):
        print(match.text(source), match.resolved)

A scan runs in four steps:
1. Keyword prefilter: texts without any time-related word are rejected
   without running a single grammar rule.
2. Every enabled language applies its grammar rules to the whole text.
3. Optionally, a keyword still being typed at the end of the text is
   reported as a partial match.
4. Overlapping candidates are reduced and the result is capped.

Scanners are immutable after construction and may be shared across threads.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Iterable, List, Optional, Sequence

from clockwords.config import DEFAULT_LANGUAGES, ParserConfig, ScannerSettings
from clockwords.lang import get_language
from clockwords.lang.base import LanguageParser, validate_language
from clockwords.models import ExpressionKind, MatchConfidence, Span, TimeMatch
from clockwords.prefilter import KeywordPrefilter, fold_case
from clockwords.ranking import deduplicate
from clockwords.resolve import normalize_now, resolve_relative_day

logger = logging.getLogger(__name__)


class TimeExpressionScanner:
    """Scans text for time expressions in a fixed set of languages."""

    def __init__(
        self,
        languages: Sequence[LanguageParser],
        config: Optional[ParserConfig] = None,
    ) -> None:
        self.languages = tuple(languages)
        for language in self.languages:
            validate_language(language)
        self.config = config or ParserConfig()
        self.prefilter = KeywordPrefilter(
            keywords=[word for language in self.languages for word in language.keywords],
            prefixes=[word for language in self.languages for word in language.prefixes],
        )
        self._prefixes_longest_first = tuple(
            sorted(self.prefilter.prefixes, key=len, reverse=True)
        )
        logger.info(
            f"Scanner ready: languages={self.codes}, "
            f"keywords={len(self.prefilter.keywords)}, prefixes={len(self.prefilter.prefixes)}"
        )

    @property
    def codes(self) -> List[str]:
        return [language.code for language in self.languages]

    def scan(
        self,
        text: str,
        now: Optional[datetime] = None,
        config: Optional[ParserConfig] = None,
    ) -> List[TimeMatch]:
        """Find time expressions in ``text``.

        Args:
            text: Text to scan
            now: Reference instant; defaults to the current UTC time. Naive
                datetimes are taken as UTC.
            config: Overrides the scanner's config for this call

        Returns:
            Non-overlapping matches ordered by start offset. Span offsets
            index ``text`` as a Python string (code points, not bytes); use
            ``Span.byte_range`` to highlight an encoded buffer.
        """
        config = config or self.config
        if not text:
            return []
        if not self.prefilter.contains_candidate(text, include_prefixes=config.report_partial):
            return []

        reference = normalize_now(now if now is not None else datetime.now(timezone.utc))
        if reference is None:
            return []

        candidates: List[TimeMatch] = []
        for language in self.languages:
            candidates.extend(language.parse(text, reference))

        if config.report_partial:
            partial = self._trailing_partial(text, reference, candidates)
            if partial is not None:
                candidates.append(partial)

        return deduplicate(candidates, config.max_matches)

    def _trailing_partial(
        self, text: str, now: datetime, complete: Sequence[TimeMatch]
    ) -> Optional[TimeMatch]:
        """Partial match for a keyword prefix the text ends with, if any.

        The prefix must start a word (text start or after whitespace). The
        longest declared prefix wins.
        """
        folded = fold_case(text)
        span = None
        for prefix in self._prefixes_longest_first:
            if not folded.endswith(prefix):
                continue
            start = len(text) - len(prefix)
            if start == 0 or text[start - 1].isspace():
                span = Span(start, len(text))
                break
        if span is None:
            return None
        for match in complete:
            if match.span.start <= span.start and span.end <= match.span.end:
                return None
        resolved = resolve_relative_day(0, now)
        if resolved is None:
            return None
        return TimeMatch(
            span=span,
            kind=ExpressionKind.RELATIVE_DAY,
            confidence=MatchConfidence.PARTIAL,
            resolved=resolved,
        )

    def __repr__(self) -> str:
        return f"TimeExpressionScanner(languages={self.codes})"


# ---------------------------------------------------------------------------
# Factories
# ---------------------------------------------------------------------------


def scanner_for_languages(
    codes: Iterable[str], config: Optional[ParserConfig] = None
) -> TimeExpressionScanner:
    """Build a scanner for the given language codes.

    Unknown codes are logged and skipped; the order of ``codes`` is kept.
    """
    languages: List[LanguageParser] = []
    seen = set()
    for code in codes:
        key = code.strip().lower()
        if key in seen:
            continue
        seen.add(key)
        language = get_language(key)
        if language is not None:
            languages.append(language)
    return TimeExpressionScanner(languages, config)


def default_scanner(config: Optional[ParserConfig] = None) -> TimeExpressionScanner:
    """Scanner for all built-in languages (en, de, fr, es)."""
    return scanner_for_languages(DEFAULT_LANGUAGES, config)


def scanner_from_settings(settings: ScannerSettings) -> TimeExpressionScanner:
    return scanner_for_languages(settings.languages, settings.parser)
