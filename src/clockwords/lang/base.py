"""Grammar rules and the language module contract.

A language module is a :class:`LanguageParser` subclass that declares:
- ``code``: ISO-639-1 language code
- ``keywords``: words whose presence makes the text worth parsing
- ``prefixes``: typing prefixes (at least 3 characters) of those keywords
- ``build_rules()``: ordered grammar rules, more specific forms first

The scanner never looks beyond this contract, so third-party languages can be
plugged in by subclassing.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, List, Optional, Sequence, Tuple

from clockwords.errors import LanguageModuleError
from clockwords.models import (
    ExpressionKind,
    MatchConfidence,
    ResolvedTime,
    Span,
    TimeMatch,
)

logger = logging.getLogger(__name__)


MIN_PREFIX_LENGTH = 3


Resolver = Callable[[re.Match, datetime], Optional[ResolvedTime]]


@dataclass(frozen=True)
class GrammarRule:
    """A compiled pattern paired with the resolver for its captures.

    The resolver must be pure: given the same match and ``now`` it returns the
    same result and touches no shared state.
    """

    pattern: re.Pattern[str]
    kind: ExpressionKind
    resolver: Resolver
    name: str = ""

    @classmethod
    def compile(
        cls,
        regex: str,
        kind: ExpressionKind,
        resolver: Resolver,
        *,
        name: str = "",
        flags: int = re.IGNORECASE,
    ) -> GrammarRule:
        return cls(
            pattern=re.compile(regex, flags),
            kind=kind,
            resolver=resolver,
            name=name or resolver.__name__,
        )

    def find(self, text: str, now: datetime) -> List[TimeMatch]:
        """Return every occurrence of this rule in ``text`` that resolves."""
        found = []
        for match in self.pattern.finditer(text):
            resolved = self.resolver(match, now)
            if resolved is None:
                if logger.isEnabledFor(logging.DEBUG):
                    logger.debug(f"Rule {self.name} declined '{match.group(0)}'")
                continue
            found.append(
                TimeMatch(
                    span=Span(match.start(), match.end()),
                    kind=self.kind,
                    confidence=MatchConfidence.COMPLETE,
                    resolved=resolved,
                )
            )
        return found


def apply_rules(rules: Sequence[GrammarRule], text: str, now: datetime) -> List[TimeMatch]:
    """Run every rule against the full text and collect resolved matches.

    Rules are independent; overlaps between their results are left to the
    ranking step.
    """
    matches: List[TimeMatch] = []
    for rule in rules:
        matches.extend(rule.find(text, now))
    return matches


class LanguageParser:
    """Base class for a language module."""

    code: str = ""
    name: str = ""
    keywords: Tuple[str, ...] = ()
    prefixes: Tuple[str, ...] = ()

    def __init__(self, rules: Optional[Sequence[GrammarRule]] = None) -> None:
        self.rules: Tuple[GrammarRule, ...] = tuple(
            rules if rules is not None else self.build_rules()
        )
        validate_language(self)

    def build_rules(self) -> List[GrammarRule]:
        raise NotImplementedError

    def parse(self, text: str, now: datetime) -> List[TimeMatch]:
        """Find all complete expressions of this language in ``text``."""
        return apply_rules(self.rules, text, now)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, rules={len(self.rules)})"


def validate_language(language: LanguageParser) -> None:
    """Raise :class:`LanguageModuleError` if ``language`` breaks the contract."""

    details = {"language": type(language).__name__}
    if not language.code:
        raise LanguageModuleError("Language module has no code", details=details)
    if not language.keywords:
        raise LanguageModuleError(
            f"Language '{language.code}' declares no keywords", details=details
        )
    short = [prefix for prefix in language.prefixes if len(prefix) < MIN_PREFIX_LENGTH]
    if short:
        raise LanguageModuleError(
            f"Language '{language.code}' has prefixes shorter than {MIN_PREFIX_LENGTH}: {short}",
            details={**details, "prefixes": short},
        )
    for rule in language.rules:
        if not isinstance(rule, GrammarRule):
            raise LanguageModuleError(
                f"Language '{language.code}' has a rule of type {type(rule).__name__}",
                details=details,
            )


