"""Keyword prefilter.

Scanning a chat message with every grammar rule of every language is far more
expensive than checking whether the message contains any time-related word at
all. The prefilter answers that question in a single pass over the text using
Aho-Corasick automata (``pyahocorasick``), one for complete keywords and one
for typing prefixes.

Matching is substring-based and case-insensitive: keywords and text are
lowercased the same way before matching. Each call therefore builds one
lowercased copy of the text before the automaton runs, so rejecting a text
costs a single linear pass plus that copy.
"""

from __future__ import annotations

import logging
from typing import Iterable, Set, Tuple

import ahocorasick

from clockwords.errors import LanguageModuleError
from clockwords.lang.base import MIN_PREFIX_LENGTH

logger = logging.getLogger(__name__)


def fold_case(text: str) -> str:
    """Lowercase ``text`` without changing its length.

    ``str.lower`` can expand a character ("İ" becomes two code points); such
    characters are left as they are so automaton positions stay aligned with
    the original text.
    """
    lowered = text.lower()
    if len(lowered) == len(text):
        return lowered
    return "".join(
        folded if len(folded) == 1 else char
        for char, folded in ((char, char.lower()) for char in text)
    )


class KeywordPrefilter:
    """Multi-pattern matcher over keywords and typing prefixes."""

    def __init__(self, keywords: Iterable[str], prefixes: Iterable[str] = ()) -> None:
        self.keywords: Tuple[str, ...] = tuple(sorted({fold_case(k) for k in keywords if k}))
        self.prefixes: Tuple[str, ...] = tuple(sorted({fold_case(p) for p in prefixes if p}))
        short = [prefix for prefix in self.prefixes if len(prefix) < MIN_PREFIX_LENGTH]
        if short:
            raise LanguageModuleError(
                f"Prefixes must be at least {MIN_PREFIX_LENGTH} characters: {short}",
                details={"prefixes": short},
            )
        self._keyword_automaton = _build_automaton(self.keywords)
        self._prefix_automaton = _build_automaton(self.prefixes)
        logger.debug(
            f"Built prefilter with {len(self.keywords)} keywords and {len(self.prefixes)} prefixes"
        )

    def contains_keyword(self, text: str) -> bool:
        return _first_hit(self._keyword_automaton, fold_case(text))

    def contains_prefix(self, text: str) -> bool:
        return _first_hit(self._prefix_automaton, fold_case(text))

    def contains_candidate(self, text: str, include_prefixes: bool = True) -> bool:
        """True if ``text`` contains a keyword, or a prefix when ``include_prefixes``."""
        folded = fold_case(text)
        if _first_hit(self._keyword_automaton, folded):
            return True
        return include_prefixes and _first_hit(self._prefix_automaton, folded)

    def matches(self, text: str, include_prefixes: bool = True) -> Set[Tuple[int, str]]:
        """All ``(start position, word)`` hits in ``text``."""
        folded = fold_case(text)
        hits = set(_iter_hits(self._keyword_automaton, folded))
        if include_prefixes:
            hits.update(_iter_hits(self._prefix_automaton, folded))
        return hits

    def __repr__(self) -> str:
        return f"KeywordPrefilter(keywords={len(self.keywords)}, prefixes={len(self.prefixes)})"


def _build_automaton(words: Tuple[str, ...]) -> ahocorasick.Automaton:
    automaton = ahocorasick.Automaton()
    for word in words:
        automaton.add_word(word, word)
    if words:
        automaton.make_automaton()
    return automaton


def _iter_hits(automaton: ahocorasick.Automaton, folded: str):
    # An automaton without words was never finalized and cannot be searched
    if len(automaton) == 0:
        return
    for end_index, word in automaton.iter(folded):
        yield end_index - len(word) + 1, word


def _first_hit(automaton: ahocorasick.Automaton, folded: str) -> bool:
    for _ in _iter_hits(automaton, folded):
        return True
    return False
