"""Overlap resolution for candidate matches.

Different rules (and different languages) routinely match overlapping text:
"tomorrow at 3pm" is found as a combined expression, as "tomorrow" and as
"at 3pm". The deduplicator keeps a set of non-overlapping matches, replacing
an accepted match only by a candidate that strictly dominates it.

Dominance compares, in order: confidence (complete beats partial), span
length (longer wins) and start position (earlier wins).
"""

from __future__ import annotations

from typing import Iterable, List, Tuple

from clockwords.models import TimeMatch


def preference_key(match: TimeMatch) -> Tuple[int, int, int]:
    """Sort key where a larger value means a more preferred match."""
    return (int(match.confidence), len(match.span), -match.span.start)


def dominates(candidate: TimeMatch, incumbent: TimeMatch) -> bool:
    return preference_key(candidate) > preference_key(incumbent)


def deduplicate(candidates: Iterable[TimeMatch], max_matches: int) -> List[TimeMatch]:
    """Reduce ``candidates`` to non-overlapping matches ordered by start.

    Candidates are swept in order of start position (longer first on ties).
    A candidate overlapping nothing is accepted; one overlapping exactly one
    accepted match replaces it if it dominates; one overlapping several is
    discarded. Chains are resolved pairwise only, so the result is not a
    global optimum.
    """
    ordered = sorted(candidates, key=lambda m: (m.span.start, -m.span.end))
    accepted: List[TimeMatch] = []
    for candidate in ordered:
        overlapping = [i for i, kept in enumerate(accepted) if kept.span.overlaps(candidate.span)]
        if not overlapping:
            accepted.append(candidate)
        elif len(overlapping) == 1:
            index = overlapping[0]
            if dominates(candidate, accepted[index]):
                accepted[index] = candidate
    accepted.sort(key=lambda m: m.span.start)
    return accepted[:max_matches]
