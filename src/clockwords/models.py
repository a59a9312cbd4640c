"""Data models for time expression matches.

This module defines the value types produced by a scan:
- Span: offsets of a matched expression in the scanned text
- ExpressionKind / MatchConfidence: how and how completely it matched
- ResolvedPoint / ResolvedRange: the concrete UTC time it refers to
- TimeMatch: the unit of output combining all of the above

Every type here is immutable. A scan builds fresh instances on each call and
never mutates them afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum, IntEnum
from typing import Any, Dict, Tuple, Union


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------


class ExpressionKind(str, Enum):
    """Structural category of a matched expression.

    Assigned by the grammar rule that produced the match.
    """

    RELATIVE_DAY = "relative_day"                # "today", "gestern", "el próximo lunes"
    RELATIVE_DAY_OFFSET = "relative_day_offset"  # "in 4 days", "vor 3 Tagen"
    TIME_SPECIFICATION = "time_specification"    # "at 3pm", "um 15 Uhr", "à 13h"
    TIME_RANGE = "time_range"                    # "the last hour", "von 9 bis 12 Uhr"
    COMBINED = "combined"                        # "yesterday at 3pm", "hier à 13h"


class MatchConfidence(IntEnum):
    """Whether a match is a full expression or a prefix still being typed.

    Ordering is ``PARTIAL < COMPLETE``; ranking relies on it.
    """

    PARTIAL = 0
    COMPLETE = 1


# ---------------------------------------------------------------------------
# Spans
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Span:
    """Half-open ``[start, end)`` offsets into the scanned string.

    Offsets index the Python ``str`` that was scanned, so
    ``text[span.start:span.end]`` yields the matched substring. Use
    :meth:`byte_range` when a consumer addresses the UTF-8 encoded buffer.
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 0 or self.end < self.start:
            raise ValueError(f"Invalid span [{self.start}, {self.end})")

    def __len__(self) -> int:
        return self.end - self.start

    @property
    def is_empty(self) -> bool:
        return self.start == self.end

    def overlaps(self, other: Span) -> bool:
        """Return True if both spans share at least one position."""
        return self.start < other.end and other.start < self.end

    def as_slice(self) -> slice:
        return slice(self.start, self.end)

    def byte_range(self, text: str) -> Tuple[int, int]:
        """Convert to UTF-8 byte offsets within ``text``."""
        byte_start = len(text[: self.start].encode("utf-8"))
        byte_end = byte_start + len(text[self.start:self.end].encode("utf-8"))
        return byte_start, byte_end


# ---------------------------------------------------------------------------
# Resolved times
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ResolvedPoint:
    """A single instant in UTC (e.g. "yesterday at 3pm")."""

    instant: datetime

    def to_dict(self) -> Dict[str, Any]:
        return {"type": "point", "instant": self.instant.isoformat()}


@dataclass(frozen=True)
class ResolvedRange:
    """An interval in UTC with inclusive start and exclusive end.

    Produced by full-day expressions ("today"), hour ranges ("between 9 and
    12") and trailing windows ("the last hour").
    """

    start: datetime
    end: datetime

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise ValueError(
                f"Range start {self.start.isoformat()} is after end {self.end.isoformat()}"
            )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": "range",
            "start": self.start.isoformat(),
            "end": self.end.isoformat(),
        }


ResolvedTime = Union[ResolvedPoint, ResolvedRange]


# ---------------------------------------------------------------------------
# Match result
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class TimeMatch:
    """A time expression found in the scanned text.

    For :attr:`MatchConfidence.PARTIAL` matches the resolved time is a
    best-effort placeholder (today's full day) and should only be used for
    display hints.
    """

    span: Span
    kind: ExpressionKind
    confidence: MatchConfidence
    resolved: ResolvedTime

    @property
    def is_partial(self) -> bool:
        return self.confidence is MatchConfidence.PARTIAL

    def text(self, source: str) -> str:
        """Return the matched substring of ``source``."""
        return source[self.span.as_slice()]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "start": self.span.start,
            "end": self.span.end,
            "kind": self.kind.value,
            "confidence": self.confidence.name.lower(),
            "resolved": self.resolved.to_dict(),
        }
