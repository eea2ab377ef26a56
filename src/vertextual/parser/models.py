"""Data models for the shorthand edge compiler."""

from dataclasses import dataclass, field
from enum import Enum
from typing import NamedTuple


class Operator(str, Enum):
    """Operators selecting the carry-over rule for an omitted origin."""
    NEXT = ">"     # Reuse the last destination as origin
    SIBLING = "^"  # Reuse the last origin as origin


class SkipReason(str, Enum):
    """Why a line did not contribute an edge."""
    MALFORMED = "malformed"
    UNRESOLVED = "unresolved"
    DUPLICATE = "duplicate"
    SELF_LOOP = "self-loop"


@dataclass(frozen=True)
class ParsedLine:
    """A tokenized, not yet resolved, input line."""
    line_number: int
    text: str
    origin: str | None
    operator: Operator
    destination: str | None


class Edge(NamedTuple):
    """Directed edge between two named nodes."""
    source: str
    target: str

    @property
    def is_self_loop(self) -> bool:
        return self.source == self.target

    def __str__(self) -> str:
        return f"{self.source} > {self.target}"


@dataclass(frozen=True)
class SkippedLine:
    """A non-empty input line that produced no output edge."""
    line_number: int
    text: str
    reason: SkipReason

    def __str__(self) -> str:
        return f"line {self.line_number} ({self.reason.value}): {self.text}"


@dataclass
class CompileResult:
    """Edges of one compilation together with the lines that were skipped."""
    edges: list[Edge] = field(default_factory=list)
    skipped: list[SkippedLine] = field(default_factory=list)

    @property
    def nodes(self) -> list[str]:
        """Node names in order of first appearance."""
        seen: dict[str, None] = {}
        for edge in self.edges:
            seen.setdefault(edge.source)
            seen.setdefault(edge.target)
        return list(seen)

    def skipped_by_reason(self, reason: SkipReason) -> list[SkippedLine]:
        return [line for line in self.skipped if line.reason == reason]
