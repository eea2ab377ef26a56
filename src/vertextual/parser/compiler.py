"""Edge compiler: shorthand text to an ordered, deduplicated edge list.

The compiler is a single forward pass over tokenized lines. Two registers,
the origin and destination of the last line that resolved, supply endpoints
that a line leaves out:

* a missing destination repeats the line's own origin (``A >`` is ``A > A``)
* a missing origin after ``>`` is the last destination
* a missing origin after ``^`` (or a ``>`` with nothing before it) is the
  last origin

Lines that stay incomplete are dropped and leave the registers untouched.
Compilation never fails on text input; malformed lines are simply skipped.
"""

import logging
from enum import Enum

from .lines import tokenize
from .models import CompileResult, Edge, Operator, ParsedLine, SkippedLine, SkipReason

logger = logging.getLogger(__name__)


class SelfLoopPolicy(str, Enum):
    """Whether edges from a node to itself appear in the output."""
    KEEP = "keep"
    DROP = "drop"


class CarryOver:
    """Carry-over registers threaded through one compilation."""

    def __init__(self) -> None:
        self.last_origin: str | None = None
        self.last_destination: str | None = None

    def resolve(self, parsed: ParsedLine) -> Edge | None:
        """Fill omitted endpoints and advance the registers on success."""
        origin = parsed.origin
        destination = parsed.destination

        # Order matters: the self-reference fill sees the written origin only
        if destination is None:
            destination = origin
        if origin is None and parsed.operator == Operator.NEXT:
            origin = self.last_destination
        if origin is None:
            origin = self.last_origin

        if origin is None or destination is None:
            return None

        self.last_origin = origin
        self.last_destination = destination
        return Edge(origin, destination)


class EdgeCompiler:
    """Compile shorthand text into directed edges."""

    def __init__(self, self_loops: SelfLoopPolicy | str = SelfLoopPolicy.KEEP):
        self.self_loops = SelfLoopPolicy(self_loops)

    def compile(self, text: str) -> list[Edge]:
        """Return the ordered, deduplicated edges described by ``text``."""
        return self.compile_with_report(text).edges

    def compile_with_report(self, text: str) -> CompileResult:
        """Compile ``text`` and record every line that produced no edge."""
        if not isinstance(text, str):
            raise TypeError(f"Expected text as str, got {type(text).__name__}")

        result = CompileResult()
        carry = CarryOver()
        seen: set[Edge] = set()

        for line_number, line, parsed in tokenize(text):
            if parsed is None:
                result.skipped.append(SkippedLine(line_number, line, SkipReason.MALFORMED))
                continue

            edge = carry.resolve(parsed)
            if edge is None:
                logger.debug(f"Line {line_number} has no resolvable origin: {line!r}")
                result.skipped.append(SkippedLine(line_number, line, SkipReason.UNRESOLVED))
                continue

            if edge in seen:
                result.skipped.append(SkippedLine(line_number, line, SkipReason.DUPLICATE))
                continue
            seen.add(edge)

            if edge.is_self_loop and self.self_loops == SelfLoopPolicy.DROP:
                result.skipped.append(SkippedLine(line_number, line, SkipReason.SELF_LOOP))
                continue

            result.edges.append(edge)

        logger.debug(
            f"Compiled {len(result.edges)} edges, skipped {len(result.skipped)} lines"
        )
        return result


def compile_edges(text: str, self_loops: SelfLoopPolicy | str = SelfLoopPolicy.KEEP) -> list[Edge]:
    """Compile ``text`` with a fresh compiler."""
    return EdgeCompiler(self_loops).compile(text)
