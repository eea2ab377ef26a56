"""Line splitting and tokenization of the edge shorthand.

Each non-empty line is matched against a single anchored pattern::

    [origin] [ws] operator [ws] [destination]

where ``operator`` is ``>`` or ``^``. The origin is the shortest leading run
before the first operator character and the destination is the remainder of
the line, so ``A > B > C`` reads as origin ``A`` and destination ``B > C``.
Lines that do not match are reported as ``None`` and never raise.
"""

import logging
import re
from collections.abc import Iterator

from .models import Operator, ParsedLine

logger = logging.getLogger(__name__)

LINE_PATTERN = re.compile(
    r"(?P<origin>.*?)\s*(?P<operator>[>^])\s*(?P<destination>.*)"
)

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def split_lines(text: str) -> Iterator[tuple[int, str]]:
    """Yield ``(line_number, line)`` for every non-empty line.

    Line numbers are 1-based and count blank lines, so they point back at
    the position in the original text.
    """
    for line_number, line in enumerate(_LINE_BREAK.split(text), start=1):
        if line:
            yield line_number, line


def _field(value: str) -> str | None:
    value = value.strip()
    return value or None


def tokenize_line(line: str, line_number: int = 0) -> ParsedLine | None:
    """Split one line into origin, operator and destination.

    Returns:
        ParsedLine with absent fields as ``None``, or ``None`` when the line
        does not contain an operator.
    """
    match = LINE_PATTERN.fullmatch(line)
    if match is None:
        return None

    return ParsedLine(
        line_number=line_number,
        text=line,
        origin=_field(match.group("origin")),
        operator=Operator(match.group("operator")),
        destination=_field(match.group("destination")),
    )


def tokenize(text: str) -> Iterator[tuple[int, str, ParsedLine | None]]:
    """Tokenize every non-empty line of ``text`` in input order."""
    for line_number, line in split_lines(text):
        parsed = tokenize_line(line, line_number)
        if parsed is None:
            logger.debug(f"Line {line_number} has no operator: {line!r}")
        yield line_number, line, parsed
