"""Edge list exporters producing copy-pasteable code literals."""

import csv
import io
import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable

from ..parser.models import Edge

logger = logging.getLogger(__name__)

COLUMNS = ("from", "to")


def quote(value: str) -> str:
    """Double-quote a field for a code literal."""
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


class EdgeExporter(ABC):
    """Abstract base class for edge list exporters."""

    @property
    @abstractmethod
    def format_name(self) -> str:
        """Name of the export format."""
        pass

    @abstractmethod
    def get_file_extension(self) -> str:
        """Get file extension for this format."""
        pass

    @abstractmethod
    def export(self, edges: Iterable[Edge]) -> str:
        """Render edges as text, one row per edge in the given order."""
        pass


class TribbleExporter(EdgeExporter):
    """R ``tibble::tribble()`` call with ``from`` and ``to`` columns."""

    def __init__(self, variable: str = "edges", indent: int = 4):
        self.variable = variable
        self.indent = indent

    @property
    def format_name(self) -> str:
        return "tribble"

    def get_file_extension(self) -> str:
        return ".R"

    def export(self, edges: Iterable[Edge]) -> str:
        tab = " " * self.indent
        lines = [
            f"{self.variable} <-",
            f"{tab}tibble::tribble(",
            f"{tab}{tab}" + ", ".join(f"~{column}" for column in COLUMNS) + ",",
        ]
        for edge in edges:
            lines.append(f"{tab}{tab}{quote(edge.source)}, {quote(edge.target)},")
        lines.append(f"{tab})")
        return "\n".join(lines) + "\n"


class PythonExporter(EdgeExporter):
    """Python list of ``(from, to)`` tuples."""

    def __init__(self, variable: str = "edges", indent: int = 4):
        self.variable = variable
        self.indent = indent

    @property
    def format_name(self) -> str:
        return "python"

    def get_file_extension(self) -> str:
        return ".py"

    def export(self, edges: Iterable[Edge]) -> str:
        tab = " " * self.indent
        lines = [f"{self.variable} = [", f"{tab}# {', '.join(COLUMNS)}"]
        for edge in edges:
            lines.append(f"{tab}({quote(edge.source)}, {quote(edge.target)}),")
        lines.append("]")
        return "\n".join(lines) + "\n"


class CsvExporter(EdgeExporter):
    """CSV with a ``from,to`` header and every field quoted."""

    @property
    def format_name(self) -> str:
        return "csv"

    def get_file_extension(self) -> str:
        return ".csv"

    def export(self, edges: Iterable[Edge]) -> str:
        buffer = io.StringIO()
        writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")
        writer.writerow(COLUMNS)
        for edge in edges:
            writer.writerow([edge.source, edge.target])
        return buffer.getvalue()


_EXPORTERS: dict[str, type[EdgeExporter]] = {
    "tribble": TribbleExporter,
    "python": PythonExporter,
    "csv": CsvExporter,
}


def available_formats() -> list[str]:
    return list(_EXPORTERS)


def get_exporter(format_name: str, variable: str = "edges", indent: int = 4) -> EdgeExporter:
    """Look up an exporter by format name.

    Raises:
        ValueError: If the format is unknown
    """
    format_name = getattr(format_name, "value", format_name)
    if format_name not in _EXPORTERS:
        raise ValueError(f"Unknown export format '{format_name}'. Available: {available_formats()}")

    exporter_class = _EXPORTERS[format_name]
    logger.debug(f"Using {format_name} exporter")
    if exporter_class is CsvExporter:
        return exporter_class()
    return exporter_class(variable=variable, indent=indent)
