"""Export of compiled edges as code literals."""

from .exporters import (
    COLUMNS,
    CsvExporter,
    EdgeExporter,
    PythonExporter,
    TribbleExporter,
    available_formats,
    get_exporter,
    quote,
)

__all__ = [
    "COLUMNS",
    "EdgeExporter",
    "TribbleExporter",
    "PythonExporter",
    "CsvExporter",
    "available_formats",
    "get_exporter",
    "quote",
]
