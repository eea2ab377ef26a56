"""Shorthand parser: tokenizer, carry-over resolution and edge compiler."""

from .compiler import CarryOver, EdgeCompiler, SelfLoopPolicy, compile_edges
from .lines import LINE_PATTERN, split_lines, tokenize, tokenize_line
from .models import CompileResult, Edge, Operator, ParsedLine, SkippedLine, SkipReason

__all__ = [
    "EdgeCompiler",
    "CarryOver",
    "SelfLoopPolicy",
    "compile_edges",
    "LINE_PATTERN",
    "split_lines",
    "tokenize",
    "tokenize_line",
    "CompileResult",
    "Edge",
    "Operator",
    "ParsedLine",
    "SkippedLine",
    "SkipReason",
]
