"""Parsing of the check's stored command, query list and output."""

from .command import (
    QuerySpec,
    SourceKind,
    ThresholdReading,
    parse_check_output,
    parse_query_list,
    parse_target_url,
    unescape_text,
)
from .window import TimeWindow, WindowKind, resolve_time_window

__all__ = [
    "QuerySpec",
    "SourceKind",
    "ThresholdReading",
    "TimeWindow",
    "WindowKind",
    "parse_check_output",
    "parse_query_list",
    "parse_target_url",
    "resolve_time_window",
    "unescape_text",
]
