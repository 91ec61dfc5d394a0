"""Extraction of the check invocation and its labelled search queries.

The check command is stored as ``check_name!arg1!...!'<graphite render url>'``
and the query list as ``Label|query,Label|name.json``.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum

logger = logging.getLogger(__name__)

# Output is formatted like: Current value: 18094.25, warn threshold: 100.0, crit threshold: 1000.0
_THRESHOLD_RE = re.compile(
    r"Current value: (?P<current_value>[^,]*), "
    r"warn threshold: (?P<warn_threshold>[^,]*), "
    r"crit threshold: (?P<crit_threshold>[^,]*)"
)


class SourceKind(str, Enum):
    """Where a search query's definition comes from."""

    INLINE = "inline"
    FILE_REFERENCE = "file"


@dataclass(frozen=True)
class QuerySpec:
    """One labelled search query from the check's query list."""

    label: str
    raw_query: str

    @property
    def source_kind(self) -> SourceKind:
        if ".json" in self.raw_query:
            return SourceKind.FILE_REFERENCE
        return SourceKind.INLINE


@dataclass(frozen=True)
class ThresholdReading:
    """Current value and thresholds reported in the check output."""

    current_value: str
    warn_threshold: str
    crit_threshold: str


def parse_target_url(command: str | None) -> str:
    """Return the URL the check queried: the last ``!`` field, unquoted."""
    if not command:
        return ""
    return command.split("!")[-1].replace("'", "").strip()


def parse_query_list(queries: str | None) -> list[QuerySpec]:
    """Split a ``label|query`` list into query specs, preserving order.

    An entry without a ``|`` separator keeps the whole entry as its query and
    gets an empty label; the rest of the list is still parsed.
    """
    if not queries:
        return []

    specs = []
    for entry in queries.split(","):
        entry = entry.strip()
        if not entry:
            continue
        label, sep, raw_query = entry.partition("|")
        if not sep:
            logger.warning("Query list entry has no 'label|query' separator: %s", entry)
            specs.append(QuerySpec(label="", raw_query=entry))
            continue
        specs.append(QuerySpec(label=label.strip(), raw_query=raw_query.strip()))
    return specs


def parse_check_output(output: str | None) -> ThresholdReading | None:
    """Extract the current value and thresholds, or None if not reported."""
    if not output:
        return None
    match = _THRESHOLD_RE.search(output)
    if not match:
        return None
    return ThresholdReading(**match.groupdict())


def unescape_text(text: str) -> str:
    """Turn the literal ``\\n`` sequences the alerting system stores into newlines."""
    return text.replace("\\n", "\n")
