"""Comparison time window derived from the check's render URL."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

_FROM_RE = re.compile(r"from=-?(?P<from>[^&]*)")


class WindowKind(str, Enum):
    """How far back graphs and searches look."""

    RELATIVE_OFFSET = "relative_offset"
    SINCE_CHECK_TIME = "since_check_time"


@dataclass(frozen=True)
class TimeWindow:
    """Resolved time window.

    ``offset`` is kept as the opaque string found in the URL (``24h``,
    ``15min``...) and is only set for ``RELATIVE_OFFSET`` windows.
    """

    kind: WindowKind
    offset: str | None = None

    @property
    def is_relative(self) -> bool:
        return self.kind is WindowKind.RELATIVE_OFFSET

    def graph_caption(self) -> str:
        """One-line caption describing the window of the check's own graph."""
        if self.is_relative:
            return f"View from '{self.offset}' ago"
        return "View from the time of the check"

    def query_period(self, default: str) -> str:
        """Search period: the URL's offset, else the fixed *default* window."""
        if self.is_relative and self.offset:
            return self.offset
        return default


def resolve_time_window(url: str | None) -> TimeWindow:
    """Find the ``from=`` parameter of *url*.

    ``from=-24h`` resolves to ``RELATIVE_OFFSET("24h")``; a URL without the
    parameter resolves to ``SINCE_CHECK_TIME``.
    """
    match = _FROM_RE.search(url or "")
    if match:
        return TimeWindow(WindowKind.RELATIVE_OFFSET, match.group("from"))
    return TimeWindow(WindowKind.SINCE_CHECK_TIME)
