"""HTML table rendering of classified search results.

Rendering is two steps: :func:`build_table` turns a classified result tree
into an immutable :class:`RenderedTable` tree, and
:meth:`RenderedTable.to_html` serialises it. Tables nest inside cells; every
level is wrapped the same way.
"""

from __future__ import annotations

import html
import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Union

from checkherald._constants import (
    MAX_RENDER_DEPTH,
    TABLE_CLOSE,
    TABLE_OPEN,
    TOO_DEEP_PLACEHOLDER,
)

from .shape import BucketList, KeyedMap, ResultNode, Scalar, classify

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderedTable:
    """A table whose cells hold text or further tables."""

    headers: tuple[str, ...]
    rows: tuple[tuple[Cell, ...], ...]

    def to_html(self) -> str:
        parts = [TABLE_OPEN]
        if self.headers:
            parts.append("<tr>" + "".join(f"<th>{_escape(h)}</th>" for h in self.headers) + "</tr>")
        for row in self.rows:
            parts.append("<tr>" + "".join(f"<td>{_cell_html(c)}</td>" for c in row) + "</tr>")
        parts.append(TABLE_CLOSE)
        return "".join(parts)


Cell = Union[str, RenderedTable]


def _escape(text: str) -> str:
    return html.escape(text, quote=False)


def _cell_html(cell: Cell) -> str:
    if isinstance(cell, RenderedTable):
        return cell.to_html()
    return _escape(cell)


def cell_text(value: Any) -> str:
    """Text form of a scalar value as shown in a table cell."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)):
        return str(value)
    try:
        return json.dumps(value, default=str)
    except (RecursionError, ValueError):
        logger.warning("Cell value could not be serialised; showing placeholder", exc_info=True)
        return TOO_DEEP_PLACEHOLDER


def build_table(node: ResultNode) -> RenderedTable:
    """Build the table for a classified result tree."""
    if isinstance(node, BucketList):
        return _bucket_table(node)
    if isinstance(node, KeyedMap):
        return _map_table(node)
    return RenderedTable(headers=(), rows=((cell_text(node.value),),))


def _cell(node: ResultNode) -> Cell:
    if isinstance(node, BucketList):
        return _bucket_table(node)
    if isinstance(node, KeyedMap):
        return _map_table(node)
    return cell_text(node.value)


def _map_table(node: KeyedMap) -> RenderedTable:
    """One header per key and exactly one row of values."""
    headers = tuple(node.entries)
    return RenderedTable(headers=headers, rows=(_map_row(node, headers),))


def _map_row(node: KeyedMap, columns: tuple[str, ...]) -> tuple[Cell, ...]:
    # Columns the entry does not have render as empty cells
    return tuple(_cell(node.entries[c]) if c in node.entries else "" for c in columns)


def _bucket_table(node: BucketList) -> RenderedTable:
    """Headers are the union of bucket keys in first-seen order; one row per bucket."""
    headers: dict[str, None] = {}
    for entry in node.entries:
        for key in entry.entries:
            headers.setdefault(key)
    columns = tuple(headers)
    return RenderedTable(
        headers=columns,
        rows=tuple(_map_row(entry, columns) for entry in node.entries),
    )


def render(data: Any, max_depth: int = MAX_RENDER_DEPTH) -> str:
    """Render a result tree (raw JSON-like data or a classified node) as HTML."""
    if not isinstance(data, (Scalar, KeyedMap, BucketList)):
        data = classify(data, max_depth)
    return build_table(data).to_html()


def render_result(response: Any, max_depth: int = MAX_RENDER_DEPTH) -> str:
    """Render the interesting part of a search response.

    Aggregations are preferred; without them the ``_source`` of each hit
    becomes one row. An empty response renders as an empty string.
    """
    if not response:
        return ""
    if not isinstance(response, Mapping):
        return render(response, max_depth)

    aggregations = response.get("aggregations")
    if isinstance(aggregations, Mapping) and aggregations:
        return render(aggregations, max_depth)

    hits = response.get("hits")
    if isinstance(hits, Mapping) and isinstance(hits.get("hits"), list):
        sources = [h.get("_source", {}) for h in hits["hits"] if isinstance(h, Mapping)]
        if not sources:
            return ""
        return render({"buckets": sources}, max_depth)

    return render(response, max_depth)
