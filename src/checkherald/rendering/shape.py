"""Shape classification of search results.

Search responses are JSON trees. Before rendering, each node is classified
once into one of three variants:

- :class:`Scalar` -- anything that renders as plain cell text
- :class:`KeyedMap` -- a mapping rendered as one table row
- :class:`BucketList` -- the ``buckets`` of an aggregation, rendered as one
  row per bucket

A mapping whose ``"buckets"`` entry is a list of mappings is a bucket holder
and classifies as a :class:`BucketList` of those buckets.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Union

from checkherald._constants import MAX_AGG_SCAN_DEPTH, MAX_RENDER_DEPTH, TOO_DEEP_PLACEHOLDER

logger = logging.getLogger(__name__)

_AGG_MARKERS = ("aggs", "aggregations")


@dataclass(frozen=True)
class Scalar:
    value: Any


@dataclass(frozen=True)
class KeyedMap:
    entries: dict[str, ResultNode]


@dataclass(frozen=True)
class BucketList:
    entries: tuple[KeyedMap, ...]


ResultNode = Union[Scalar, KeyedMap, BucketList]


def _bucket_children(data: Mapping) -> list | None:
    """Return the bucket entries of a bucket holder, else None."""
    buckets = data.get("buckets")
    if isinstance(buckets, list) and all(isinstance(b, Mapping) for b in buckets):
        return buckets
    return None


def classify(data: Any, max_depth: int = MAX_RENDER_DEPTH) -> ResultNode:
    """Classify a JSON-like tree into :data:`ResultNode` variants.

    Anything that is not a mapping -- including lists that are not a bucket
    list, or bucket lists with a non-mapping entry -- becomes a
    :class:`Scalar`. Subtrees nested deeper than *max_depth* are kept as
    :class:`Scalar` as well; when the remainder itself nests more than
    *max_depth* levels it is replaced by a placeholder rather than kept for
    serialisation.
    """
    return _classify(data, 0, max_depth)


def _nests_deeper_than(data: Any, limit: int) -> bool:
    """True when *data* has containers more than *limit* levels down."""
    stack = [(data, 0)]
    while stack:
        node, level = stack.pop()
        if isinstance(node, Mapping):
            children = list(node.values())
        elif isinstance(node, (list, tuple)):
            children = list(node)
        else:
            continue
        if level >= limit:
            return True
        stack.extend((child, level + 1) for child in children)
    return False


def _bounded_scalar(data: Any, max_depth: int) -> Scalar:
    if _nests_deeper_than(data, max_depth):
        logger.warning("Result nested more than %d levels below the cutoff; omitted", max_depth)
        return Scalar(TOO_DEEP_PLACEHOLDER)
    return Scalar(data)


def _classify(data: Any, depth: int, max_depth: int) -> ResultNode:
    if not isinstance(data, Mapping):
        if isinstance(data, (list, tuple)):
            return _bounded_scalar(data, max_depth)
        return Scalar(data)
    if depth >= max_depth:
        logger.warning("Result nested deeper than %d levels; rendering remainder as text", max_depth)
        return _bounded_scalar(data, max_depth)

    buckets = _bucket_children(data)
    if buckets is not None:
        return BucketList(tuple(_keyed_map(b, depth + 1, max_depth) for b in buckets))
    return _keyed_map(data, depth, max_depth)


def _keyed_map(data: Mapping, depth: int, max_depth: int) -> KeyedMap:
    return KeyedMap({str(k): _classify(v, depth + 1, max_depth) for k, v in data.items()})


def _is_agg_marker(text: str) -> bool:
    return any(marker in text for marker in _AGG_MARKERS)


def agg_depth(data: Any, limit: int = MAX_AGG_SCAN_DEPTH) -> int:
    """Aggregation nesting depth of a query or result tree.

    A string counts 1 when it mentions ``aggs``/``aggregations``. For a
    mapping, each key/value pair computes ``marker(key) + agg_depth(value)``
    and the running level is *overwritten* by every pair, so the last pair
    decides the result rather than the deepest or the sum of siblings. Lists
    follow the same last-item-wins rule. Other values count 0.

    Containers more than *limit* levels down count 0.
    """
    return _agg_depth(data, limit)


def _agg_depth(data: Any, remaining: int) -> int:
    if isinstance(data, str):
        return 1 if _is_agg_marker(data) else 0
    if remaining <= 0:
        return 0

    level = 0
    if isinstance(data, Mapping):
        for key, value in data.items():
            this_level = 1 if _is_agg_marker(str(key)) else 0
            level = this_level + _agg_depth(value, remaining - 1)
    elif isinstance(data, (list, tuple)):
        for item in data:
            level = _agg_depth(item, remaining - 1)
    return level
