"""Rendering of search results as nested HTML tables."""

from .shape import BucketList, KeyedMap, ResultNode, Scalar, agg_depth, classify
from .tables import RenderedTable, build_table, render, render_result

__all__ = [
    "BucketList",
    "KeyedMap",
    "RenderedTable",
    "ResultNode",
    "Scalar",
    "agg_depth",
    "build_table",
    "classify",
    "render",
    "render_result",
]
