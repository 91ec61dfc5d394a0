"""Graphite graph retrieval."""

from .client import GraphiteGraph, historical_url

__all__ = [
    "GraphiteGraph",
    "historical_url",
]
