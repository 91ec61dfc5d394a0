"""Dispatch of a check's search queries and graph downloads.

Each collaborator call is isolated: a failure is logged and turned into an
empty outcome carrying the error, and the remaining queries still run.

Usage::

    orchestrator = QueryOrchestrator(ElasticsearchQuery(url), query_dir)
    outcomes = orchestrator.run(specs, resolve_time_window(target_url))
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Protocol

from checkherald._constants import DEFAULT_QUERY_PERIOD
from checkherald.check import QuerySpec, SourceKind, TimeWindow
from checkherald.rendering import agg_depth

logger = logging.getLogger(__name__)


class SearchClient(Protocol):
    """Protocol for search backends."""

    def query_from_string(self, query: str, period: str | None = None) -> Any: ...

    def query_from_file(self, path: str | Path, period: str | None = None) -> Any: ...


class GraphClient(Protocol):
    """Protocol for graph image sources."""

    def get_graph(self, url: str, show_historical: bool = False) -> list[str]: ...


@dataclass
class QueryOutcome:
    """Result of one search query; empty with ``error`` set when it failed."""

    spec: QuerySpec
    result: Any = field(default_factory=dict)
    error: str | None = None
    agg_depth: int = 0

    @property
    def success(self) -> bool:
        return self.error is None

    @property
    def is_empty(self) -> bool:
        return not self.result


@dataclass
class GraphOutcome:
    """Downloaded graph files, ``[primary, historical]`` when complete."""

    files: list[str] = field(default_factory=list)
    error: str | None = None

    @property
    def success(self) -> bool:
        return self.error is None

    @property
    def primary(self) -> str | None:
        return self.files[0] if self.files and self.files[0] else None

    @property
    def historical(self) -> str | None:
        return self.files[1] if len(self.files) > 1 and self.files[1] else None


class QueryOrchestrator:
    """Runs labelled search queries over a resolved time window.

    Args:
        client: Search backend.
        query_dir: Directory holding the JSON files named by file-reference
            queries.
        default_period: Search period used when the window carries no
            offset of its own.
        max_workers: Queries run concurrently when greater than 1.
    """

    def __init__(
        self,
        client: SearchClient,
        query_dir: str | Path,
        default_period: str = DEFAULT_QUERY_PERIOD,
        max_workers: int = 1,
    ):
        self.client = client
        self.query_dir = Path(query_dir)
        self.default_period = default_period
        self.max_workers = max_workers

    def run(self, specs: list[QuerySpec], window: TimeWindow) -> list[QueryOutcome]:
        """Execute every spec; outcomes are returned in input order."""
        period = window.query_period(self.default_period)
        if self.max_workers > 1 and len(specs) > 1:
            with ThreadPoolExecutor(max_workers=min(self.max_workers, len(specs))) as executor:
                return list(executor.map(lambda spec: self.execute(spec, period), specs))
        return [self.execute(spec, period) for spec in specs]

    def execute(self, spec: QuerySpec, period: str | None) -> QueryOutcome:
        """Execute one spec, converting any failure into an empty outcome."""
        try:
            if spec.source_kind is SourceKind.FILE_REFERENCE:
                result = self.client.query_from_file(self.query_dir / spec.raw_query, period)
            else:
                result = self.client.query_from_string(spec.raw_query, period)
        except Exception as e:
            logger.error(
                "Exception encountered retrieving search query '%s': %s",
                spec.label,
                e,
                exc_info=True,
            )
            return QueryOutcome(spec=spec, error=str(e)[:200])

        depth = agg_depth(result)
        logger.debug("Query '%s' returned aggregation depth %d", spec.label, depth)
        return QueryOutcome(spec=spec, result=result if result is not None else {}, agg_depth=depth)


class GraphRetriever:
    """Fetches the check's graph plus its historical comparison graph."""

    def __init__(self, client: GraphClient, show_historical: bool = True):
        self.client = client
        self.show_historical = show_historical

    def fetch(self, url: str) -> GraphOutcome:
        if not url:
            logger.warning("No graph URL found in the check command")
            return GraphOutcome(error="no graph URL")
        try:
            files = self.client.get_graph(url, self.show_historical)
        except Exception as e:
            logger.error("Exception encountered retrieving Graphite graphs: %s", e, exc_info=True)
            return GraphOutcome(error=str(e)[:200])
        return GraphOutcome(files=list(files or []))
