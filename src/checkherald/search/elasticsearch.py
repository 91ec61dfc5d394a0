"""Elasticsearch query client.

Runs either an inline Lucene ``query_string`` or a JSON request body loaded
from a file, restricted to the last *period* (``10m``, ``24h``...) through a
range filter on the timestamp field.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import httpx

logger = logging.getLogger(__name__)


class ElasticsearchQuery:
    """Executes search queries against an Elasticsearch index pattern.

    Args:
        url: Base URL of the Elasticsearch service
            (e.g. ``http://elasticsearch:9200``).
        index: Index or index pattern to search.
        timestamp_field: Field the time window is applied to.
        size: Number of hits returned per query.
        timeout: HTTP timeout in seconds.
    """

    def __init__(
        self,
        url: str,
        index: str = "logstash-*",
        timestamp_field: str = "@timestamp",
        size: int = 10,
        timeout: float = 30.0,
    ):
        self.url = url.rstrip("/")
        self.index = index
        self.timestamp_field = timestamp_field
        self.size = size
        self.timeout = timeout

    def query_from_string(self, query: str, period: str | None = None) -> dict[str, Any]:
        """Run an inline ``query_string`` query."""
        body: dict[str, Any] = {
            "size": self.size,
            "query": {"query_string": {"query": query}},
        }
        return self._search(self._restrict(body, period))

    def query_from_file(self, path: str | Path, period: str | None = None) -> dict[str, Any]:
        """Run the request body stored as JSON in *path*."""
        path = Path(path)
        with open(path) as f:
            body = json.load(f)
        if not isinstance(body, dict):
            raise ValueError(f"Query file {path} does not hold a JSON object")
        body.setdefault("size", self.size)
        return self._search(self._restrict(body, period))

    def _restrict(self, body: dict[str, Any], period: str | None) -> dict[str, Any]:
        """Wrap the body's query in a ``now-<period>`` range filter."""
        if not period:
            return body
        query = body.get("query", {"match_all": {}})
        body["query"] = {
            "bool": {
                "must": [query],
                "filter": [{"range": {self.timestamp_field: {"gte": f"now-{period}"}}}],
            }
        }
        return body

    def _search(self, body: dict[str, Any]) -> dict[str, Any]:
        logger.debug("Searching %s/%s: %s", self.url, self.index, body)
        with httpx.Client(timeout=self.timeout) as client:
            resp = client.post(f"{self.url}/{self.index}/_search", json=body)
            resp.raise_for_status()
            return resp.json()
