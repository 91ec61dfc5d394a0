"""Graphite render API client.

Downloads the graph image behind a check's render URL and, optionally, the
same graph over a longer historical window for comparison.
"""

from __future__ import annotations

import logging
from pathlib import Path
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

import httpx

from checkherald._constants import HISTORICAL_WINDOW

logger = logging.getLogger(__name__)

PRIMARY_GRAPH = "graphite_graph.png"
HISTORICAL_GRAPH = "graphite_graph_{window}.png"


def historical_url(url: str, window: str = HISTORICAL_WINDOW) -> str:
    """Return *url* with its ``from`` parameter set to ``-<window>``."""
    parts = urlsplit(url)
    params = [(k, v) for k, v in parse_qsl(parts.query, keep_blank_values=True) if k != "from"]
    params.append(("from", f"-{window}"))
    return urlunsplit(parts._replace(query=urlencode(params, safe="-(),*:")))


class GraphiteGraph:
    """Fetches Graphite graph images into a sandbox directory.

    Args:
        sandbox_dir: Directory the images are written to (created on demand).
        historical_window: Window of the comparison graph, e.g. ``24h``.
        timeout: HTTP timeout in seconds.
    """

    def __init__(
        self,
        sandbox_dir: str | Path,
        historical_window: str = HISTORICAL_WINDOW,
        timeout: float = 30.0,
    ):
        self.sandbox_dir = Path(sandbox_dir)
        self.historical_window = historical_window
        self.timeout = timeout

    def get_graph(self, url: str, show_historical: bool = False) -> list[str]:
        """Download the graph(s) for *url*.

        Returns:
            ``[primary]`` or ``[primary, historical]`` file paths.
        """
        self.sandbox_dir.mkdir(parents=True, exist_ok=True)
        files = []
        with httpx.Client(timeout=self.timeout, follow_redirects=True) as client:
            files.append(self._download(client, url, self.sandbox_dir / PRIMARY_GRAPH))
            if show_historical:
                name = HISTORICAL_GRAPH.format(window=self.historical_window)
                files.append(
                    self._download(
                        client,
                        historical_url(url, self.historical_window),
                        self.sandbox_dir / name,
                    )
                )
        return files

    def _download(self, client: httpx.Client, url: str, target: Path) -> str:
        logger.debug("Downloading graph %s -> %s", url, target)
        resp = client.get(url)
        resp.raise_for_status()
        target.write_bytes(resp.content)
        return str(target)
