"""Shared fixtures for checkherald test suite."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from checkherald.config import HeraldConfig
from checkherald.variables import MappingVariableStore

GRAPH_URL = "http://graphite.example.com/render?from=-24h&target=sum(web.*.errors)"
CHECK_COMMAND = f"check_graphite_graph!100!1000!'{GRAPH_URL}'"
THRESHOLD_OUTPUT = "Current value: 18094.25, warn threshold: 100.0, crit threshold: 1000.0"


def make_config(**overrides) -> HeraldConfig:
    """Create a HeraldConfig with sensible defaults for testing."""
    base: dict = {
        "elasticsearch": {"url": "http://es:9200", "query_dir": "/queries"},
        "graphite": {"sandbox_dir": "/tmp/checkherald-test"},
    }
    base.update(overrides)
    return HeraldConfig(**base)


def make_variables(**overrides: str | None) -> MappingVariableStore:
    """Variables of a service alert; pass ``NAME=None`` to drop one."""
    values = {
        "NAGIOS_SERVICECHECKCOMMAND": CHECK_COMMAND,
        "NAGIOS_SERVICEOUTPUT": THRESHOLD_OUTPUT,
        "NAGIOS_ELASTICSEARCH_QUERIES": "Errors|status:500,Latency|latency.json",
    }
    values.update(overrides)
    return MappingVariableStore({k: v for k, v in values.items() if v is not None})


@pytest.fixture
def default_config() -> HeraldConfig:
    """A default HeraldConfig for tests that don't care about specifics."""
    return make_config()


@pytest.fixture
def mock_search_client():
    """Search client returning an empty response for every query."""
    client = MagicMock()
    client.query_from_string.return_value = {}
    client.query_from_file.return_value = {}
    return client


@pytest.fixture
def mock_graph_client():
    """Graph client returning a primary and a 24-hour graph."""
    client = MagicMock()
    client.get_graph.return_value = ["/tmp/graphite_graph.png", "/tmp/graphite_graph_24h.png"]
    return client


def nested_mapping(levels: int, leaf=1) -> dict:
    """``{"a": {"a": ... leaf}}`` with *levels* mappings, built without recursion."""
    data = leaf
    for _ in range(levels):
        data = {"a": data}
    return data
