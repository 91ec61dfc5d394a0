"""Root pytest hooks: skip the source tree, declare markers."""

collect_ignore = ["src"]

_MARKERS = {
    "unit": "fast tests with every collaborator mocked",
    "integration": "tests that talk to a live Graphite or Elasticsearch",
}


def pytest_configure(config):
    for name, description in _MARKERS.items():
        config.addinivalue_line("markers", f"{name}: {description}")
