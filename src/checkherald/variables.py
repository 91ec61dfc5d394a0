"""Read-only access to the alerting system's variables.

The alerting system hands check metadata to notification commands as
``NAGIOS_*`` environment variables. Formatting code never reads the process
environment directly; it is given a :class:`VariableStore` instead.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Protocol


class VariableStore(Protocol):
    """Lookup of check metadata by variable name."""

    def get(self, name: str) -> str | None: ...


class MappingVariableStore:
    """Variable store backed by an in-memory mapping."""

    def __init__(self, values: Mapping[str, str] | None = None):
        self._values = dict(values or {})

    def get(self, name: str) -> str | None:
        return self._values.get(name)


class EnvironmentVariableStore:
    """Variable store backed by the process environment.

    Values in *overrides* take precedence over the environment.
    """

    def __init__(self, overrides: Mapping[str, str] | None = None):
        self._overrides = dict(overrides or {})

    def get(self, name: str) -> str | None:
        if name in self._overrides:
            return self._overrides[name]
        return os.environ.get(name)
