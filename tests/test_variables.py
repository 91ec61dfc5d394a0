"""Tests for the variable store accessors."""

from __future__ import annotations

from checkherald.variables import EnvironmentVariableStore, MappingVariableStore


class TestMappingVariableStore:
    def test_lookup(self):
        store = MappingVariableStore({"NAGIOS_SERVICEOUTPUT": "OK"})
        assert store.get("NAGIOS_SERVICEOUTPUT") == "OK"
        assert store.get("NAGIOS_HOSTOUTPUT") is None

    def test_snapshot_of_input(self):
        values = {"A": "1"}
        store = MappingVariableStore(values)
        values["A"] = "2"
        assert store.get("A") == "1"


class TestEnvironmentVariableStore:
    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("NAGIOS_SERVICEOUTPUT", "CRITICAL")
        assert EnvironmentVariableStore().get("NAGIOS_SERVICEOUTPUT") == "CRITICAL"

    def test_overrides_take_precedence(self, monkeypatch):
        monkeypatch.setenv("NAGIOS_SERVICEOUTPUT", "CRITICAL")
        store = EnvironmentVariableStore({"NAGIOS_SERVICEOUTPUT": "WARNING"})
        assert store.get("NAGIOS_SERVICEOUTPUT") == "WARNING"

    def test_missing(self, monkeypatch):
        monkeypatch.delenv("NAGIOS_NOT_SET", raising=False)
        assert EnvironmentVariableStore().get("NAGIOS_NOT_SET") is None
