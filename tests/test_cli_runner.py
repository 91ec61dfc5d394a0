"""CLI surface tests using typer.testing.CliRunner.

The report assembler is patched so no Graphite or Elasticsearch is needed.
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from checkherald import __version__
from checkherald.cli import app, parse_var_overrides, resolve_config_path
from checkherald.report import Report

runner = CliRunner()


def _sample_report() -> Report:
    report = Report()
    info = report.add_section("additional_info", "Additional Info")
    info.add_html("<b>Additional Info</b>:<br> CRITICAL<br><br>")
    info.add_text("Additional Info:\n CRITICAL\n\n")
    graphs = report.add_section("graphs", "Graphs")
    graphs.add_attachment("/tmp/graphite_graph.png")
    return report


# =============================================================================
# Helpers
# =============================================================================


class TestParseVarOverrides:
    def test_pairs(self):
        assert parse_var_overrides(["A=1", "B=x=y"]) == {"A": "1", "B": "x=y"}

    def test_empty_value(self):
        assert parse_var_overrides(["A="]) == {"A": ""}

    def test_none(self):
        assert parse_var_overrides(None) == {}

    def test_missing_separator(self):
        import typer

        with pytest.raises(typer.BadParameter):
            parse_var_overrides(["NOVALUE"])


class TestResolveConfigPath:
    def test_explicit_path_returned(self, tmp_path):
        p = tmp_path / "custom.yaml"
        assert resolve_config_path(p) == p

    def test_default_when_present(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "checkherald.yaml").write_text("")
        assert resolve_config_path(None) == Path("checkherald.yaml")

    def test_none_when_absent(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert resolve_config_path(None) is None


# =============================================================================
# Commands
# =============================================================================


class TestVersionCommand:
    def test_version_output(self):
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert __version__ in result.output


class TestInitCommand:
    def test_init_creates_file(self, tmp_path):
        output = tmp_path / "checkherald.yaml"
        result = runner.invoke(app, ["init", "--output", str(output)])
        assert result.exit_code == 0
        assert "elasticsearch:" in output.read_text()

    def test_init_refuses_overwrite(self, tmp_path):
        output = tmp_path / "checkherald.yaml"
        output.write_text("max_workers: 2\n")
        result = runner.invoke(app, ["init", "--output", str(output)])
        assert result.exit_code == 1
        assert output.read_text() == "max_workers: 2\n"

    def test_init_force(self, tmp_path):
        output = tmp_path / "checkherald.yaml"
        output.write_text("max_workers: 2\n")
        result = runner.invoke(app, ["init", "--output", str(output), "--force"])
        assert result.exit_code == 0
        assert "elasticsearch:" in output.read_text()


class TestFormatCommand:
    def test_writes_html_report(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        output = tmp_path / "report.html"
        with patch("checkherald.cli.ReportAssembler.from_config") as mock_from_config:
            mock_from_config.return_value.assemble.return_value = _sample_report()
            result = runner.invoke(
                app,
                ["format", "--var", "NAGIOS_SERVICEOUTPUT=CRITICAL", "--output", str(output)],
            )

        assert result.exit_code == 0
        assert output.read_text() == "<b>Additional Info</b>:<br> CRITICAL<br><br>"
        cfg, store = mock_from_config.call_args.args
        assert store.get("NAGIOS_SERVICEOUTPUT") == "CRITICAL"

    def test_text_output(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        output = tmp_path / "report.txt"
        with patch("checkherald.cli.ReportAssembler.from_config") as mock_from_config:
            mock_from_config.return_value.assemble.return_value = _sample_report()
            result = runner.invoke(app, ["format", "--text", "--output", str(output)])

        assert result.exit_code == 0
        assert output.read_text() == "Additional Info:\n CRITICAL\n\n"

    def test_stdout_output(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        with patch("checkherald.cli.ReportAssembler.from_config") as mock_from_config:
            mock_from_config.return_value.assemble.return_value = _sample_report()
            result = runner.invoke(app, ["format"])

        assert result.exit_code == 0
        assert "<b>Additional Info</b>" in result.output

    def test_options_override_config(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        with patch("checkherald.cli.ReportAssembler.from_config") as mock_from_config:
            mock_from_config.return_value.assemble.return_value = _sample_report()
            result = runner.invoke(
                app,
                ["format", "--state-type", "HOST", "--sandbox", str(tmp_path / "graphs")],
            )

        assert result.exit_code == 0
        cfg, _ = mock_from_config.call_args.args
        assert cfg.variables.output_variable() == "NAGIOS_HOSTOUTPUT"
        assert cfg.graphite.sandbox_dir == str(tmp_path / "graphs")

    def test_invalid_config_exits(self, tmp_path):
        config = tmp_path / "bad.yaml"
        config.write_text("unknown_section: {}\n")
        result = runner.invoke(app, ["format", "--config", str(config)])
        assert result.exit_code == 1

    def test_missing_config_exits(self, tmp_path):
        result = runner.invoke(app, ["format", "--config", str(tmp_path / "nope.yaml")])
        assert result.exit_code == 1

    def test_bad_var_is_usage_error(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        result = runner.invoke(app, ["format", "--var", "NOVALUE"])
        assert result.exit_code == 2


class TestShowConfigCommand:
    def test_shows_defaults(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        result = runner.invoke(app, ["show-config"])
        assert result.exit_code == 0
        assert "localhost:9200" in result.output
