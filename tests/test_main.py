"""Tests for the command-line demonstration."""

from pathlib import Path

import pytest
import yaml

from main import build_graph, parse_args, run, run_linked_list_demo, run_reachability
from src.config import AppConfig
from src.errors import OutOfRangeError


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path: Path, monkeypatch):
    """Run each test from an empty directory with no env overrides."""
    monkeypatch.chdir(tmp_path)
    for env_var in ("REACHLIST_LOGGING_LEVEL", "REACHLIST_JSON_LOGS", "REACHLIST_GRAPH_SOURCES"):
        monkeypatch.delenv(env_var, raising=False)


class TestParseArgs:
    """Tests for argument parsing."""

    def test_defaults(self):
        """Test that every option defers to configuration by default."""
        args = parse_args([])

        assert args.config is None
        assert args.sources is None
        assert args.log_level is None
        assert not args.json_logs
        assert not args.dry_run

    def test_sources(self):
        """Test parsing multiple sources."""
        args = parse_args(["--sources", "0", "7"])

        assert args.sources == [0, 7]

    def test_invalid_log_level(self):
        """Test that argparse rejects unknown levels."""
        with pytest.raises(SystemExit):
            parse_args(["--log-level", "LOUD"])


class TestHelpers:
    """Tests for the demo building blocks."""

    def test_build_graph(self):
        """Test that the default config builds the sample graph."""
        graph = build_graph(AppConfig())

        assert graph.vertex_count == 13
        assert graph.edge_count == 22

    def test_run_reachability(self):
        """Test reachability over the sample graph."""
        reach = run_reachability(build_graph(AppConfig()), [1, 2, 6])

        assert reach.count() == 11

    def test_run_reachability_bad_source(self):
        """Test that invalid sources propagate as OutOfRangeError."""
        with pytest.raises(OutOfRangeError):
            run_reachability(build_graph(AppConfig()), [42])

    def test_run_linked_list_demo(self):
        """Test that the demo drops the tail."""
        assert str(run_linked_list_demo([1, 2, 3])) == "[1,2]"

    def test_run_linked_list_demo_empty(self):
        """Test the demo with no values."""
        assert str(run_linked_list_demo([])) == "[]"


class TestRun:
    """Tests for the full demo run."""

    def test_default_demo_output(self, capsys):
        """Test the sample output for sources 1, 2 and 6."""
        exit_code = run(parse_args([]))

        out_lines = capsys.readouterr().out.splitlines()
        assert exit_code == 0
        assert out_lines == ["0 1 2 3 4 5 6 9 10 11 12", "[1,2]"]

    def test_custom_sources(self, capsys):
        """Test overriding sources on the command line."""
        exit_code = run(parse_args(["--sources", "1"]))

        assert exit_code == 0
        assert capsys.readouterr().out.splitlines()[0] == "1"

    def test_config_file(self, tmp_path, capsys):
        """Test running from a configuration file."""
        config_path = tmp_path / "custom.yaml"
        config_path.write_text(
            yaml.dump(
                {
                    "graph": {"vertex_count": 3, "edges": [[0, 1]], "sources": [0]},
                    "linked_list": {"values": [9, 8]},
                },
            ),
        )

        exit_code = run(parse_args(["--config", str(config_path), "--json-logs"]))

        assert exit_code == 0
        assert capsys.readouterr().out.splitlines() == ["0 1", "[9]"]

    def test_dry_run(self, capsys):
        """Test that dry run prints nothing to stdout."""
        exit_code = run(parse_args(["--dry-run"]))

        assert exit_code == 0
        assert capsys.readouterr().out == ""

    def test_missing_config_file(self):
        """Test that a missing config file fails with exit code 1."""
        assert run(parse_args(["--config", "missing.yaml"])) == 1

    def test_invalid_config_file(self, tmp_path):
        """Test that an invalid config file fails with exit code 1."""
        config_path = tmp_path / "bad.yaml"
        config_path.write_text("graph:\n  vertex_count: -3\n")

        assert run(parse_args(["--config", str(config_path)])) == 1

    def test_null_section_with_env_override(self, tmp_path, monkeypatch):
        """Test that a null section plus a sources override exits with code 1."""
        config_path = tmp_path / "null.yaml"
        config_path.write_text("graph: null\n")
        monkeypatch.setenv("REACHLIST_GRAPH_SOURCES", "1,2")

        assert run(parse_args(["--config", str(config_path)])) == 1

    def test_source_out_of_range(self):
        """Test that an invalid CLI source fails with exit code 1."""
        assert run(parse_args(["--sources", "99"])) == 1
