"""Unit tests for dri.engine.

All subprocess calls are mocked so tests run without a container engine.
"""
from __future__ import annotations

import subprocess
from unittest.mock import MagicMock, patch

import pytest

from dri.engine import (
    EngineResult,
    SubprocessEngine,
    container_commit,
    container_list,
    container_run,
    container_stop,
    image_list,
    image_remove,
    parse_json_output,
    run_engine,
)
from dri.errors import EngineError, EngineUnavailableError
from tests.mocks import FakeEngine


def _completed(stdout="", stderr="", returncode=0):
    """Build a mock subprocess.CompletedProcess."""
    cp = MagicMock(spec=subprocess.CompletedProcess)
    cp.stdout = stdout
    cp.stderr = stderr
    cp.returncode = returncode
    return cp


# ---------------------------------------------------------------------------
# SubprocessEngine
# ---------------------------------------------------------------------------


class TestSubprocessEngine:

    @patch("dri.engine.subprocess.run", return_value=_completed("out", "err", 3))
    def test_captures_streams_and_status(self, mock_run):
        result = SubprocessEngine("podman").invoke(["image", "list"])
        assert result == EngineResult("out", "err", 3)
        args, kwargs = mock_run.call_args
        assert args[0] == ["podman", "image", "list"]
        assert kwargs["capture_output"] is True
        assert kwargs["text"] is True
        assert kwargs["check"] is False

    def test_executable_from_environment(self, monkeypatch):
        monkeypatch.setenv("DRI_ENGINE", "/usr/local/bin/podman")
        assert SubprocessEngine().executable == "/usr/local/bin/podman"

    def test_default_executable(self):
        assert SubprocessEngine().executable == "podman"

    @patch("dri.engine.subprocess.run", side_effect=FileNotFoundError("no podman"))
    def test_spawn_failure(self, mock_run):
        with pytest.raises(EngineUnavailableError, match="no podman"):
            SubprocessEngine("podman").invoke(["image", "list"])

    @patch("dri.engine.subprocess.run", return_value=_completed())
    def test_verbose_echoes_command(self, mock_run, monkeypatch, capsys):
        monkeypatch.setenv("DRI_VERBOSE", "1")
        SubprocessEngine("podman").invoke(["image", "rm", "x"])
        assert "+ podman image rm x" in capsys.readouterr().err


# ---------------------------------------------------------------------------
# run_engine / parse_json_output
# ---------------------------------------------------------------------------


class TestRunEngine:

    def test_returns_stdout(self):
        engine = FakeEngine(failures={("version",): EngineResult("5.0\n", "", 0)})
        assert run_engine(engine, ["version"]) == "5.0\n"

    def test_nonzero_exit_carries_streams(self):
        engine = FakeEngine(failures={("image", "rm"): EngineResult("partial", "in use", 2)})
        with pytest.raises(EngineError) as exc_info:
            run_engine(engine, ["image", "rm", "x"])
        err = exc_info.value
        assert err.returncode == 2
        assert err.stdout == "partial"
        assert err.stderr == "in use"
        assert err.command == ["image", "rm", "x"]
        assert "partial" in str(err)
        assert "in use" in str(err)


class TestParseJsonOutput:

    def test_empty_output_is_empty_list(self):
        assert parse_json_output(["x"], "") == []
        assert parse_json_output(["x"], "null") == []

    def test_list(self):
        assert parse_json_output(["x"], '[{"a": 1}]') == [{"a": 1}]

    def test_invalid_json(self):
        with pytest.raises(EngineError, match="JSON"):
            parse_json_output(["x"], "not json")

    def test_non_list(self):
        with pytest.raises(EngineError, match="not a JSON list"):
            parse_json_output(["x"], '{"a": 1}')


# ---------------------------------------------------------------------------
# Operations
# ---------------------------------------------------------------------------


class TestOperations:

    def test_image_list(self):
        engine = FakeEngine(images=[{"Names": ["a"], "Size": 1}])
        assert image_list(engine) == [{"Names": ["a"], "Size": 1}]
        assert engine.calls == [["image", "list", "--format", "json"]]

    def test_container_list(self):
        engine = FakeEngine()
        assert container_list(engine) == []
        assert engine.calls == [["container", "list", "--size", "--format", "json"]]

    def test_container_run(self):
        engine = FakeEngine()
        container_run(engine, "localhost/drix/default:latest", "dri-ggpgpg", 49222)
        assert engine.calls == [[
            "container", "run", "--rm", "--detach",
            "--publish", "127.0.0.1:49222:22",
            "--name", "dri-ggpgpg",
            "localhost/drix/default:latest",
        ]]

    def test_container_commit_pauses(self):
        engine = FakeEngine()
        container_commit(engine, "dri-ggpgpg", "localhost/dri/ggpgpg:latest")
        assert engine.calls == [[
            "container", "commit", "--pause", "dri-ggpgpg", "localhost/dri/ggpgpg:latest",
        ]]

    def test_container_stop_grace(self):
        engine = FakeEngine()
        container_stop(engine, "dri-ggpgpg", 2)
        assert engine.calls == [["container", "stop", "--time", "2", "dri-ggpgpg"]]

    def test_image_remove(self):
        engine = FakeEngine()
        image_remove(engine, "localhost/dri/ggpgpg:latest")
        assert engine.calls == [["image", "rm", "localhost/dri/ggpgpg:latest"]]
