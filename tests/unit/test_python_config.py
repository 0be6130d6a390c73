"""Unit tests for dri.constants runtime flags and dri.utils helpers."""

from __future__ import annotations

import pytest

from dri.constants import get_dri_debug, get_dri_verbose, get_engine_executable
from dri.utils import format_size, format_table_row, log_debug, log_error, log_warn


class TestRuntimeFlags:

    def test_defaults(self):
        assert get_engine_executable() == "podman"
        assert get_dri_debug() == 0
        assert get_dri_verbose() == 0

    def test_engine_override(self, monkeypatch):
        monkeypatch.setenv("DRI_ENGINE", "podman-remote")
        assert get_engine_executable() == "podman-remote"

    def test_empty_engine_falls_back(self, monkeypatch):
        monkeypatch.setenv("DRI_ENGINE", "")
        assert get_engine_executable() == "podman"

    @pytest.mark.parametrize("value, expected", [("1", 1), ("0", 0), ("yes", 0)])
    def test_debug_parsing(self, monkeypatch, value, expected):
        monkeypatch.setenv("DRI_DEBUG", value)
        assert get_dri_debug() == expected


class TestLogging:

    def test_debug_silent_by_default(self, capsys):
        log_debug("hidden")
        assert capsys.readouterr().err == ""

    def test_debug_enabled(self, monkeypatch, capsys):
        monkeypatch.setenv("DRI_DEBUG", "1")
        log_debug("shown")
        assert capsys.readouterr().err == "DEBUG: shown\n"

    def test_warn_and_error_prefixes(self, capsys):
        log_warn("careful")
        log_error("broken")
        assert capsys.readouterr().err == "Warning: careful\nError: broken\n"


class TestFormatting:

    def test_format_size(self):
        assert format_size(0) == "0.0 MiB"
        assert format_size(1572864) == "1.5 MiB"

    def test_format_table_row(self):
        row = format_table_row("I", "snap", "1.0 MiB")
        assert row.startswith("I      snap")
        assert row.endswith("1.0 MiB")
