"""Tests for the vapisim command-line interface."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest

from vapisim.access.models import AccessSetting
from vapisim.cli import main, parse_args


class TestParseArgs:
    def test_serve_overrides(self) -> None:
        args = parse_args(["serve", "--host", "0.0.0.0", "--port", "9000"])
        assert args.command == "serve"
        assert args.host == "0.0.0.0"
        assert args.port == 9000

    def test_global_options(self) -> None:
        args = parse_args(["-v", "-c", "custom.yaml", "routes"])
        assert args.verbose is True
        assert args.config == Path("custom.yaml")
        assert args.command == "routes"


class TestMain:
    def test_routes(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        main(["-c", str(tmp_path / "missing.yaml"), "routes"])
        out = capsys.readouterr().out.splitlines()
        assert out == [s.path for s in AccessSetting]

    def test_serve_runs_uvicorn(self, tmp_path: Path) -> None:
        with patch("uvicorn.run") as run:
            main(["-c", str(tmp_path / "missing.yaml"), "serve", "--port", "9123"])
        run.assert_called_once()
        assert run.call_args.kwargs == {"host": "127.0.0.1", "port": 9123}

    def test_serve_explicit_zero_port_and_empty_host(self, tmp_path: Path) -> None:
        with patch("uvicorn.run") as run:
            main(["-c", str(tmp_path / "missing.yaml"), "serve", "--host", "", "--port", "0"])
        assert run.call_args.kwargs == {"host": "", "port": 0}
