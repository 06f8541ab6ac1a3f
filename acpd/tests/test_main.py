"""Tests for the acpd command-line entry point."""

from unittest.mock import patch

import pytest

from acpd.__main__ import build_parser, main


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in ("ACPD_HOST", "ACPD_PORT", "ACPD_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


class TestParser:

    def test_defaults(self):
        args = build_parser().parse_args([])
        assert args.command == "run"
        assert args.port is None
        assert args.directory is None

    def test_flags(self, tmp_path):
        args = build_parser().parse_args(["run", "--port", "9300", "-C", str(tmp_path), "--log-level", "debug"])
        assert args.port == 9300
        assert args.directory == tmp_path
        assert args.log_level == "DEBUG"

    def test_daemon_subcommands_not_offered(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["start"])


class TestMain:

    def test_missing_snapshot_exits_nonzero(self, tmp_path):
        with patch("uvicorn.run") as run:
            assert main(["-C", str(tmp_path)]) == 1
        run.assert_not_called()

    def test_bad_settings_exit_nonzero(self, tmp_path):
        assert main(["-C", str(tmp_path), "--config", str(tmp_path / "missing.yaml")]) == 1

    def test_bad_env_log_level_exits_nonzero(self, project_dir, monkeypatch):
        monkeypatch.setenv("ACPD_LOG_LEVEL", "verbose")
        with patch("uvicorn.run") as run:
            assert main(["-C", str(project_dir)]) == 1
        run.assert_not_called()

    def test_serves_app(self, project_dir):
        with patch("uvicorn.run") as run:
            assert main(["-C", str(project_dir), "--port", "9333"]) == 0

        app = run.call_args.args[0]
        assert run.call_args.kwargs["port"] == 9333
        assert run.call_args.kwargs["host"] == "127.0.0.1"
        assert len(app.state.snapshot_store.snapshot.symbols) == 4
