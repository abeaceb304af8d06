"""Tests for wren.cli._run — ``wren run`` subcommand."""

import types
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from wren.app import App
from wren.cli import main
from wren.cli._resolve import resolve_app
from wren.config import ServerConfig


@pytest.fixture
def fake_app(monkeypatch: pytest.MonkeyPatch) -> App:
    """Register a fake module with a wren App instance."""
    app = App(ServerConfig(host="127.0.0.1", port=8000, log_level="debug"))
    mod = types.ModuleType("_run_test_app")
    mod.app = app  # type: ignore[attr-defined]
    monkeypatch.setitem(__import__("sys").modules, "_run_test_app", mod)
    return app


class TestWrenRun:
    @patch("wren.app.App.run")
    def test_app_config_kept_when_no_flags(self, mock_run: MagicMock, fake_app: App) -> None:
        main(["run", "_run_test_app:app"])
        mock_run.assert_called_once()
        assert fake_app.config.host == "127.0.0.1"
        assert fake_app.config.port == 8000
        assert fake_app.config.log_level == "debug"

    @patch("wren.app.App.run")
    def test_flags_override_app_config(self, mock_run: MagicMock, fake_app: App) -> None:
        main(["run", "_run_test_app:app", "--host", "0.0.0.0", "--port", "3000"])
        assert fake_app.config.host == "0.0.0.0"
        assert fake_app.config.port == 3000
        assert fake_app.config.log_level == "debug"

    @patch("wren.app.App.run")
    def test_limits(self, mock_run: MagicMock, fake_app: App) -> None:
        main(
            [
                "run",
                "_run_test_app:app",
                "--read-timeout",
                "2.5",
                "--max-connections",
                "16",
            ]
        )
        assert fake_app.config.read_timeout == 2.5
        assert fake_app.config.max_connections == 16

    @patch("wren.app.App.run")
    def test_default_app_gets_storage_dir(self, mock_run: MagicMock, tmp_path: Path) -> None:
        with patch("wren.cli._run.resolve_app", wraps=resolve_app) as resolve:
            main(["run", "--storage-dir", str(tmp_path), "--port", "9090"])
        assert resolve.call_args.args[0] == "wren.handlers:create_app"
        config = resolve.call_args.kwargs["config"]
        assert config.storage_dir == str(tmp_path)
        assert config.port == 9090
        mock_run.assert_called_once()

    def test_bad_import_exits_one(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["run", "nonexistent_module_xyz:app"])
        assert exc_info.value.code == 1
        assert "Error:" in capsys.readouterr().err

    def test_invalid_config_exits_one(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["run", "--port", "70000"])
        assert exc_info.value.code == 1
        assert "outside 0-65535" in capsys.readouterr().err

    @patch("wren.app.App.run", side_effect=OSError("address in use"))
    def test_bind_failure_exits_one(
        self, mock_run: MagicMock, fake_app: App, capsys: pytest.CaptureFixture[str]
    ) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["run", "_run_test_app:app"])
        assert exc_info.value.code == 1
        assert "could not start server" in capsys.readouterr().err
