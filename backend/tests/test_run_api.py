"""Tests for the server entry point."""

from unittest.mock import patch
import os

import pytest

import run_api
from shared.config import Settings, get_settings


@pytest.fixture
def settings():
    with patch.dict(os.environ, {}, clear=True):
        return Settings(_env_file=None)


class TestServerOptions:
    def test_defaults_come_from_settings(self, settings):
        args = run_api.build_parser().parse_args([])

        assert run_api.server_options(args, settings) == {
            "host": "0.0.0.0",
            "port": 8080,
            "reload": False,
            "log_level": "info",
        }

    def test_flags_override_settings(self, settings):
        args = run_api.build_parser().parse_args(
            ["--reload", "--host", "127.0.0.1", "--port", "9000", "--log-level", "DEBUG"]
        )

        assert run_api.server_options(args, settings) == {
            "host": "127.0.0.1",
            "port": 9000,
            "reload": True,
            "log_level": "debug",
        }

    def test_unknown_log_level_rejected(self):
        with pytest.raises(SystemExit):
            run_api.build_parser().parse_args(["--log-level", "verbose"])


class TestMain:
    def test_log_level_reaches_app_settings(self):
        with patch.dict(os.environ, {}, clear=True), patch("run_api.uvicorn.run") as run:
            get_settings.cache_clear()
            run_api.main(["--log-level", "warning"])

            assert os.environ["LOG_LEVEL"] == "WARNING"
            assert get_settings().log_level == "WARNING"
        get_settings.cache_clear()

        run.assert_called_once()
        assert run.call_args.args == ("api:app",)
        assert run.call_args.kwargs["log_level"] == "warning"
