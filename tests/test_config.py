"""Tests for dc_sequence/config.py SequenceConfig class."""

import os
from unittest.mock import patch

import pytest

from dc_sequence.config import SequenceConfig


class TestSequenceConfigDefaults:
    """Tests for SequenceConfig default values."""

    def test_defaults_without_env(self):
        """Default values when no environment variables are set."""
        with patch.dict(os.environ, {}, clear=True):
            config = SequenceConfig(load_from_env=False)

            assert config.CLI_BINARY == "dc-cli"
            assert config.LOG_FILE == "dc-sequence.log"
            assert config.WORK_DIR == "."
            assert config.STOP_ON_ERROR is False
            assert config.DEBUG is False

    def test_explicit_values_override_env(self):
        """Explicit constructor args override environment variables."""
        env = {
            "DC_CLI_BINARY": "env-cli",
            "LOG_FILE": "env.log",
            "WORK_DIR": "/env",
            "STOP_ON_ERROR": "true",
            "DEBUG": "true",
        }
        with patch.dict(os.environ, env, clear=True):
            config = SequenceConfig(
                cli_binary="npx dc-cli",
                log_file="run.log",
                work_dir="exports",
                stop_on_error=False,
                debug=False,
                load_from_env=False,
            )

        assert config.CLI_BINARY == "npx dc-cli"
        assert config.LOG_FILE == "run.log"
        assert config.WORK_DIR == "exports"
        assert config.STOP_ON_ERROR is False
        assert config.DEBUG is False

    def test_values_from_env(self):
        env = {
            "DC_CLI_BINARY": "env-cli",
            "LOG_FILE": "env.log",
            "WORK_DIR": "/env",
        }
        with patch.dict(os.environ, env, clear=True):
            config = SequenceConfig(load_from_env=False)

        assert config.CLI_BINARY == "env-cli"
        assert config.LOG_FILE == "env.log"
        assert config.WORK_DIR == "/env"


class TestSequenceConfigBooleans:
    """Tests for boolean parsing of STOP_ON_ERROR and DEBUG."""

    @pytest.mark.parametrize(
        "env_value,expected",
        [
            ("true", True),
            ("TRUE", True),
            ("1", True),
            ("yes", True),
            ("on", True),
            ("false", False),
            ("0", False),
            ("no", False),
            ("", False),
            ("random", False),
        ],
    )
    def test_boolean_parsing_from_env(self, env_value, expected):
        with patch.dict(
            os.environ, {"STOP_ON_ERROR": env_value, "DEBUG": env_value}, clear=True
        ):
            config = SequenceConfig(load_from_env=False)
            assert config.STOP_ON_ERROR is expected
            assert config.DEBUG is expected


class TestSequenceConfigDotenv:
    """Tests for .env loading."""

    def test_loads_dotenv_file(self, tmp_path, monkeypatch):
        (tmp_path / ".env.dc-cli").write_text("DC_CLI_BINARY=from-dotenv\n")
        monkeypatch.chdir(tmp_path)

        with patch.dict(os.environ, {}, clear=True):
            config = SequenceConfig(load_from_env=True)
            assert config.CLI_BINARY == "from-dotenv"

    def test_skips_dotenv_when_disabled(self, tmp_path, monkeypatch):
        (tmp_path / ".env").write_text("DC_CLI_BINARY=from-dotenv\n")
        monkeypatch.chdir(tmp_path)

        with patch.dict(os.environ, {}, clear=True):
            config = SequenceConfig(load_from_env=False)
            assert config.CLI_BINARY == "dc-cli"
