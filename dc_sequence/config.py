"""Configuration for the dc-cli command sequence.

Values come from explicit constructor arguments first, then from the
environment (optionally loaded from .env files), then from defaults.
"""

from os import getenv
from dotenv import load_dotenv
from typing import Optional

from dc_sequence.constants import (
    DEFAULT_CLI_BINARY,
    DEFAULT_LOG_FILE,
    DEFAULT_WORK_DIR,
)

TRUE_VALUES = ("true", "1", "yes", "on")


class SequenceConfig:
    """Configuration for an interactive import/export sequence."""

    def __init__(
        self,
        cli_binary: Optional[str] = None,
        log_file: Optional[str] = None,
        work_dir: Optional[str] = None,
        stop_on_error: Optional[bool] = None,
        debug: Optional[bool] = None,
        load_from_env: bool = True,
    ):
        """Initialize sequence configuration.

        Args:
            cli_binary: Executable prefixed to every external command
            log_file: Append-only file receiving command results
            work_dir: Directory the commands run in (holds ./settings etc.)
            stop_on_error: End the sequence when a step fails
            debug: Enable debug logging
            load_from_env: Whether to load config from .env files
        """
        if load_from_env:
            load_dotenv(".env", override=True, interpolate=True)
            load_dotenv(".env.dc-cli", override=True, interpolate=True)

        self.CLI_BINARY = cli_binary or getenv("DC_CLI_BINARY", DEFAULT_CLI_BINARY)
        self.LOG_FILE = log_file or getenv("LOG_FILE", DEFAULT_LOG_FILE)
        self.WORK_DIR = work_dir or getenv("WORK_DIR", DEFAULT_WORK_DIR)

        # Failure policy: by default a failed step hands control back to the prompt
        if stop_on_error is not None:
            self.STOP_ON_ERROR = stop_on_error
        else:
            stop_value = getenv("STOP_ON_ERROR", "False").lower()
            self.STOP_ON_ERROR = stop_value in TRUE_VALUES

        if debug is not None:
            self.DEBUG = debug
        else:
            self.DEBUG = getenv("DEBUG", "False").lower() in TRUE_VALUES

    def __repr__(self):
        return (
            f"SequenceConfig(cli_binary={self.CLI_BINARY!r}, "
            f"log_file={self.LOG_FILE!r}, work_dir={self.WORK_DIR!r}, "
            f"stop_on_error={self.STOP_ON_ERROR}, debug={self.DEBUG})"
        )
