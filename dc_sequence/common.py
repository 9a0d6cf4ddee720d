"""Common utilities: logging setup and error types."""

import logging


class SequenceError(RuntimeError):
    """Base error for the command sequence."""


class SettingsFileNotFoundError(SequenceError):
    """Raised when no settings file can be resolved for import."""


class PromptClosedError(SequenceError):
    """Raised when a prompt is requested after the channel was closed."""


class InputClosedError(SequenceError):
    """Raised when the user ends input (EOF or Ctrl+C) while a prompt is pending."""


def configure_logging(debug: bool = False):
    """Configure root logging for the CLI.

    Args:
        debug: Enable DEBUG level output; WARNING otherwise
    """
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
