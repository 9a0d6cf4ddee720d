"""
Console prompt channel for the interactive sequence.

The channel serves one prompt at a time: ``ask`` blocks until the user
enters a line. Answers are trimmed and lower-cased so callers can compare
them against expected tokens directly.

Example usage:
    from dc_sequence.prompts import PromptChannel

    channel = PromptChannel()
    if channel.ask("Continue? (yes/no): ") == "yes":
        channel.say("Continuing.")
    channel.close()
"""

import sys

from dc_sequence.common import InputClosedError, PromptClosedError


def is_interactive() -> bool:
    """True when answers are typed at a terminal rather than piped in."""
    return sys.stdin.isatty()


class PromptChannel:
    """Reads user answers and writes messages to the console."""

    def __init__(self, input_func=None, stdout=None, stderr=None):
        self._input = input_func or input
        self._stdout = stdout
        self._stderr = stderr
        self.closed = False

    def ask(self, prompt_text: str, normalize: bool = True) -> str:
        """Prompt the user and wait for a line of input.

        Args:
            prompt_text: Text displayed before the cursor
            normalize: Lower-case the answer (free-text answers keep their case)

        Returns:
            str: The trimmed answer

        Raises:
            PromptClosedError: If the channel was already closed
            InputClosedError: On EOF or Ctrl+C; the channel is closed first
        """
        if self.closed:
            raise PromptClosedError("Cannot prompt after the channel was closed")

        try:
            answer = self._input(prompt_text)
        except (EOFError, KeyboardInterrupt):
            print(file=self._stdout)
            self.close()
            raise InputClosedError("Input closed by user")

        answer = answer.strip()
        return answer.lower() if normalize else answer

    def say(self, message: str = ""):
        print(message, file=self._stdout)

    def warn(self, message: str = ""):
        print(message, file=self._stderr or sys.stderr)

    def close(self):
        self.closed = True
