"""Execution of external dc-cli command lines."""

import logging
import subprocess
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)


@dataclass
class ProcessResult:
    """Outcome of a finished command.

    Output is decoded as UTF-8; undecodable bytes become U+FFFD.

    ``error`` is None when the command exited with status 0.
    """

    error: Optional[str]
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.error is None


class ProcessRunner:
    """Runs literal shell command lines and captures their output."""

    def __init__(self, work_dir: str = "."):
        self.work_dir = work_dir

    def run(self, command: str) -> ProcessResult:
        """Run a command through the shell and wait for it to finish.

        Args:
            command: Complete command line, including the CLI binary

        Returns:
            ProcessResult: captured stdout/stderr and an error message on failure
        """
        logger.debug("Executing %r in %s", command, self.work_dir)
        try:
            result = subprocess.run(
                command,
                shell=True,
                cwd=self.work_dir,
                capture_output=True,
                encoding="utf-8",
                errors="replace",
                check=False,
            )
        except OSError as e:
            logger.error("Could not start %r: %s", command, e)
            return ProcessResult(error=f"Could not start command: {e}")

        logger.debug("%r exited with code %d", command, result.returncode)
        if result.returncode != 0:
            return ProcessResult(
                error=f"Command failed with exit code {result.returncode}: {command}",
                stdout=result.stdout,
                stderr=result.stderr,
            )
        return ProcessResult(error=None, stdout=result.stdout, stderr=result.stderr)
