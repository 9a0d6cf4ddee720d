"""Tests for dc_sequence/runner.py ProcessRunner."""

import subprocess
from unittest.mock import MagicMock, patch

from dc_sequence.runner import ProcessResult, ProcessRunner


def _completed(returncode=0, stdout="", stderr=""):
    result = MagicMock(spec=subprocess.CompletedProcess)
    result.returncode = returncode
    result.stdout = stdout
    result.stderr = stderr
    return result


class TestProcessRunner:
    """Tests for ProcessRunner.run()."""

    def test_success_captures_output(self):
        with patch(
            "dc_sequence.runner.subprocess.run",
            return_value=_completed(0, "hub-a\nhub-b\n", ""),
        ) as mock_run:
            result = ProcessRunner(work_dir="/exports").run("dc-cli hub ls")

        assert result == ProcessResult(error=None, stdout="hub-a\nhub-b\n", stderr="")
        assert result.ok is True
        mock_run.assert_called_once_with(
            "dc-cli hub ls",
            shell=True,
            cwd="/exports",
            capture_output=True,
            encoding="utf-8",
            errors="replace",
            check=False,
        )

    def test_non_zero_exit_is_error(self):
        with patch(
            "dc_sequence.runner.subprocess.run",
            return_value=_completed(2, "", "Unknown hub"),
        ):
            result = ProcessRunner().run("dc-cli hub use nope")

        assert result.ok is False
        assert "exit code 2" in result.error
        assert "dc-cli hub use nope" in result.error
        assert result.stderr == "Unknown hub"

    def test_spawn_failure_is_error(self):
        with patch(
            "dc_sequence.runner.subprocess.run",
            side_effect=FileNotFoundError("No such directory: /missing"),
        ):
            result = ProcessRunner(work_dir="/missing").run("dc-cli hub ls")

        assert result.ok is False
        assert "Could not start command" in result.error
        assert result.stdout == ""

    def test_real_shell_command(self, tmp_path):
        """A real child process runs in the working directory."""
        (tmp_path / "marker.txt").write_text("x")

        result = ProcessRunner(work_dir=str(tmp_path)).run("ls")

        assert result.ok is True
        assert "marker.txt" in result.stdout

    def test_undecodable_output_is_replaced(self, tmp_path):
        """Bytes that are not valid UTF-8 do not abort the run."""
        result = ProcessRunner(work_dir=str(tmp_path)).run("printf 'caf\\351\\n'")

        assert result.ok is True
        assert result.stdout == "caf\ufffd\n"

    def test_undecodable_stderr_on_failure(self, tmp_path):
        result = ProcessRunner(work_dir=str(tmp_path)).run(
            "printf 'r\\351sum\\351\\n' >&2; exit 4"
        )

        assert result.ok is False
        assert "exit code 4" in result.error
        assert result.stderr == "r\ufffdsum\ufffd\n"
