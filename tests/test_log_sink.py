"""Tests for dc_sequence/log_sink.py LogSink."""

import logging

from dc_sequence.log_sink import LogSink


class TestLogSink:
    """Tests for LogSink.write()."""

    def test_appends_records(self, tmp_path):
        log_path = tmp_path / "run.log"
        sink = LogSink(log_path)

        sink.write("stdout: first")
        sink.write("err: boom\nstderr: details")

        content = log_path.read_text(encoding="utf-8")
        assert content.count("] ") == 2
        assert "stdout: first\n" in content
        assert "err: boom\nstderr: details\n" in content
        assert content.index("stdout: first") < content.index("err: boom")

    def test_keeps_existing_content(self, tmp_path):
        log_path = tmp_path / "run.log"
        log_path.write_text("previous run\n", encoding="utf-8")

        LogSink(log_path).write("stdout: ok")

        assert log_path.read_text(encoding="utf-8").startswith("previous run\n")

    def test_write_failure_is_not_raised(self, tmp_path, caplog):
        """Unwritable destinations only produce a warning."""
        sink = LogSink(tmp_path / "missing" / "run.log")

        with caplog.at_level(logging.WARNING, logger="dc_sequence.log_sink"):
            sink.write("stdout: ok")

        assert "Could not write to log file" in caplog.text
