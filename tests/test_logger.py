# test_logger.py

import logging

from pinline.logger import Logger


class TestLogger:

    def test_disabled_logger_exposes_level_methods(self):
        logger = Logger("pinline.test.disabled")

        for level in ("debug", "info", "warning", "error", "critical"):
            getattr(logger, level)("nothing to see")

    def test_enabled_logger_writes_to_file(self, tmp_path):
        log_file = tmp_path / "pinline.log"
        logger = Logger("pinline.test.enabled", logging_enabled=True, log_file=str(log_file))

        logger.debug("first line")
        logger.critical("flush failed")

        content = log_file.read_text()
        assert "DEBUG" in content and "first line" in content
        assert "CRITICAL" in content and "flush failed" in content

    def test_enabled_logger_keeps_output_off_the_terminal(self, tmp_path, capsys):
        logger = Logger("pinline.test.quiet", logging_enabled=True, log_file=str(tmp_path / "q.log"))

        logger.error("to the file only")

        captured = capsys.readouterr()
        assert captured.out == "" and captured.err == ""
        assert logging.getLogger("pinline.test.quiet").level == logging.DEBUG

    def test_second_logger_for_same_file_does_not_duplicate_records(self, tmp_path):
        log_file = tmp_path / "shared.log"
        Logger("pinline.test.shared", logging_enabled=True, log_file=str(log_file))
        logger = Logger("pinline.test.shared", logging_enabled=True, log_file=str(log_file))

        logger.info("written once")

        assert log_file.read_text().count("written once") == 1
        assert len(logging.getLogger("pinline.test.shared").handlers) == 1

    def test_disabled_logger_adds_no_extra_handlers(self):
        Logger("pinline.test.nulls")
        Logger("pinline.test.nulls")

        assert len(logging.getLogger("pinline.test.nulls").handlers) == 1
