"""Tests for console logging configuration."""

import logging

from engine.runtime.logging_setup import configure_logging


def test_attaches_one_handler_per_logger(tmp_path):
    log_file = tmp_path / "modelpack.log"

    configure_logging(logging.DEBUG, names=("engine.test_logging",), log_file=str(log_file))
    configure_logging(logging.DEBUG, names=("engine.test_logging",), log_file=str(log_file))

    logger = logging.getLogger("engine.test_logging")
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 2  # console + file, not duplicated

    logger.info("hello from the saver")
    for h in logger.handlers:
        h.flush()
    assert "hello from the saver" in log_file.read_text(encoding="utf-8")

    for h in list(logger.handlers):
        h.close()
        logger.removeHandler(h)
