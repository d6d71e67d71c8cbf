import logging

import pytest

from bmfont_writer.log import LOGGER_NAME, setup_logging


@pytest.fixture
def clean_logger():
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


def test_console_only(clean_logger, capsys):
    logger = setup_logging(level=logging.INFO)
    logger.debug("hidden")
    logger.info("shown")
    out = capsys.readouterr().out
    assert "[INFO] shown" in out
    assert "hidden" not in out


def test_file_handler(clean_logger, tmp_path):
    log_file = tmp_path / "bmfont.log"
    logger = setup_logging(str(log_file))
    logger.warning("page missing")
    for handler in logger.handlers:
        handler.flush()
    assert "[WARNING] test_file_handler: page missing" in log_file.read_text(encoding="utf-8")


def test_repeated_setup_does_not_duplicate_handlers(clean_logger, tmp_path):
    setup_logging(str(tmp_path / "a.log"))
    logger = setup_logging()
    assert len(logger.handlers) == 1
