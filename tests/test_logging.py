import sys

import pytest
from loguru import logger

from tourguide.utils.logging import setup_logger


@pytest.fixture(autouse=True)
def restore_default_sink():
    yield
    logger.remove()
    logger.add(sys.stderr)


def test_file_sink_receives_records(tmp_path):
    log_file = tmp_path / "tourguide.log"
    setup_logger("DEBUG", str(log_file))
    logger.debug("tracker sweep done")
    logger.complete()
    logger.remove()

    assert "tracker sweep done" in log_file.read_text()


def test_level_filters_console(capsys):
    setup_logger("WARNING")
    logger.info("quiet")
    logger.warning("loud")

    err = capsys.readouterr().err
    assert "loud" in err
    assert "quiet" not in err
