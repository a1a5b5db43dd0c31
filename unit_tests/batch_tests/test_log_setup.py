import logging
import os

import pytest

from log_setup import configure_run_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    for h in root.handlers:
        if h not in handlers:
            h.close()
    root.handlers = handlers
    root.setLevel(level)


def test_run_logging_creates_file_and_captures_debug(tmp_path, restore_root_logger):
    log_dir = tmp_path / "logs"
    path = configure_run_logging("My Run", log_dir=str(log_dir), console_level=logging.WARNING)

    assert os.path.isabs(path)
    assert os.path.dirname(path) == os.path.abspath(log_dir)
    assert os.path.basename(path).startswith("my_run_")

    logging.getLogger("url_ipv4.test").debug("parsed %s", "127.1")
    for h in restore_root_logger.handlers:
        h.flush()
    with open(path, encoding="utf-8") as f:
        assert "parsed 127.1" in f.read()

    # a second call for the same run reuses the open file
    assert configure_run_logging("My Run", log_dir=str(log_dir)) == path
