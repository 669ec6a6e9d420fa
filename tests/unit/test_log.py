#!/usr/bin/env python3

import logging
from pathlib import Path

from scc_finder.log import logger, setup_logging


def test_setup_logging_debug(tmp_path: Path) -> None:
    log_filepath = tmp_path / "run.log"
    log_filepath.write_text("old run\n")

    setup_logging(log_filepath, True)
    logger.debug("new run")

    assert logger.level == logging.DEBUG
    assert log_filepath.read_text().endswith(" - DEBUG - new run\n")


def test_setup_logging_twice(tmp_path: Path) -> None:
    setup_logging(tmp_path / "first.log", False)
    setup_logging(tmp_path / "second.log", False)

    assert logger.level == logging.NOTSET
    assert len(logger.handlers) == 1
    assert Path(logger.handlers[0].baseFilename) == tmp_path / "second.log"  # type: ignore[attr-defined]
