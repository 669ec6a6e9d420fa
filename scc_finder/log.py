#!/usr/bin/env python3

import logging
import sys
from pathlib import Path

logger = logging.getLogger(__name__)


def setup_logging(log_filepath: Path, opt_debug: bool) -> None:
    # Repeated runs within one process must not write through stale handlers
    for old_handler in list(logger.handlers):
        logger.removeHandler(old_handler)
        old_handler.close()

    log_filepath.unlink(missing_ok=True)

    if opt_debug:
        sys.stderr.write(f"Write log to {log_filepath}\n")
        log_level = logging.DEBUG
    else:
        log_level = logging.NOTSET

    logger.setLevel(log_level)

    handler = logging.FileHandler(filename=log_filepath)
    handler.setLevel(log_level)

    formatter = logging.Formatter("%(asctime)s - %(levelname)s - %(message)s")
    handler.setFormatter(formatter)
    logger.addHandler(handler)
