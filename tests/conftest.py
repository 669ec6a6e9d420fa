#!/usr/bin/env python3

import sys
from collections.abc import Iterator
from pathlib import Path

import pytest


def _repo_path() -> Path:
    return Path(__file__).resolve().parent.parent


def _add_python_paths() -> None:
    # make the repo directory available
    sys.path.insert(0, str(_repo_path()))


_add_python_paths()


@pytest.fixture(autouse=True)
def close_log_handlers() -> Iterator[None]:
    yield

    from scc_finder.log import logger  # pylint: disable=import-outside-toplevel

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
