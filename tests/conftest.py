# Author: PB
# Maintainer: PB
# Original date: 2026.10.19
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# mdsplice/tests/conftest.py

import sys

import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def reset_logger():
    """CLI runs bind loguru to a temporary stderr; restore the default sink."""
    yield
    logger.remove()
    logger.add(sys.stderr)


@pytest.fixture
def readme(tmp_path):
    """README with a stale section between <!--B--> and <!--E-->."""
    path = tmp_path / "README.md"
    path.write_text("A\n<!--B-->\nold\n<!--E-->\nC", encoding="utf-8")
    return path
