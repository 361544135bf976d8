"""Root conftest: ensures nav_geometry package is importable."""

import logging
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent))


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo setup_logger() so caplog keeps seeing package records."""
    yield
    logger = logging.getLogger("nav_geometry")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
