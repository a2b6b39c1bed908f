import logging

import pytest

from advcalc.core.logger import LOGGER_NAME


@pytest.fixture(autouse=True)
def _reset_advcalc_logger():
    """Снимает console handler, установленный CLI, после каждого теста."""
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
