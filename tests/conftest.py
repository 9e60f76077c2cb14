import logging

import pytest


@pytest.fixture(autouse=True)
def _reset_package_logger():
    """The CLI installs handlers on the package logger; drop them between tests."""
    yield
    logger = logging.getLogger("figgen")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
