import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def quiet_logging():
    # The CLI enables logging and binds a sink to the captured stderr
    yield
    logger.remove()
    logger.disable("pfh.nacamesh")
