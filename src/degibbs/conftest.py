import pytest
import logging


logger = logging.getLogger(__name__)


@pytest.fixture(scope="session")
def test_options():
    from .test import utils

    options = utils._TestOptions()
    options.configure()
    yield options


@pytest.fixture(scope="session", autouse=True)
def check_grid_bounds():
    """Check every padded grid access against its margin during tests"""
    from ._config import Config

    previous = Config.CHECK_GRID_BOUNDS
    Config.CHECK_GRID_BOUNDS = True
    logger.info("Padded grid bounds checking enabled")
    try:
        yield
    finally:
        Config.CHECK_GRID_BOUNDS = previous


@pytest.fixture(scope="session")
def use_large_memory(test_options):
    """Fixture to flag test using a large memory consumption.

    This can be skipped with `DEGIBBS_TEST_LOW_MEM=True`.
    """
    if test_options.TEST_LOW_MEM:
        pytest.skip(test_options.TEST_LOW_MEM_REASON, allow_module_level=True)


@pytest.fixture
def ringing_image():
    """Step edge with ringing artifacts, as a (height, width) uint16 array"""
    from .test.utils import ringing_step_image

    return ringing_step_image()
