"""Pytest configuration and fixtures."""

import pytest

from password_toolkit.utils.logger import Logger


@pytest.fixture(autouse=True)
def silence_toolkit_logger():
    """
    Detach the toolkit logger from stdout around each test.

    The CLI reconfigures the shared ``password_toolkit`` logger; without this
    a handler bound to one test's captured stdout would leak into the next.
    """
    Logger(console=False)
    yield
    Logger(console=False)


@pytest.fixture
def config_path(tmp_path):
    """Path to a config file that does not exist yet (defaults apply)."""
    return str(tmp_path / "toolkit_config.json")

