import logging

import pytest
from PyQt6.QtCore import QSettings

from identflux.config import AppConfig
from identflux.logger import APP_LOGGER_NAME


@pytest.fixture
def app_config():
    """AppConfig backed by a throw-away QSettings store."""
    settings = QSettings("IdentFlux", "TestConfig")
    settings.clear()

    config = AppConfig()
    config.settings = settings
    yield config

    settings.clear()


@pytest.fixture(autouse=True)
def reset_logging():
    """Restores the library logger after tests that reconfigure it."""
    yield
    root = logging.getLogger(APP_LOGGER_NAME)
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        handler.close()
    root.addHandler(logging.NullHandler())
    root.setLevel(logging.NOTSET)
    for name in list(logging.Logger.manager.loggerDict):
        if name.startswith(APP_LOGGER_NAME + "."):
            logging.getLogger(name).setLevel(logging.NOTSET)


def pytest_configure(config):
    config.addinivalue_line("markers", "qt: test needs the PyQt6 settings backend")
