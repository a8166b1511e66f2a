import logging

import pytest

from torus_solver.src.core.torus_grid import TorusGrid
from torus_solver.src.utils import config_loader


@pytest.fixture
def grid_4x4() -> TorusGrid:
    return TorusGrid(4, 4)


@pytest.fixture
def restore_client_config():
    """Undo runtime config overrides made by a test."""
    saved = {
        name: getattr(config_loader, name)
        for name in ("API_URL", "USER", "TIMEOUT", "DEBUG_HTTP")
    }
    saved_dict = dict(config_loader.CLIENT_CONFIG)
    yield
    for name, value in saved.items():
        setattr(config_loader, name, value)
    config_loader.CLIENT_CONFIG.clear()
    config_loader.CLIENT_CONFIG.update(saved_dict)


@pytest.fixture
def client_logger_at_default():
    """Start the HTTP client logger at the package default level and restore it afterwards."""
    client_logger = logging.getLogger("torus_solver.src.api.client")
    saved = client_logger.level
    client_logger.setLevel(logging.INFO)
    yield client_logger
    client_logger.setLevel(saved)
