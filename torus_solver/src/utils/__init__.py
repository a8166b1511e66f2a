from .logger import get_logger, set_level
from .config_loader import load_config, load_client_config

__all__ = [
    "get_logger",
    "set_level",
    "load_config",
    "load_client_config",
]
