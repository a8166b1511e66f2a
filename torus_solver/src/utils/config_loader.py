"""Loads YAML/JSON configuration files and the client runtime settings."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

DEFAULT_CLIENT_CONFIG: Dict[str, Any] = {
    "api_url": "https://zadanie.openmed.sk",
    "user": "",
    "timeout": 30.0,
    "debug_http": False,
}


def load_config(path: str) -> Dict[str, Any]:
    """Load a YAML or JSON configuration file."""
    path_p = Path(path)
    with open(path_p, "r", encoding="utf-8") as f:
        if path_p.suffix in {".yaml", ".yml"}:
            return yaml.safe_load(f) or {}
        if path_p.suffix == ".json":
            return json.load(f)
        raise ValueError("Unsupported config format")


def load_client_config(path: Optional[Path] = None) -> Dict[str, Any]:
    """Return the client configuration merged over the built-in defaults."""
    if path is None:
        path = Path(__file__).resolve().parents[2] / "configs" / "client_config.yaml"
    config = dict(DEFAULT_CLIENT_CONFIG)
    if Path(path).exists():
        config.update(load_config(str(path)))
    return config


CLIENT_CONFIG: Dict[str, Any] = load_client_config()
API_URL: str = str(CLIENT_CONFIG.get("api_url", DEFAULT_CLIENT_CONFIG["api_url"]))
USER: str = str(CLIENT_CONFIG.get("user") or "")
TIMEOUT: float = float(CLIENT_CONFIG.get("timeout", DEFAULT_CLIENT_CONFIG["timeout"]))
DEBUG_HTTP: bool = bool(CLIENT_CONFIG.get("debug_http", False))


def apply_config(config: Dict[str, Any]) -> None:
    """Replace the runtime settings with those from ``config``."""
    set_api_url(str(config.get("api_url", API_URL)))
    set_user(str(config.get("user") or ""))
    set_timeout(float(config.get("timeout", TIMEOUT)))
    set_debug_http(bool(config.get("debug_http", DEBUG_HTTP)))


def set_api_url(value: str) -> None:
    """Override the challenge service base URL at runtime."""
    global API_URL
    API_URL = value.rstrip("/")
    CLIENT_CONFIG["api_url"] = API_URL


def set_user(value: str) -> None:
    """Override the user label sent with challenge requests."""
    global USER
    USER = value
    CLIENT_CONFIG["user"] = value


def set_timeout(value: float) -> None:
    """Override the HTTP timeout in seconds."""
    global TIMEOUT
    if value <= 0:
        raise ValueError(f"timeout must be positive, got {value}")
    TIMEOUT = value
    CLIENT_CONFIG["timeout"] = value


def set_debug_http(value: bool) -> None:
    """Enable or disable request/response dumps."""
    global DEBUG_HTTP
    DEBUG_HTTP = value
    CLIENT_CONFIG["debug_http"] = value


def print_runtime_config() -> None:
    """Print a summary of the current runtime configuration."""
    info = {
        "api_url": API_URL,
        "user": USER,
        "timeout": TIMEOUT,
        "debug_http": DEBUG_HTTP,
    }
    print("Runtime configuration:")
    for k, v in info.items():
        print(f"  {k}: {v}")
