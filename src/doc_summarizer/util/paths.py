"""Centralized path resolution for the project data directory."""

from pathlib import Path


def get_app_root() -> Path:
    """Project root, 4 levels up from this file."""
    return Path(__file__).parent.parent.parent.parent


def get_data_dir() -> Path:
    return get_app_root() / "data"


def get_config_dir() -> Path:
    return get_data_dir() / "config"


def get_config_path() -> Path:
    """Get path to config.json."""
    return get_config_dir() / "config.json"
