"""Utilities package initialization."""
from .config import Config, ConfigError, CONFIG_FILE, DEFAULT_VERSION, default_mods_directory
from .logger import setup_logger
from .helpers import (
    format_file_size,
    is_mods_directory,
    ask_yes_no,
    ask_path,
    countdown,
)

__all__ = [
    "Config",
    "ConfigError",
    "CONFIG_FILE",
    "DEFAULT_VERSION",
    "default_mods_directory",
    "setup_logger",
    "format_file_size",
    "is_mods_directory",
    "ask_yes_no",
    "ask_path",
    "countdown",
]
