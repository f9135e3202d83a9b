"""Configuration management for the Minecraft mod-pack updater."""
import json
import os
import platform
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict, Optional, Union


CONFIG_FILE = Path("clientUpdate.json")
DEFAULT_VERSION = "1.16.2"


class ConfigError(Exception):
    """Raised when the configuration file cannot be read or written."""

    def __init__(self, message: str, error_type: str = "unknown"):
        """
        Initialize config error.

        Args:
            message: Error message for user
            error_type: Type of error - "invalid", "read_error", "write_error"
        """
        super().__init__(message)
        self.message = message
        self.error_type = error_type


def default_mods_directory() -> str:
    """Return the vanilla launcher's mods folder for this OS."""
    if platform.system() == "Windows":
        base = os.environ.get("APPDATA", "")
    else:
        base = os.environ.get("HOME", "")
    return str(Path(base) / ".minecraft" / "mods")


@dataclass(frozen=True)
class Config:
    """Updater settings persisted in ``clientUpdate.json``."""

    version: str
    directory: str

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the on-disk JSON shape."""
        return {
            "version": self.version,
            "directory": self.directory,
        }

    @classmethod
    def from_dict(cls, data: Any) -> "Config":
        """
        Build a config from parsed JSON.

        Raises:
            ConfigError: If the document is not a two-string-field object
        """
        if not isinstance(data, dict):
            raise ConfigError("Config must be a JSON object", error_type="invalid")
        values = {}
        for key in ("version", "directory"):
            value = data.get(key)
            if not isinstance(value, str):
                raise ConfigError(
                    f"Config field '{key}' must be a string, got {value!r}",
                    error_type="invalid",
                )
            values[key] = value
        return cls(**values)

    def with_directory(self, directory: Union[str, Path]) -> "Config":
        """Return a copy pointing at another mods directory."""
        return replace(self, directory=str(directory))

    @classmethod
    def load(
        cls,
        path: Union[str, Path] = CONFIG_FILE,
        default_directory: Optional[str] = None,
    ) -> "Config":
        """
        Load configuration from file, creating it with defaults when absent.

        Args:
            path: Location of the JSON config file
            default_directory: Mods folder to use when creating a new file

        Returns:
            Loaded (or freshly created) configuration

        Raises:
            ConfigError: If the file exists but cannot be parsed, or cannot be created
        """
        path = Path(path)
        if not path.exists():
            config = cls(
                version=DEFAULT_VERSION,
                directory=default_directory or default_mods_directory(),
            )
            config.save(path)
            return config

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Config file {path} is not valid JSON: {e}", error_type="invalid") from e
        except OSError as e:
            raise ConfigError(f"Cannot read config file {path}: {e}", error_type="read_error") from e
        return cls.from_dict(data)

    def save(self, path: Union[str, Path] = CONFIG_FILE) -> None:
        """
        Save configuration to file, replacing previous content.

        Raises:
            ConfigError: If the file cannot be written
        """
        path = Path(path)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, "w", encoding="utf-8") as f:
                json.dump(self.to_dict(), f, indent=2)
        except OSError as e:
            raise ConfigError(f"Cannot write config file {path}: {e}", error_type="write_error") from e
