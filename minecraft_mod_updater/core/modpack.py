"""Mod pack data model."""
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional

from ..utils.config import Config


MODPACK_URL = "https://github.com/rx13/rxmc-Mods/archive/master.zip"
ARCHIVE_FILE = "serverMods-master.zip"
BUNDLED_FABRIC_INSTALLER = "fabric-installer-0.6.1.51.jar"

# Jars under any "*mods/" folder of the GitHub branch snapshot
MOD_ENTRY_PATTERN = r"rxmc-Mods-master/[-._a-zA-Z0-9]*mods/.*\.jar$"


class UpdateStatus(Enum):
    """Outcome of an updater run."""
    COMPLETED = "completed"
    INVALID_DIRECTORY = "invalid_directory"
    INVALID_MODS_PATH = "invalid_mods_path"


@dataclass(frozen=True)
class ModPack:
    """Where a mod pack comes from and how to install it."""

    url: str = MODPACK_URL
    archive_path: Path = Path(ARCHIVE_FILE)
    entry_pattern: str = MOD_ENTRY_PATTERN
    installer_jar: Path = Path(BUNDLED_FABRIC_INSTALLER)

    def __repr__(self) -> str:
        """String representation."""
        return f"ModPack({self.url})"


@dataclass
class UpdateResult:
    """What an updater run did."""

    status: UpdateStatus
    config: Config
    extracted_files: List[Path] = field(default_factory=list)
    # None when the loader was already installed
    loader_installed: Optional[bool] = None
    message: str = ""

    @property
    def succeeded(self) -> bool:
        """Check if the mods were replaced."""
        return self.status == UpdateStatus.COMPLETED

    @property
    def exit_code(self) -> int:
        """Process exit code for this outcome."""
        return 0 if self.succeeded else 1
