"""Fabric loader detection and installation."""
import logging
import subprocess
from pathlib import Path
from typing import Callable, List, Optional, Union


logger = logging.getLogger(__name__)


class FabricInstaller:
    """Check for and install the Fabric loader with the bundled installer jar."""

    VERSION_PREFIX = "fabric-loader"

    def __init__(self, installer_jar: Union[str, Path], java: str = "java"):
        """
        Initialize installer.

        Args:
            installer_jar: Path to the Fabric installer jar
            java: Java executable to run it with
        """
        self.installer_jar = Path(installer_jar)
        self.java = java

        # Callback for progress updates
        self.progress_callback: Optional[Callable] = None

    def set_progress_callback(self, callback: Callable) -> None:
        """Set callback for progress updates."""
        self.progress_callback = callback

    def _log_progress(self, message: str) -> None:
        """Log progress message."""
        if self.progress_callback:
            self.progress_callback(message)
        else:
            logger.info(message)

    def is_installed(self, minecraft_dir: Union[str, Path], version: str) -> bool:
        """
        Check if a Fabric profile for the game version already exists.

        Args:
            minecraft_dir: Game directory containing 'versions'
            version: Minecraft version, e.g. '1.16.2'

        Returns:
            True if versions/ holds a 'fabric-loader-*-<version>' folder
        """
        versions_dir = Path(minecraft_dir) / "versions"
        if not versions_dir.is_dir():
            self._log_progress("> No existing minecraft versions found.")
            return False

        self._log_progress("Collecting existing version information.")
        for entry in versions_dir.iterdir():
            if not entry.is_dir():
                continue
            if entry.name.startswith(self.VERSION_PREFIX) and entry.name.endswith(version):
                return True
        return False

    def build_command(self, minecraft_dir: Union[str, Path], version: str) -> List[str]:
        """Build the headless client install command."""
        return [
            self.java,
            "-jar", str(self.installer_jar),
            "client",
            "-dir", str(minecraft_dir),
            "-mcversion", version,
        ]

    def install(self, minecraft_dir: Union[str, Path], version: str) -> bool:
        """
        Run the installer. Failures are logged, never raised.

        Returns:
            True if the installer exited with status 0
        """
        self._log_progress("> Installing designated Fabric + Minecraft version.")
        command = self.build_command(minecraft_dir, version)
        try:
            result = subprocess.run(
                command,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                errors="replace",
            )
        except OSError as e:
            logger.error(f"Fabric Install Error: {e}")
            return False

        if result.returncode != 0:
            logger.error(f"Fabric Install Error: exit status {result.returncode}")
            if result.stdout:
                logger.debug(result.stdout)
            return False

        self._log_progress("> Install complete.")
        return True

    def ensure_installed(self, minecraft_dir: Union[str, Path], version: str) -> Optional[bool]:
        """
        Install Fabric unless it is already there.

        Returns:
            None if already installed, else the result of install()
        """
        if self.is_installed(minecraft_dir, version):
            self._log_progress("> Fabric + Minecraft version already installed.")
            return None
        return self.install(minecraft_dir, version)
