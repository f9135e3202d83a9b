"""Mod pack updater: download, confirm, install loader, replace mods."""
import logging
import shutil
from pathlib import Path
from typing import Callable, List, Optional, Union

from .modpack import ModPack, UpdateResult, UpdateStatus
from .downloader import ModPackDownloader
from .extractor import extract_mods, count_mod_entries
from .loader import FabricInstaller
from ..utils import Config, ask_path, ask_yes_no, is_mods_directory


logger = logging.getLogger(__name__)


class ModsDirectoryError(Exception):
    """The operator-supplied or configured mods directory is unusable."""

    def __init__(self, message: str, error_type: str = "unknown"):
        """
        Initialize mods directory error.

        Args:
            message: Error message for user
            error_type: Type of error - "not_found", "not_a_directory", "invalid_name"
        """
        super().__init__(message)
        self.message = message
        self.error_type = error_type


class ModPackUpdater:
    """Replace the contents of a mods folder with the latest mod pack."""

    def __init__(
        self,
        config: Config,
        config_path: Union[str, Path],
        modpack: Optional[ModPack] = None,
        downloader: Optional[ModPackDownloader] = None,
        installer: Optional[FabricInstaller] = None,
        prompt: Callable[[str], str] = input,
        auto_confirm: bool = False,
    ):
        """
        Initialize updater.

        Args:
            config: Settings resolved at startup
            config_path: Where to persist a corrected mods directory
            modpack: Archive source and install details
            downloader: Archive downloader
            installer: Fabric installer wrapper
            prompt: Reads one line of operator input
            auto_confirm: Accept the configured directory without asking
        """
        self.config = config
        self.config_path = Path(config_path)
        self.modpack = modpack or ModPack()
        self.downloader = downloader or ModPackDownloader()
        self.installer = installer or FabricInstaller(self.modpack.installer_jar)
        self.prompt = prompt
        self.auto_confirm = auto_confirm

        # Callback for progress updates
        self.progress_callback: Optional[Callable] = None

    def set_progress_callback(self, callback: Callable) -> None:
        """Set callback for progress updates."""
        self.progress_callback = callback
        self.downloader.set_progress_callback(callback)
        self.installer.set_progress_callback(callback)

    def _log_progress(self, message: str) -> None:
        """Log progress message."""
        if self.progress_callback:
            self.progress_callback(message)
        else:
            logger.info(message)

    def download_archive(self) -> Path:
        """Fetch the mod pack archive."""
        self._log_progress("Downloading latest mods")
        archive = self.downloader.download(self.modpack.url, self.modpack.archive_path)
        self._log_progress(f"> Downloaded: {archive}\n")
        return archive

    def confirm_directory(self, config: Config) -> Config:
        """
        Let the operator confirm or replace the mods directory.

        Returns:
            The config to continue with, saved if the directory changed

        Raises:
            ModsDirectoryError: If the replacement path is not an existing folder
        """
        if self.auto_confirm:
            return config

        self._log_progress("< Is this the correct minecraft MODS directory? (if not sure, just type yes) ")
        if ask_yes_no(f"  > {config.directory} ? [y/n]: ", self.prompt):
            return config

        self._log_progress("< Enter the correct path below")
        new_path = ask_path("  > ", self.prompt)
        if not new_path or not Path(new_path).is_dir():
            raise ModsDirectoryError(
                f"Location {new_path} does not exist, exiting.",
                error_type="not_found",
            )

        config = config.with_directory(new_path)
        config.save(self.config_path)
        return config

    def validate_mods_directory(self, config: Config) -> Path:
        """
        Make sure the directory about to be wiped is a mods folder.

        Raises:
            ModsDirectoryError: If its last component is not 'mods', or it is not a folder
        """
        mods_dir = Path(config.directory)
        if not is_mods_directory(mods_dir):
            raise ModsDirectoryError(
                f"FATAL: the mod path should end in 'mods', but it is currently: {config.directory}",
                error_type="invalid_name",
            )
        if mods_dir.exists() and not mods_dir.is_dir():
            raise ModsDirectoryError(
                f"FATAL: the mod path is not a directory: {config.directory}",
                error_type="not_a_directory",
            )
        return mods_dir

    def prepare_loader(self, mods_dir: Path, version: str) -> Optional[bool]:
        """Install Fabric next to the mods folder if needed. Never fatal."""
        return self.installer.ensure_installed(mods_dir.parent, version)

    def clear_mods_directory(self, mods_dir: Path) -> None:
        """
        Remove every existing mod, leaving an empty folder.

        The folder itself is emptied rather than deleted, so a symlinked mods
        folder keeps both its link and its target.
        """
        if mods_dir.is_dir():
            self._log_progress("Removing old mods for Minecraft")
            for entry in mods_dir.iterdir():
                if entry.is_dir() and not entry.is_symlink():
                    shutil.rmtree(entry)
                else:
                    entry.unlink()
            self._log_progress("> Mods have been removed")
        mods_dir.mkdir(parents=True, exist_ok=True)

    def install_mods(self, archive: Path, mods_dir: Path) -> List[Path]:
        """Extract the pack's jars into the mods folder."""
        self._log_progress("Loading new mods for Minecraft")
        expected = count_mod_entries(archive, self.modpack.entry_pattern)
        extracted = extract_mods(archive, mods_dir, self.modpack.entry_pattern)
        self._log_progress(f"> Mods loaded ({len(extracted)} of {expected})")
        return extracted

    def cleanup(self, archive: Path) -> None:
        """Delete the downloaded archive."""
        self._log_progress("Cleaning up")
        try:
            archive.unlink()
        except FileNotFoundError:
            pass
        self._log_progress("> Done")

    def run(self) -> UpdateResult:
        """
        Perform a full update.

        Returns:
            UpdateResult describing the outcome; operator errors are reported
            through its status instead of raising

        Raises:
            DownloadError, ExtractionError, ConfigError, OSError: On unrecoverable failures
        """
        config = self.config
        try:
            archive = self.download_archive()
        finally:
            self.downloader.close()

        try:
            config = self.confirm_directory(config)
            self._log_progress("")
            mods_dir = self.validate_mods_directory(config)
        except ModsDirectoryError as e:
            logger.error(e.message)
            logger.error("Exiting.")
            if e.error_type in ("not_found", "not_a_directory"):
                status = UpdateStatus.INVALID_DIRECTORY
            else:
                status = UpdateStatus.INVALID_MODS_PATH
            return UpdateResult(status=status, config=config, message=e.message)

        loader_installed = self.prepare_loader(mods_dir, config.version)
        self.clear_mods_directory(mods_dir)
        extracted = self.install_mods(archive, mods_dir)
        self.cleanup(archive)

        self.config = config
        return UpdateResult(
            status=UpdateStatus.COMPLETED,
            config=config,
            extracted_files=extracted,
            loader_installed=loader_installed,
        )
