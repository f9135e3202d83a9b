"""Core package initialization."""
from .modpack import ModPack, UpdateResult, UpdateStatus
from .downloader import ModPackDownloader, DownloadError
from .extractor import extract_mods, count_mod_entries, ExtractionError, UnsafeEntryError
from .loader import FabricInstaller
from .updater import ModPackUpdater, ModsDirectoryError

__all__ = [
    "ModPack",
    "UpdateResult",
    "UpdateStatus",
    "ModPackDownloader",
    "DownloadError",
    "extract_mods",
    "count_mod_entries",
    "ExtractionError",
    "UnsafeEntryError",
    "FabricInstaller",
    "ModPackUpdater",
    "ModsDirectoryError",
]
