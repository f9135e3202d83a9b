"""Mod jar extraction from a mod pack archive."""
import logging
import os
import re
import shutil
import zipfile
from pathlib import Path
from typing import List, Optional, Union

from .modpack import MOD_ENTRY_PATTERN


logger = logging.getLogger(__name__)


class ExtractionError(Exception):
    """Raised when the archive cannot be extracted."""

    def __init__(self, message: str, extracted: Optional[List[Path]] = None, error_type: str = "unknown"):
        """
        Initialize extraction error.

        Args:
            message: Error message for user
            extracted: Files written before the failure
            error_type: Type of error - "bad_archive", "unsafe_path", "filesystem", "unknown"
        """
        super().__init__(message)
        self.message = message
        self.extracted = list(extracted or [])
        self.error_type = error_type


class UnsafeEntryError(ExtractionError):
    """An archive entry would be written outside the destination (zip-slip)."""

    def __init__(self, path: str, extracted: Optional[List[Path]] = None):
        super().__init__(f"{path}: illegal file path", extracted, error_type="unsafe_path")
        self.path = path


def entry_basename(name: str) -> str:
    """Last component of an archive entry name, splitting on '/' and '\\'."""
    return name.replace("\\", "/").rsplit("/", 1)[-1]


def is_mod_entry(info: zipfile.ZipInfo, pattern: Union[str, "re.Pattern[str]"] = MOD_ENTRY_PATTERN) -> bool:
    """Check if an archive entry is a mod jar that should be installed."""
    if info.is_dir():
        return False
    return re.search(pattern, info.filename) is not None


def resolve_output_path(destination: Union[str, Path], name: str) -> Path:
    """
    Map an archive entry onto the flat destination directory.

    Raises:
        UnsafeEntryError: If the resulting path escapes the destination
    """
    root = os.path.normpath(os.path.abspath(destination))
    target = os.path.normpath(os.path.join(root, entry_basename(name)))
    prefix = root if root.endswith(os.sep) else root + os.sep
    if not target.startswith(prefix):
        raise UnsafeEntryError(target)
    return Path(target)


def count_mod_entries(archive_path: Union[str, Path], pattern: str = MOD_ENTRY_PATTERN) -> int:
    """Count the archive entries extract_mods would install."""
    try:
        with zipfile.ZipFile(archive_path, 'r') as archive:
            return sum(1 for info in archive.infolist() if is_mod_entry(info, pattern))
    except (zipfile.BadZipFile, OSError) as e:
        raise ExtractionError(f"Cannot read archive {archive_path}: {e}", error_type="bad_archive") from e


def extract_mods(
    archive_path: Union[str, Path],
    destination: Union[str, Path],
    pattern: str = MOD_ENTRY_PATTERN,
) -> List[Path]:
    """
    Extract mod jars from an archive into a single flat directory.

    Entries that are directories or do not match pattern are skipped. Each
    remaining entry is written under its base filename only, so folders
    inside the archive are flattened. The whole operation fails on the first
    entry that would land outside destination.

    Args:
        archive_path: Path to the mod pack zip
        destination: Mods directory to write into
        pattern: Regular expression searched in each entry name

    Returns:
        Paths of the written files, in archive order

    Raises:
        ExtractionError: On a bad archive, unsafe entry or write failure
    """
    compiled = re.compile(pattern)
    extracted: List[Path] = []

    try:
        archive = zipfile.ZipFile(archive_path, 'r')
    except (zipfile.BadZipFile, OSError) as e:
        raise ExtractionError(f"Cannot open archive {archive_path}: {e}", error_type="bad_archive") from e

    with archive:
        for info in archive.infolist():
            if not is_mod_entry(info, compiled):
                continue

            try:
                output_path = resolve_output_path(destination, info.filename)
            except UnsafeEntryError as e:
                e.extracted = list(extracted)
                raise

            extracted.append(output_path)
            try:
                output_path.parent.mkdir(parents=True, exist_ok=True)
                # Both handles are closed before the next entry
                with archive.open(info) as source, open(output_path, 'wb') as target:
                    shutil.copyfileobj(source, target)
            except (OSError, zipfile.BadZipFile) as e:
                raise ExtractionError(
                    f"Failed to extract {info.filename}: {e}",
                    extracted,
                    error_type="filesystem",
                ) from e
            logger.debug(f"  Extracted {output_path.name}")

    return extracted
