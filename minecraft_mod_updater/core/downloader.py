"""Mod pack archive downloader."""
import logging
from pathlib import Path
from typing import Callable, Optional, Union

import requests

from ..utils import format_file_size


logger = logging.getLogger(__name__)


class DownloadError(Exception):
    """Custom exception for archive download errors."""

    def __init__(self, message: str, error_type: str = "unknown", status_code: Optional[int] = None):
        """
        Initialize download error.

        Args:
            message: Error message for user
            error_type: Type of error - "offline", "not_found", "server_error", "timeout",
                "filesystem", "unknown"
            status_code: HTTP status code if applicable
        """
        super().__init__(message)
        self.message = message
        self.error_type = error_type
        self.status_code = status_code


class ModPackDownloader:
    """Stream a mod pack archive from the web to disk."""

    CHUNK_SIZE = 8192

    def __init__(self, timeout: Optional[float] = 60, session: Optional[requests.Session] = None):
        """
        Initialize downloader.

        Args:
            timeout: Connect/read timeout in seconds, None to wait forever
            session: Optional requests session to reuse
        """
        self.timeout = timeout
        self._owns_session = session is None
        self.session = session or requests.Session()

        # Callback for progress updates
        self.progress_callback: Optional[Callable] = None

    def close(self) -> None:
        """Close the HTTP session if this downloader created it."""
        if self._owns_session:
            self.session.close()

    def __enter__(self) -> "ModPackDownloader":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def set_progress_callback(self, callback: Callable) -> None:
        """Set callback for progress updates."""
        self.progress_callback = callback

    def _log_progress(self, message: str) -> None:
        """Log progress message."""
        if self.progress_callback:
            self.progress_callback(message)
        else:
            logger.info(message)

    def download(self, url: str, output_path: Union[str, Path]) -> Path:
        """
        Download a URL to a local file without holding it in memory.

        Any existing file at output_path is overwritten.

        Args:
            url: Archive URL
            output_path: Where to save the file

        Returns:
            Path of the written file

        Raises:
            DownloadError: With specific error type
        """
        output_path = Path(output_path)
        opened = False
        try:
            with self.session.get(url, timeout=self.timeout, stream=True) as response:
                if response.status_code == 404:
                    raise DownloadError(
                        f"Mod pack not found at {url}",
                        error_type="not_found",
                        status_code=404,
                    )
                if response.status_code != 200:
                    raise DownloadError(
                        f"Download failed with status {response.status_code}",
                        error_type="server_error",
                        status_code=response.status_code,
                    )

                total_size = self._content_length(response)
                if total_size > 0:
                    self._log_progress(f"  Downloading {format_file_size(total_size)}...")

                opened = True
                with open(output_path, 'wb') as f:
                    for chunk in response.iter_content(chunk_size=self.CHUNK_SIZE):
                        if chunk:
                            f.write(chunk)
        except requests.exceptions.ConnectionError as e:
            self._remove_partial(output_path, opened)
            raise DownloadError(
                f"Cannot connect to {url}. Check your internet connection.",
                error_type="offline",
            ) from e
        except requests.exceptions.Timeout as e:
            self._remove_partial(output_path, opened)
            raise DownloadError(
                f"Connection to {url} timed out.",
                error_type="timeout",
            ) from e
        except requests.exceptions.RequestException as e:
            self._remove_partial(output_path, opened)
            raise DownloadError(f"Error downloading {url}: {e}") from e
        except OSError as e:
            self._remove_partial(output_path, opened)
            raise DownloadError(
                f"Cannot write {output_path}: {e}",
                error_type="filesystem",
            ) from e

        self._log_progress(f"  Downloaded {format_file_size(output_path.stat().st_size)}")
        return output_path

    @staticmethod
    def _content_length(response) -> int:
        try:
            return int(response.headers.get('content-length', 0) or 0)
        except (TypeError, ValueError):
            return 0

    def _remove_partial(self, output_path: Path, opened: bool) -> None:
        if opened and output_path.exists():
            try:
                output_path.unlink()
            except OSError as e:
                logger.warning(f"Could not remove partial download {output_path}: {e}")
