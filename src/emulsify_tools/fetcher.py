"""ArtifactFetcher: downloads or copies a packed starter recipe."""

import shutil

import httpx
import structlog

from emulsify_tools.errors import FetchFailed
from emulsify_tools.source import is_remote

DEFAULT_TIMEOUT = 60.0

logger = structlog.get_logger(__name__)


class ArtifactFetcher:
    """Stores the artifact at a URL or local path into a target file."""

    def __init__(self, timeout: float = DEFAULT_TIMEOUT):
        self._timeout = timeout

    def fetch(self, location: str, target_path: str) -> None:
        """Write the artifact at *location* to *target_path*.

        Raises:
            FetchFailed: If the download or copy fails for any reason.
        """
        try:
            if is_remote(location):
                self._download(location, target_path)
            else:
                shutil.copyfile(location, target_path)
        except Exception as e:
            raise FetchFailed(f"Unable to fetch {location}: {e}") from e

    def _download(self, url, target_path):
        with httpx.stream("GET", url, follow_redirects=True, timeout=self._timeout) as response:
            response.raise_for_status()
            with open(target_path, "wb") as f:
                for chunk in response.iter_bytes():
                    f.write(chunk)
        logger.debug("downloaded starter recipe", url=url, path=target_path)
