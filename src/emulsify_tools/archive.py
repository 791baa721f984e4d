"""Archive extractors for packed starter recipes."""

import os
import tarfile
import zipfile

from emulsify_tools.errors import ExtractFailed, UnsupportedArchiveError

ZIP_SUFFIXES = (".zip",)
TAR_SUFFIXES = (".tar", ".tar.gz", ".tgz", ".tar.bz2", ".tbz2", ".tar.xz", ".txz")


class ZipExtractor:
    """Extracts a zip archive."""

    def __init__(self, path: str):
        self.path = path

    def extract_to(self, dest_dir: str) -> None:
        try:
            with zipfile.ZipFile(self.path) as archive:
                archive.extractall(dest_dir)
        except Exception as e:
            raise ExtractFailed(f"Unable to extract {self.path}: {e}") from e


class TarExtractor:
    """Extracts a tar archive, compressed or not."""

    def __init__(self, path: str):
        self.path = path

    def extract_to(self, dest_dir: str) -> None:
        try:
            with tarfile.open(self.path) as archive:
                archive.extractall(dest_dir, filter="data")
        except Exception as e:
            raise ExtractFailed(f"Unable to extract {self.path}: {e}") from e


class ArchiveExtractorFactory:
    """Chooses an extractor for a packed file by extension, then by content."""

    def for_file(self, path: str):
        """Return an extractor able to unpack *path*.

        Raises:
            UnsupportedArchiveError: If the file is neither a zip nor a tar archive.
        """
        lowered = path.lower()
        if lowered.endswith(ZIP_SUFFIXES):
            return ZipExtractor(path)
        if lowered.endswith(TAR_SUFFIXES):
            return TarExtractor(path)
        if zipfile.is_zipfile(path):
            return ZipExtractor(path)
        if _is_tarfile(path):
            return TarExtractor(path)
        raise UnsupportedArchiveError(f"Unsupported archive format: {path}")


def _is_tarfile(path):
    if not os.path.isfile(path):
        return False
    try:
        return tarfile.is_tarfile(path)
    except (tarfile.TarError, OSError):
        return False
