"""Starter recipe locations: remote detection, file naming, and unwrapping."""

import os
from urllib.parse import urlsplit

REMOTE_SCHEMES = ("http", "https")

DEFAULT_PACK_NAME = "recipe"


def is_remote(location: str) -> bool:
    """Return True if *location* is an absolute URL the fetcher can download.

    Filesystem paths, relative or absolute, are never remote, and neither
    are URLs with an invalid port.
    """
    try:
        parts = urlsplit(location)
        hostname = parts.hostname
        parts.port  # raises ValueError when out of range
    except ValueError:
        return False
    return parts.scheme.lower() in REMOTE_SCHEMES and bool(hostname)


def needs_unpacking(location: str) -> bool:
    """Return True if *location* names a packed recipe rather than a directory."""
    return is_remote(location) or os.path.isfile(location)


def derive_file_name(location: str) -> str:
    """Return the file name a packed recipe is stored under locally.

    For URLs this is the last segment of the path, with the query string
    and fragment dropped. Locations with no usable basename fall back to
    ``recipe``.
    """
    path = urlsplit(location).path if is_remote(location) else location
    name = os.path.basename(path.rstrip("/\\"))
    return name or DEFAULT_PACK_NAME


def collapse_top_level_dir(extracted_dir: str) -> str:
    """Return the real recipe root inside an extraction directory.

    Many archives wrap their content in a single folder named after the
    release. When *extracted_dir* holds exactly one entry and that entry is
    a directory, its path is returned; otherwise *extracted_dir* is.
    """
    entries = os.listdir(extracted_dir)
    if len(entries) == 1:
        candidate = os.path.join(extracted_dir, entries[0])
        if os.path.isdir(candidate):
            return candidate
    return extracted_dir
