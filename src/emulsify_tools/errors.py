"""Exceptions raised while baking a sub-theme."""


class BakeError(Exception):
    """Base class for failures that stop the bake pipeline."""


class FetchFailed(BakeError):
    """The starter recipe could not be downloaded or copied."""


class ExtractFailed(BakeError):
    """The packed starter recipe could not be extracted."""


class UnsupportedArchiveError(ExtractFailed):
    """No extractor handles the packed file's format."""


class MirrorFailed(BakeError):
    """The recipe could not be copied into the destination directory."""


class CustomizeFailed(BakeError):
    """Placeholder tokens in the copied recipe could not be rewritten."""


class ThemeNotFoundError(BakeError):
    """A theme is not installed under the Drupal root."""
