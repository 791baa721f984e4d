"""Locate installed Drupal themes beneath a Drupal root."""

import os

from emulsify_tools.errors import ThemeNotFoundError

THEME_SEARCH_DIRS = (
    "themes",
    "themes/contrib",
    "themes/custom",
    "core/themes",
    "web/themes",
    "web/themes/contrib",
    "web/themes/custom",
    "web/core/themes",
)

RECURSIVE_SEARCH_ROOTS = ("themes", "web/themes")

_SKIPPED_DIRS = ("node_modules",)


class DrupalThemePathResolver:
    """Finds the directory of an installed theme by its machine name.

    A theme lives in a directory holding ``<theme_id>.info.yml``. The usual
    Drupal locations are checked first, then ``themes/`` is searched
    recursively the way Drupal's extension discovery does.
    """

    def __init__(self, drupal_root: str = "."):
        self._drupal_root = drupal_root

    def resolve(self, theme_id: str) -> str:
        """Return the path of *theme_id*, joined onto the Drupal root.

        Raises:
            ThemeNotFoundError: If no directory holds the theme's info file.
        """
        info_file = f"{theme_id}.info.yml"
        for search_dir in THEME_SEARCH_DIRS:
            candidate = os.path.join(self._drupal_root, search_dir, theme_id)
            if os.path.isfile(os.path.join(candidate, info_file)):
                return candidate

        for search_root in RECURSIVE_SEARCH_ROOTS:
            found = _find_info_file(os.path.join(self._drupal_root, search_root), info_file)
            if found:
                return found

        raise ThemeNotFoundError(
            f"Theme '{theme_id}' not found under {os.path.abspath(self._drupal_root)}"
        )


def _find_info_file(root, info_file):
    if not os.path.isdir(root):
        return None
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames[:] = sorted(
            d for d in dirnames if d not in _SKIPPED_DIRS and not d.startswith(".")
        )
        if info_file in filenames:
            return dirpath
    return None
