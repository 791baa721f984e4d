"""Options dataclass for the bake command."""

import os
from dataclasses import dataclass

from emulsify_tools.fetcher import DEFAULT_TIMEOUT

DEFAULT_BASE_THEME = "emulsify"
STARTER_DIR = "whisk"
CUSTOM_THEMES_DIR = os.path.join("themes", "custom")


@dataclass
class BakeOpts:
    """All options for the bake command."""

    name: str
    source: str | None = None
    base_theme: str = DEFAULT_BASE_THEME
    drupal_root: str = "."
    timeout: float = DEFAULT_TIMEOUT

    def destination_dir(self, machine_name: str) -> str:
        return os.path.join(self.drupal_root, CUSTOM_THEMES_DIR, machine_name)
