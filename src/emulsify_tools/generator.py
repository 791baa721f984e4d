"""SubThemeGenerator: rewrites starter recipe tokens in a copied sub-theme."""

import fnmatch
import os
import re

import structlog

from emulsify_tools.errors import CustomizeFailed
from emulsify_tools.template_renderer import render_template_file

STARTER_MACHINE_NAME = "whisk"
STARTER_NAME = "Whisk"

CUSTOMIZABLE_PATTERNS = (
    "*.yml",
    "*.theme",
    "package.json",
    "composer.json",
    "*.md",
)

TEMPLATE_SUFFIX = ".j2"

_SKIPPED_DIRS = ("node_modules", ".git")

logger = structlog.get_logger(__name__)


class SubThemeGenerator:
    """Customizes a copied starter recipe for a new sub-theme.

    Paths named after the starter are renamed after the new machine name,
    the starter's name and machine name are replaced inside customizable
    text files, and ``*.j2`` templates are rendered in place.
    """

    def __init__(
        self,
        starter_machine_name: str = STARTER_MACHINE_NAME,
        starter_name: str = STARTER_NAME,
        patterns: tuple[str, ...] = CUSTOMIZABLE_PATTERNS,
    ):
        self.starter_machine_name = starter_machine_name
        self.starter_name = starter_name
        self.patterns = patterns

    def generate(self, directory: str, machine_name: str, name: str) -> None:
        """Customize the sub-theme in *directory*.

        Raises:
            CustomizeFailed: If a rename, a file write or a template render fails.
        """
        try:
            self._rename_paths(directory, machine_name)
            self._replace_tokens(directory, machine_name, name)
            self._render_templates(directory, machine_name, name)
        except Exception as e:
            raise CustomizeFailed(f"Unable to customize {directory}: {e}") from e

    def _rename_paths(self, directory, machine_name):
        if machine_name == self.starter_machine_name:
            return
        for dirpath, dirnames, filenames in os.walk(directory, topdown=False):
            if _in_skipped_dir(os.path.relpath(dirpath, directory)):
                continue
            for entry in filenames + dirnames:
                if self.starter_machine_name not in entry or entry in _SKIPPED_DIRS:
                    continue
                new_entry = entry.replace(self.starter_machine_name, machine_name)
                os.rename(os.path.join(dirpath, entry), os.path.join(dirpath, new_entry))
                logger.debug("renamed starter path", path=os.path.join(dirpath, new_entry))

    def _replace_tokens(self, directory, machine_name, name):
        replacements = {self.starter_name: name, self.starter_machine_name: machine_name}
        pattern = re.compile("|".join(
            re.escape(token) for token in sorted(replacements, key=len, reverse=True)
        ))
        for path in self._customizable_files(directory):
            try:
                with open(path, encoding="utf-8") as f:
                    content = f.read()
            except UnicodeDecodeError:
                logger.debug("skipped non-text file", path=path)
                continue
            updated = pattern.sub(lambda m: replacements[m.group(0)], content)
            if updated != content:
                with open(path, "w", encoding="utf-8") as f:
                    f.write(updated)

    def _render_templates(self, directory, machine_name, name):
        for path in _walk_files(directory):
            if not path.endswith(TEMPLATE_SUFFIX):
                continue
            rendered = render_template_file(path, machine_name=machine_name, name=name)
            with open(path[:-len(TEMPLATE_SUFFIX)], "w", encoding="utf-8") as f:
                f.write(rendered)
            os.remove(path)

    def _customizable_files(self, directory):
        for path in _walk_files(directory):
            basename = os.path.basename(path)
            if any(fnmatch.fnmatch(basename, p) for p in self.patterns):
                yield path


def _in_skipped_dir(relative_dir):
    return any(part in _SKIPPED_DIRS for part in relative_dir.split(os.sep))


def _walk_files(directory):
    for dirpath, dirnames, filenames in os.walk(directory):
        dirnames[:] = [d for d in dirnames if d not in _SKIPPED_DIRS]
        for filename in filenames:
            yield os.path.join(dirpath, filename)
