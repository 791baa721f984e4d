"""Convert human-readable labels into machine names."""

import re

_NON_MACHINE_CHARS = re.compile(r"[^a-z0-9_]+")


def normalize(label: str) -> str:
    """Return the machine name for *label*.

    The label is lowercased, then every run of characters outside
    ``[a-z0-9_]`` becomes a single underscore. Leading and trailing
    underscores are kept: ``normalize("My Theme!!") == "my_theme_"``.
    """
    return _NON_MACHINE_CHARS.sub("_", label.lower())
