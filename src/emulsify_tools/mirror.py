"""Copy a recipe tree into a destination directory."""

import shutil

from emulsify_tools.errors import MirrorFailed


def mirror_tree(source_dir: str, dest_dir: str) -> None:
    """Recursively copy *source_dir* into *dest_dir*.

    Creates *dest_dir* and any missing parents. Files that exist in both
    trees are overwritten; files only present in *dest_dir* are kept.

    Raises:
        MirrorFailed: If the source is missing or any copy fails.
    """
    try:
        shutil.copytree(source_dir, dest_dir, dirs_exist_ok=True)
    except Exception as e:
        raise MirrorFailed(f"Unable to copy {source_dir} to {dest_dir}: {e}") from e
