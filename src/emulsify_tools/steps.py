"""Pipeline steps that turn a starter recipe into a customized sub-theme."""

import os

import structlog

from emulsify_tools.errors import BakeError, ExtractFailed, FetchFailed
from emulsify_tools.mirror import mirror_tree
from emulsify_tools.source import collapse_top_level_dir, derive_file_name

PACK_DIR = "pack"
RECIPE_DIR = "recipe"

logger = structlog.get_logger(__name__)


class Step:
    """A unit of pipeline work over a PipelineState.

    Subclasses implement perform(); run() turns a BakeError into a logged
    error and a non-zero status.
    """

    name = "step"

    def run(self, state) -> int:
        try:
            self.perform(state)
        except BakeError as e:
            logger.error(str(e), step=self.name)
            return 1
        return 0

    def perform(self, state) -> None:
        raise NotImplementedError


class FetchAndExtractStep(Step):
    """Stores the packed recipe in the workspace and unpacks it."""

    name = "fetch-and-extract"

    def __init__(self, source_location, fetcher, extractor_factory):
        self._source_location = source_location
        self._fetcher = fetcher
        self._extractor_factory = extractor_factory

    def perform(self, state):
        pack_dir = os.path.join(state.workspace_path, PACK_DIR)
        state.packed_artifact_path = os.path.join(pack_dir, derive_file_name(self._source_location))
        logger.debug(
            "fetch Emulsify recipe",
            source=self._source_location,
            pack_path=state.packed_artifact_path,
        )
        try:
            os.makedirs(pack_dir, exist_ok=True)
        except Exception as e:
            raise FetchFailed(f"Unable to create {pack_dir}: {e}") from e
        self._fetcher.fetch(self._source_location, state.packed_artifact_path)

        recipe_dir = os.path.join(state.workspace_path, RECIPE_DIR)
        logger.debug(
            "extract Emulsify recipe",
            pack_path=state.packed_artifact_path,
            recipe_dir=recipe_dir,
        )
        extractor = self._extractor_factory.for_file(state.packed_artifact_path)
        try:
            os.makedirs(recipe_dir)
        except Exception as e:
            raise ExtractFailed(f"Unable to create {recipe_dir}: {e}") from e
        extractor.extract_to(recipe_dir)

        state.resolved_source_dir = collapse_top_level_dir(recipe_dir)


class MirrorStep(Step):
    """Copies the resolved recipe into the destination directory."""

    name = "mirror"

    def perform(self, state):
        logger.debug(
            "copy Emulsify recipe",
            src_dir=state.resolved_source_dir,
            dst_dir=state.destination_dir,
        )
        mirror_tree(state.resolved_source_dir, state.destination_dir)


class FinalizeStep(Step):
    """Rewrites the starter's tokens in the destination directory."""

    name = "finalize"

    def __init__(self, generator, machine_name, label):
        self._generator = generator
        self._machine_name = machine_name
        self._label = label

    def perform(self, state):
        logger.debug("customize Emulsify recipe", dst_dir=state.destination_dir)
        self._generator.generate(state.destination_dir, self._machine_name, self._label)
