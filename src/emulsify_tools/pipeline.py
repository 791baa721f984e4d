"""BakePipeline: runs the ordered steps that produce a sub-theme."""

import tempfile
from dataclasses import dataclass

import structlog

from emulsify_tools.machine_name import normalize
from emulsify_tools.source import needs_unpacking
from emulsify_tools.steps import FetchAndExtractStep, FinalizeStep, MirrorStep

WORKSPACE_PREFIX = "emulsify-"

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class ScaffoldRequest:
    """A sub-theme label and the starter recipe to build it from."""

    label: str
    source_location: str

    @property
    def machine_name(self) -> str:
        return normalize(self.label)


@dataclass
class PipelineState:
    """Scratch values handed from one step to the next."""

    workspace_path: str
    resolved_source_dir: str
    destination_dir: str
    packed_artifact_path: str | None = None


class BakePipeline:
    """Orchestrates fetch, extract, mirror, and customize using injected collaborators."""

    def __init__(self, fetcher, extractor_factory, generator):
        self._fetcher = fetcher
        self._extractor_factory = extractor_factory
        self._generator = generator

    def steps_for(self, request: ScaffoldRequest) -> list:
        """Return the ordered steps for *request*.

        Packed recipes (URLs and local archive files) are fetched and
        extracted first; recipe directories are mirrored as they are.
        """
        steps = []
        if needs_unpacking(request.source_location):
            steps.append(FetchAndExtractStep(
                request.source_location, self._fetcher, self._extractor_factory,
            ))
        steps.append(MirrorStep())
        steps.append(FinalizeStep(self._generator, request.machine_name, request.label))
        return steps

    def run(self, request: ScaffoldRequest, destination_dir: str) -> int:
        """Run every step in order, stopping at the first failure.

        The temporary workspace is removed whatever the outcome.

        Returns:
            0 if every step succeeded, 1 otherwise.
        """
        with tempfile.TemporaryDirectory(prefix=WORKSPACE_PREFIX) as workspace:
            state = PipelineState(
                workspace_path=workspace,
                resolved_source_dir=request.source_location,
                destination_dir=destination_dir,
            )
            for step in self.steps_for(request):
                if step.run(state) != 0:
                    logger.debug("bake stopped", failed_step=step.name)
                    return 1
        return 0
