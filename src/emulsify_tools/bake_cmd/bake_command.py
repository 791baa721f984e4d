"""BakeCommand encapsulates the sub-theme bake workflow."""

import os

import structlog

from emulsify_tools.bake_cmd.bake_opts import STARTER_DIR
from emulsify_tools.errors import ThemeNotFoundError
from emulsify_tools.machine_name import normalize
from emulsify_tools.pipeline import ScaffoldRequest

logger = structlog.get_logger(__name__)


class BakeCommand:
    """Creates an Emulsify sub-theme from a starter recipe."""

    def __init__(self, opts, theme_resolver, pipeline):
        self.opts = opts
        self.theme_resolver = theme_resolver
        self.pipeline = pipeline

    def source_location(self) -> str:
        """Return the configured source, or the starter shipped with the base theme."""
        if self.opts.source:
            return self.opts.source
        return os.path.join(self.theme_resolver.resolve(self.opts.base_theme), STARTER_DIR)

    def execute(self) -> int:
        """Run the bake pipeline and return the exit status."""
        if not normalize(self.opts.name):
            logger.error("Sub-theme name must not be empty")
            return 1

        try:
            source = self.source_location()
        except ThemeNotFoundError as e:
            logger.error(str(e))
            return 1

        request = ScaffoldRequest(label=self.opts.name, source_location=source)
        destination = self.opts.destination_dir(request.machine_name)
        logger.debug(
            "bake Emulsify sub-theme",
            name=request.label,
            machine_name=request.machine_name,
            source=source,
            dst_dir=destination,
        )
        status = self.pipeline.run(request, destination)
        if status == 0:
            logger.info("sub-theme created", name=request.label, dst_dir=destination)
        return status
