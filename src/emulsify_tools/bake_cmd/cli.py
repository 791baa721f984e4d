"""Click command for the bake workflow."""

import sys

import click

from emulsify_tools.archive import ArchiveExtractorFactory
from emulsify_tools.bake_cmd.bake_command import BakeCommand
from emulsify_tools.bake_cmd.bake_opts import DEFAULT_BASE_THEME, BakeOpts
from emulsify_tools.fetcher import DEFAULT_TIMEOUT, ArtifactFetcher
from emulsify_tools.generator import SubThemeGenerator
from emulsify_tools.pipeline import BakePipeline
from emulsify_tools.theme_path import DrupalThemePathResolver


@click.command("bake")
@click.argument("name")
@click.option(
    "--source", envvar="EMULSIFY_STARTER_SOURCE", default=None,
    help="URL or path of the starter recipe. Defaults to the base theme's whisk directory.",
)
@click.option(
    "--base-theme", default=DEFAULT_BASE_THEME, show_default=True,
    help="Theme whose starter recipe is used when --source is not given.",
)
@click.option(
    "--drupal-root", envvar="DRUPAL_ROOT", default=".", show_default=True,
    type=click.Path(file_okay=False),
    help="Drupal root containing the themes directory.",
)
@click.option(
    "--timeout", default=DEFAULT_TIMEOUT, show_default=True, type=float,
    help="Seconds to wait on the network when downloading the recipe.",
)
def bake_cmd(name, source, base_theme, drupal_root, timeout):
    """Create an Emulsify sub-theme called NAME.

    \b
    Example:
        emulsify-tools bake MyThemeName
    """
    opts = BakeOpts(
        name=name,
        source=source,
        base_theme=base_theme,
        drupal_root=drupal_root,
        timeout=timeout,
    )
    pipeline = BakePipeline(
        ArtifactFetcher(timeout=opts.timeout),
        ArchiveExtractorFactory(),
        SubThemeGenerator(),
    )
    command = BakeCommand(opts, DrupalThemePathResolver(opts.drupal_root), pipeline)
    sys.exit(command.execute())
