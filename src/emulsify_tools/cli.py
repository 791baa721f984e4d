"""Top-level Click group for the emulsify-tools CLI."""

import click

from emulsify_tools.bake_cmd.cli import bake_cmd
from emulsify_tools.logging_setup import configure_logging


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Show debug output.")
def main(verbose):
    """emulsify-tools - Emulsify sub-theme scaffolding for Drupal."""
    configure_logging(verbose=verbose)


main.add_command(bake_cmd)
main.add_command(bake_cmd, name="emulsify")
