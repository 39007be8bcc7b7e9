"""docbind CLI - docbind command."""

import click

from docbind import __version__
from docbind.cli.load import load_command
from docbind.cli.pairs import pairs_command
from docbind.cli.utils import cli_errors
from docbind.config.loader import load_config
from docbind.core.logging import configure_logging


@click.group()
@click.version_option(version=__version__, prog_name="docbind")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """docbind - unmarshal source doc comments into annotated records."""
    ctx.ensure_object(dict)
    with cli_errors():
        config = load_config()
    if verbose:
        config.logging.level = "DEBUG"
    ctx.obj["verbose"] = verbose
    ctx.obj["config"] = config
    configure_logging(config=config.logging)


cli.add_command(pairs_command, name="pairs")
cli.add_command(load_command, name="load")


if __name__ == "__main__":
    cli()
