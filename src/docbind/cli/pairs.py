"""docbind pairs command - list extracted doc pairs."""

import json
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table
from rich.text import Text

from docbind.cli.utils import cli_errors
from docbind.config.models import DocBindConfig
from docbind.extract import DocPair, extract_module, extract_package


def _make_pairs_table(pairs: list[DocPair]) -> Table:
    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 1), pad_edge=False)
    table.add_column("Path", style="cyan", no_wrap=True)
    table.add_column("Comment")
    for pair in pairs:
        text = pair.text.rstrip("\n")
        table.add_row(Text(pair.path), Text(text) if text else Text("-", style="dim"))
    return table


@click.command()
@click.argument("path", default=".", type=click.Path(exists=True, file_okay=False, path_type=Path))
@click.option(
    "--module/--package",
    "as_module",
    default=True,
    help="Walk every subdirectory (default) or only PATH itself.",
)
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def pairs_command(ctx: click.Context, path: Path, as_module: bool, as_json: bool) -> None:
    """List the (path, comment) pairs extracted from PATH.

    PATH is the source directory (default: current directory).
    """
    config: DocBindConfig = ctx.obj["config"]
    with cli_errors():
        if as_module:
            pairs = list(extract_module(path, config=config.extract))
        else:
            pairs = list(extract_package(path, config=config.extract))

    if as_json:
        click.echo(json.dumps([pair._asdict() for pair in pairs], indent=2))
        return

    console = Console()
    if not pairs:
        console.print("[yellow]No declarations found[/yellow]")
        return
    console.print(_make_pairs_table(pairs))
