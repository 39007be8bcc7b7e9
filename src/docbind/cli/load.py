"""docbind load command - unmarshal docs into a schema and print it as JSON."""

import json
from pathlib import Path

import click
from pydantic import TypeAdapter, ValidationError

from docbind.cli.utils import cli_errors, import_schema
from docbind.config.models import DocBindConfig
from docbind.unmarshal import unmarshal_module, unmarshal_package


@click.command()
@click.argument("path", default=".", type=click.Path(exists=True, file_okay=False, path_type=Path))
@click.option("--schema", "schema_ref", required=True, help="Destination record as module:Class")
@click.option(
    "-I",
    "--import-path",
    "import_paths",
    multiple=True,
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Directory to import the schema module from (repeatable).",
)
@click.option(
    "--module/--package",
    "as_module",
    default=True,
    help="Walk every subdirectory (default) or only PATH itself.",
)
@click.pass_context
def load_command(
    ctx: click.Context,
    path: Path,
    schema_ref: str,
    import_paths: tuple[Path, ...],
    as_module: bool,
) -> None:
    """Fill a new instance of the --schema class from PATH and print it.

    The class must be a dataclass or pydantic model whose fields carry
    comment annotations, and must be constructible without arguments.
    """
    config: DocBindConfig = ctx.obj["config"]
    schema = import_schema(schema_ref, import_paths)

    with cli_errors():
        try:
            result = schema()
        except (TypeError, ValidationError) as e:
            raise click.BadParameter(f"cannot create {schema_ref}: {e}", param_hint="--schema") from e
        if as_module:
            unmarshal_module(path, result, config=config.extract)
        else:
            unmarshal_package(path, result, config=config.extract)

    data = TypeAdapter(schema).dump_python(result, mode="json")
    click.echo(json.dumps(data, indent=2))
