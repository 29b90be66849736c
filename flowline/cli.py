"""Command-line interface for flowline."""

import logging
import sys
from pathlib import Path

import click

from .graph.errors import InvalidChoiceError, MachineError
from .output.formatter import format_validation_result
from .schema.errors import SchemaLoadError, SchemaValidationError


def _fail_schema(e: SchemaLoadError | SchemaValidationError) -> None:
    if isinstance(e, SchemaLoadError):
        click.echo(f"Error loading file: {e}", err=True)
    else:
        click.echo(f"Schema validation error: {e}", err=True)
        for err in e.errors:
            click.echo(f"  - {err['loc']}: {err['msg']}", err=True)
    sys.exit(2)


def _load_styles(styles_file: str | None):
    """Return the style table from a file, or the stock table."""
    from .machine.style_table import build_style_table, default_style_table
    from .schema.loader import parse_style_table

    if styles_file is None:
        return default_style_table()
    return build_style_table(parse_style_table(styles_file))


@click.group()
@click.version_option(package_name="flowline")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log debug output")
def main(verbose: bool):
    """flowline: render state machines as Mermaid flowcharts."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s"
        )


@main.command()
@click.argument("machine_file", type=click.Path(exists=True))
@click.option(
    "--styles",
    "styles_file",
    type=click.Path(exists=True),
    default=None,
    help="Style table file (defaults to the stock table)",
)
@click.option(
    "--output",
    "output_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write the diagram to this file instead of stdout",
)
def render(machine_file: str, styles_file: str | None, output_path: str | None):
    """Render a state machine file as a Mermaid flowchart.

    MACHINE_FILE is the path to a YAML or JSON state machine.

    Exit codes:
      0 - Diagram rendered
      1 - The machine cannot be drawn (undefined state, bad tag)
      2 - File or schema error
    """
    from .machine.builder import process_machine
    from .schema.loader import parse_machine

    try:
        machine = parse_machine(machine_file)
        style_table = _load_styles(styles_file)
    except (SchemaLoadError, SchemaValidationError) as e:
        _fail_schema(e)

    try:
        text = process_machine(machine, style_table)
    except (MachineError, InvalidChoiceError) as e:
        click.echo(f"Cannot render machine: {e}", err=True)
        sys.exit(1)

    if output_path is None:
        click.echo(text, nl=False)
    else:
        Path(output_path).write_text(text, encoding="utf-8")
        click.echo(f"Wrote: {output_path}")
    sys.exit(0)


@main.command()
@click.argument("machine_file", type=click.Path(exists=True))
@click.option(
    "--styles",
    "styles_file",
    type=click.Path(exists=True),
    default=None,
    help="Style table file; enables the style coverage check",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format",
)
@click.option(
    "--strict",
    is_flag=True,
    default=False,
    help="Treat warnings as errors",
)
def validate(
    machine_file: str, styles_file: str | None, output_format: str, strict: bool
):
    """Validate a state machine file.

    MACHINE_FILE is the path to a YAML or JSON state machine.

    Exit codes:
      0 - Validation passed
      1 - Validation failed (errors found)
      2 - File or schema error
    """
    from .validators.runner import validate_machine_file

    try:
        style_table = _load_styles(styles_file) if styles_file else None
        result = validate_machine_file(machine_file, style_table)
    except (SchemaLoadError, SchemaValidationError) as e:
        _fail_schema(e)

    output = format_validation_result(result, output_format)  # type: ignore
    click.echo(output)

    if result.has_errors:
        sys.exit(1)
    elif strict and result.has_warnings:
        sys.exit(1)
    else:
        sys.exit(0)


if __name__ == "__main__":
    main()
