"""selkit CLI entry point: Click group with subcommands."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from selkit import __version__
from selkit.errors import ParseError, SelectorError, SerializationError


@click.group()
@click.version_option(version=__version__, prog_name="selkit")
@click.option(
    "--log-level",
    default="WARNING",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging level",
)
def cli(log_level: str) -> None:
    """selkit - CSS selector builder, rectangles and JSON helpers."""
    logging.basicConfig(
        level=log_level.upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.command()
@click.option("--element", "element_name", default=None, help="Type selector")
@click.option("--id", "id_name", default=None, help="Id selector")
@click.option("--class", "classes", multiple=True, help="Class (repeatable)")
@click.option("--attr", "attributes", multiple=True, help="Attribute (repeatable)")
@click.option(
    "--pseudo-class", "pseudo_classes", multiple=True, help="Pseudo-class (repeatable)"
)
@click.option("--pseudo-element", default=None, help="Pseudo-element")
def selector(
    element_name: str | None,
    id_name: str | None,
    classes: tuple[str, ...],
    attributes: tuple[str, ...],
    pseudo_classes: tuple[str, ...],
    pseudo_element: str | None,
) -> None:
    """Build a compound selector from fragments and print it."""
    from selkit.selector.builder import SelectorBuilder

    builder = SelectorBuilder()
    try:
        if element_name is not None:
            builder.set_element(element_name)
        if id_name is not None:
            builder.set_id(id_name)
        for name in classes:
            builder.add_class(name)
        for spec in attributes:
            builder.add_attribute(spec)
        for name in pseudo_classes:
            builder.add_pseudo_class(name)
        if pseudo_element is not None:
            builder.set_pseudo_element(pseudo_element)
    except SelectorError as exc:
        click.echo(f"Selector error: {exc}", err=True)
        sys.exit(1)

    click.echo(builder.stringify())


@cli.command()
@click.argument("width", type=float)
@click.argument("height", type=float)
@click.option("--json", "as_json", is_flag=True, help="Print the rectangle as JSON")
def rectangle(width: float, height: float, as_json: bool) -> None:
    """Print the area of a WIDTH x HEIGHT rectangle."""
    from selkit.jsonbridge import serialize
    from selkit.shapes import make_rectangle

    rect = make_rectangle(_as_number(width), _as_number(height))
    if as_json:
        try:
            click.echo(serialize(rect))
        except SerializationError as exc:
            click.echo(f"Serialization error: {exc}", err=True)
            sys.exit(1)
        return
    click.echo(_as_number(rect.area()))


@cli.command("json")
@click.argument("jsonfile", type=click.Path(exists=True))
@click.option("--indent", type=int, default=None, help="Indent nested values")
def json_command(jsonfile: str, indent: int | None) -> None:
    """Read a JSON file and print its canonical form."""
    from selkit.config import SelkitConfig
    from selkit.jsonbridge import parse, serialize

    try:
        source = Path(jsonfile).read_text(encoding="utf-8")
        data = parse(source)
    except UnicodeDecodeError as exc:
        click.echo(f"Parse error: {jsonfile} is not valid UTF-8 ({exc.reason})", err=True)
        sys.exit(1)
    except ParseError as exc:
        click.echo(f"Parse error: {exc} (line {exc.line}, column {exc.column})", err=True)
        sys.exit(1)

    try:
        click.echo(serialize(data, SelkitConfig(json_indent=indent)))
    except SerializationError as exc:
        click.echo(f"Serialization error: {exc}", err=True)
        sys.exit(1)


def _as_number(value: float) -> int | float:
    """Drop a trailing ``.0`` so whole numbers print as integers."""
    return int(value) if float(value).is_integer() else value
