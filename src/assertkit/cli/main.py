"""CLI entry point for assertkit.

Invoked as::

    assertkit [OPTIONS] COMMAND [ARGS]...

or, during development::

    python -m assertkit.cli.main

Commands
--------
explain     Show how two values are compared and whether they are equivalent
classify    Show the type category and nilness of one value
version     Show version information

Values are typed literals, e.g. ``int8(5)``, ``uint64(0)``, ``nil``,
``b'hi'`` or ``null_pointer``; see ``assertkit.cli.literals``.
"""
from __future__ import annotations

import json
import logging
import sys
from typing import cast

import click
import yaml
from rich.console import Console
from rich.markup import escape
from rich.syntax import Syntax
from rich.table import Table

from assertkit.errors import LiteralSyntaxError

console = Console()

_FORMATS = click.Choice(["text", "json", "yaml"], case_sensitive=False)


def _literal(text: str, param_name: str) -> object:
    """Parse a typed literal argument, turning syntax errors into usage errors."""
    from assertkit.cli.literals import parse_literal

    try:
        return parse_literal(text)
    except LiteralSyntaxError as exc:
        raise click.BadParameter(str(exc), param_hint=param_name) from exc


def _emit(data: dict[str, object], output_format: str) -> None:
    """Print ``data`` as JSON or YAML, highlighted on a terminal."""
    if output_format == "json":
        text = json.dumps(data, indent=2)
    else:
        text = yaml.safe_dump(data, default_flow_style=False, sort_keys=False)
    if console.is_terminal:
        console.print(Syntax(text, output_format, theme="monokai"))
    else:
        click.echo(text.rstrip("\n"))


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="assertkit")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """Loose literal equality and nilness checks for test suites."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# ---------------------------------------------------------------------------
# version command
# ---------------------------------------------------------------------------


@cli.command(name="version")
def version_command() -> None:
    """Show detailed version information."""
    import numpy as np

    from assertkit import __version__

    table = Table(show_header=False, box=None)
    table.add_row("[bold]assertkit[/bold]", f"v{__version__}")
    table.add_row("numpy", np.__version__)
    table.add_row("Python", f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}")
    table.add_row("Platform", sys.platform)
    console.print(table)


# ---------------------------------------------------------------------------
# explain command
# ---------------------------------------------------------------------------


@cli.command(name="explain")
@click.argument("left")
@click.argument("right")
@click.option("--format", "output_format", type=_FORMATS, default="text", help="Output format")
def explain_command(left: str, right: str, output_format: str) -> None:
    """Explain whether LEFT and RIGHT are equivalent.

    Exits with status 0 when they are, 1 when they are not.
    """
    from assertkit.equivalence import explain

    explanation = explain(_literal(left, "LEFT"), _literal(right, "RIGHT"))
    data = explanation.to_dict()

    if output_format != "text":
        _emit(data, output_format)
    else:
        table = Table(title="Equivalence", show_lines=True)
        table.add_column("Side", style="bold")
        table.add_column("Value")
        table.add_column("Type")
        table.add_column("Category")
        table.add_column("Canonical literal")
        for side in ("left", "right"):
            info = cast("dict[str, object]", data[side])
            table.add_row(
                side,
                escape(str(info["repr"])),
                escape(str(info["type"])),
                str(info["category"]),
                escape(str(info["literal"])) if info["literal"] else "[dim](passed through)[/dim]",
            )
        console.print(table)
        verdict = "[green]equivalent[/green]" if explanation.equivalent else "[red]not equivalent[/red]"
        console.print(f"\n[bold]Verdict:[/bold] {verdict} (rule: {explanation.rule.name})")

    if not explanation.equivalent:
        sys.exit(1)


# ---------------------------------------------------------------------------
# classify command
# ---------------------------------------------------------------------------


@cli.command(name="classify")
@click.argument("value")
@click.option("--format", "output_format", type=_FORMATS, default="text", help="Output format")
def classify_command(value: str, output_format: str) -> None:
    """Show the type category, canonical literal and nilness of VALUE."""
    from assertkit.nilness import admits_nil, nil_verdict
    from assertkit.values import CanonicalLiteral, classify, reference_kind, to_literal

    parsed = _literal(value, "VALUE")
    kind = reference_kind(parsed)
    literal = to_literal(parsed)
    data: dict[str, object] = {
        "repr": repr(parsed),
        "type": type(parsed).__qualname__,
        "category": classify(parsed).name,
        "reference_kind": kind.name if kind is not None else None,
        "literal": str(literal) if isinstance(literal, CanonicalLiteral) else None,
        "admits_nil": admits_nil(parsed),
        "nil_verdict": nil_verdict(parsed).name,
    }

    if output_format != "text":
        _emit(data, output_format)
        return

    table = Table(show_header=False, title="Classification")
    for key, item in data.items():
        table.add_row(f"[bold]{key}[/bold]", "-" if item is None else escape(str(item)))
    console.print(table)


if __name__ == "__main__":
    cli()
