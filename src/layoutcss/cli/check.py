"""CLI command: layoutcss check -- read and validate a stylesheet."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from layoutcss.model.diagnostic import Severity
from layoutcss.validation import validate as run_validate


@click.command()
@click.argument("cssfile", type=click.Path(exists=True, dir_okay=False))
def check(cssfile: str) -> None:
    """Read a stylesheet and resolve every declaration in it.

    Prints diagnostics (errors, warnings, info) and exits with code 0 if
    no errors are found, or code 1 if there are errors.
    """
    css_path = Path(cssfile)
    source = css_path.read_text(encoding="utf-8")
    diagnostics = run_validate(source)

    if not diagnostics:
        click.echo(f"OK: {css_path.name} is valid (0 diagnostics)")
        sys.exit(0)

    errors = [d for d in diagnostics if d.severity is Severity.ERROR]
    warnings = [d for d in diagnostics if d.severity is Severity.WARNING]
    infos = [d for d in diagnostics if d.severity is Severity.INFO]

    for diag in diagnostics:
        click.echo(str(diag))

    click.echo()
    click.echo(
        f"Summary: {len(errors)} error(s), {len(warnings)} warning(s), {len(infos)} info"
    )

    if errors:
        sys.exit(1)
    sys.exit(0)
