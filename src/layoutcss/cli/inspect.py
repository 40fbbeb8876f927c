"""CLI command: layoutcss inspect -- display the rules of a stylesheet."""

from __future__ import annotations

from pathlib import Path

import click

from layoutcss.parser import parse_stylesheet


@click.command()
@click.argument("cssfile", type=click.Path(exists=True, dir_okay=False))
def inspect(cssfile: str) -> None:
    """Read a stylesheet and display the rules that were kept.

    Shows each rule's selector and its declarations in document order.
    Dropped input is summarized as a diagnostic count; use ``check`` for
    the details.
    """
    css_path = Path(cssfile)
    stylesheet = parse_stylesheet(css_path.read_text(encoding="utf-8"))

    click.echo(f"Stylesheet: {css_path.name}")
    click.echo(f"Rules: {len(stylesheet.rules)}")
    click.echo(f"Diagnostics: {len(stylesheet.diagnostics)}")
    click.echo()

    for rule in stylesheet.rules:
        location = f"  (line {rule.line})" if rule.line is not None else ""
        click.echo(f"{rule.selector}{location}")
        for declaration in rule.declarations:
            suffix = " !important" if declaration.important else ""
            click.echo(f"    {declaration}{suffix}")
