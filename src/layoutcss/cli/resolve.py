"""CLI command: layoutcss resolve -- compute the style of one target."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from layoutcss.cascade import StyledTarget, StylesheetApplication
from layoutcss.model.context import DEFAULT_FONT_SIZE_PX, UnitContext
from layoutcss.model.tag import TargetTag


def _parse_viewport(
    ctx: click.Context, param: click.Parameter, value: str | None
) -> tuple[float, float]:
    if value is None:
        return (0.0, 0.0)
    width, sep, height = value.lower().partition("x")
    try:
        if not sep:
            raise ValueError(value)
        return (float(width), float(height))
    except ValueError:
        raise click.BadParameter(f"expected WIDTHxHEIGHT, got {value!r}") from None


@click.command()
@click.argument("cssfile", type=click.Path(exists=True, dir_okay=False))
@click.option("--tag", "tag_text", default="", help='Target tag, e.g. "#sidebar.panel"')
@click.option("--inline", default="", help="Inline declarations applied last")
@click.option("--font-size", type=float, default=DEFAULT_FONT_SIZE_PX, show_default=True)
@click.option("--root-font-size", type=float, default=DEFAULT_FONT_SIZE_PX, show_default=True)
@click.option(
    "--viewport",
    default=None,
    callback=_parse_viewport,
    help="Viewport size as WIDTHxHEIGHT in pixels",
)
@click.option("--vertical-text", is_flag=True, help="Text runs vertically (affects ch)")
@click.option("--json", "as_json", is_flag=True, help="Print the style as JSON")
def resolve(
    cssfile: str,
    tag_text: str,
    inline: str,
    font_size: float,
    root_font_size: float,
    viewport: tuple[float, float],
    vertical_text: bool,
    as_json: bool,
) -> None:
    """Compute the style a target tagged TAG receives from a stylesheet."""
    try:
        tag = TargetTag.parse(tag_text)
    except ValueError as exc:
        click.echo(f"Invalid tag: {exc}", err=True)
        sys.exit(1)

    context = UnitContext(
        root_font_size_px=root_font_size,
        font_size_px=font_size,
        viewport_width_px=viewport[0],
        viewport_height_px=viewport[1],
        vertical_text=vertical_text,
    )
    application = StylesheetApplication(
        Path(cssfile).read_text(encoding="utf-8"), context
    )
    style = application.style_for(StyledTarget(tag, inline))
    properties = style.to_dict()

    if as_json:
        click.echo(json.dumps(properties, indent=2))
        return

    click.echo(f"Target: {tag or 'no id or classes'}")
    width = max(len(name) for name in properties)
    for name, text in properties.items():
        click.echo(f"  {name.ljust(width)}  {text}")
