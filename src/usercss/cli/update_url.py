"""CLI command: usercss set-update-url -- point a style at a new update URL."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from usercss.cli.source import load_usercss, write_source
from usercss.rewrite import set_update_url as rewrite


@click.command("set-update-url")
@click.argument("stylefile", type=click.Path(exists=True, dir_okay=False))
@click.argument("url")
@click.option("--in-place", "-i", is_flag=True, help="Write the result back to STYLEFILE")
def set_update_url(stylefile: str, url: str, in_place: bool) -> None:
    """Replace the @updateURL value in STYLEFILE with URL.

    Only an existing @updateURL line is rewritten; everything else in the
    file is left untouched.
    """
    usercss = load_usercss(stylefile)
    if not usercss.update_url:
        click.echo(f"{stylefile} has no @updateURL directive", err=True)
        sys.exit(1)

    try:
        updated = rewrite(usercss, url)
    except ValueError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    if in_place:
        write_source(Path(stylefile), updated.source)
        click.echo(f"Updated {stylefile}: @updateURL {updated.update_url}")
    else:
        click.echo(updated.source, nl=False)
