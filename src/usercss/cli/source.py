"""Shared loader for CLI commands: read a file path or fetch a URL."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from usercss.errors import FetchError
from usercss.fetch import parse_from_url
from usercss.model.metadata import UserCSS
from usercss.parser import ParseError, parse_usercss


def is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def read_source(path: Path) -> str:
    # newline="" keeps CRLF files byte-identical on write-back
    with open(path, encoding="utf-8", newline="") as fh:
        return fh.read()


def write_source(path: Path, text: str) -> None:
    with open(path, "w", encoding="utf-8", newline="") as fh:
        fh.write(text)


def load_usercss(source: str) -> UserCSS:
    """Parse *source* from disk or the network; exit 1 with a message on failure."""
    try:
        if is_url(source):
            return parse_from_url(source)
        path = Path(source)
        if not path.is_file():
            click.echo(f"No such file: {source}", err=True)
            sys.exit(1)
        return parse_usercss(read_source(path))
    except FetchError as exc:
        click.echo(f"Fetch error: {exc}", err=True)
        sys.exit(1)
    except ParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)
