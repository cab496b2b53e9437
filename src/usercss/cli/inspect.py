"""CLI command: usercss inspect -- display parsed header metadata."""

from __future__ import annotations

import click

from usercss.cli.source import load_usercss

_FIELDS = [
    ("Name", "name"),
    ("Namespace", "namespace"),
    ("Version", "version"),
    ("Description", "description"),
    ("License", "license"),
    ("Homepage", "homepage_url"),
    ("Support", "support_url"),
    ("Update URL", "update_url"),
    ("Preprocessor", "preprocessor"),
]


@click.command()
@click.argument("source")
def inspect(source: str) -> None:
    """Parse a UserCSS file or URL and display its metadata.

    Shows header fields, the decomposed author, and document rules.
    """
    usercss = load_usercss(source)

    for label, attr in _FIELDS:
        value = getattr(usercss, attr)
        if value:
            click.echo(f"{label + ':':<14}{value}")

    author = usercss.author
    if author.name:
        click.echo(f"{'Author:':<14}{author.name}")
        if author.email:
            click.echo(f"{'  email:':<14}{author.email}")
        if author.website:
            click.echo(f"{'  website:':<14}{author.website}")
    click.echo()

    click.echo(f"Documents: {len(usercss.documents)}")
    for rule in usercss.documents:
        click.echo(f"  {rule.kind.value:<11}{rule.value}")
