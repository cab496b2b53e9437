"""CLI command: usercss validate -- parse and validate a UserCSS header."""

from __future__ import annotations

import sys

import click

from usercss.cli.source import load_usercss
from usercss.validation import validate as run_validate


@click.command()
@click.argument("source")
def validate(source: str) -> None:
    """Parse and validate a UserCSS file or URL.

    Prints diagnostics and exits with code 0 if no errors are found, or
    code 1 if there are errors. Duplicate directives are warnings only.
    """
    usercss = load_usercss(source)
    diagnostics = run_validate(usercss)

    if not diagnostics:
        click.echo(f"OK: {usercss.name} is valid (0 diagnostics)")
        sys.exit(0)

    errors = [d for d in diagnostics if d.is_error]
    warnings = [d for d in diagnostics if d.is_warning]

    for diag in diagnostics:
        click.echo(str(diag))

    click.echo()
    click.echo(f"Summary: {len(errors)} error(s), {len(warnings)} warning(s)")

    if errors:
        sys.exit(1)
    sys.exit(0)
