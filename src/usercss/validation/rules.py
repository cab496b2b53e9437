"""Checks run by the validator against a parsed UserCSS record."""

from __future__ import annotations

from usercss.model.diagnostic import Diagnostic, ErrorKind, Severity
from usercss.model.metadata import UserCSS

# Directives that must carry a value, and the error each one reports.
REQUIRED_FIELDS: tuple[tuple[str, ErrorKind], ...] = (
    ("name", ErrorKind.EMPTY_NAME),
    ("namespace", ErrorKind.EMPTY_NAMESPACE),
    ("version", ErrorKind.EMPTY_VERSION),
)


def check_duplicate_directives(usercss: UserCSS) -> list[Diagnostic]:
    """One WARNING per single-valued directive the parser saw more than once."""
    return [
        Diagnostic(
            field=field,
            kind=ErrorKind.DUPLICATE_DIRECTIVE,
            severity=Severity.WARNING,
            message=f"@{field} appears more than once; the last value was kept.",
        )
        for field in usercss.duplicates
    ]


def check_required_fields(usercss: UserCSS) -> list[Diagnostic]:
    """One ERROR per required directive that is missing or blank."""
    return [
        Diagnostic(
            field=field,
            kind=kind,
            severity=Severity.ERROR,
            message=f"{field} cannot be empty",
        )
        for field, kind in REQUIRED_FIELDS
        if not getattr(usercss, field).strip()
    ]
