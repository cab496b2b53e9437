"""UserCSS validator: duplicate-directive hints plus required-field checks."""

from __future__ import annotations

from usercss.model.diagnostic import Diagnostic
from usercss.model.metadata import UserCSS
from usercss.validation.rules import check_duplicate_directives, check_required_fields


class ValidationError(Exception):
    """Raised by :func:`validate_or_raise` when a required field is empty."""

    def __init__(self, errors: list[Diagnostic]) -> None:
        self.errors = errors
        self.fields = [d.field for d in errors]
        super().__init__(
            "invalid UserCSS header: " + "; ".join(d.message for d in errors)
        )


def validate(usercss: UserCSS) -> list[Diagnostic]:
    """Return every problem found in *usercss*; empty means it passed.

    Duplicate-directive warnings come first, followed by one error per
    empty required field (name, namespace, version). Never stops early.
    """
    diagnostics = check_duplicate_directives(usercss)
    diagnostics.extend(check_required_fields(usercss))
    return diagnostics


def _partition(usercss: UserCSS) -> tuple[list[Diagnostic], list[Diagnostic]]:
    errors: list[Diagnostic] = []
    warnings: list[Diagnostic] = []
    for diag in validate(usercss):
        (errors if diag.is_error else warnings).append(diag)
    return errors, warnings


def validate_or_raise(usercss: UserCSS) -> list[Diagnostic]:
    """Raise :class:`ValidationError` on errors; otherwise return the warnings."""
    errors, warnings = _partition(usercss)
    if errors:
        raise ValidationError(errors)
    return warnings


def is_valid(usercss: UserCSS) -> bool:
    """True when *usercss* has no ERROR diagnostics; warnings are ignored."""
    errors, _ = _partition(usercss)
    return not errors
