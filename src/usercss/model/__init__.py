"""usercss model layer -- public type re-exports."""

from usercss.model.diagnostic import Diagnostic, ErrorKind, Severity
from usercss.model.metadata import Author, DocumentRule, RuleKind, UserCSS

__all__ = [
    # metadata
    "Author",
    "DocumentRule",
    "RuleKind",
    "UserCSS",
    # diagnostic
    "Severity",
    "ErrorKind",
    "Diagnostic",
]
