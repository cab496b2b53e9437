"""Diagnostic model: structured validation messages for parsed UserCSS metadata."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Severity(Enum):
    """Severity level for a diagnostic message."""

    ERROR = "ERROR"
    WARNING = "WARNING"


class ErrorKind(Enum):
    """The kind of problem a diagnostic reports."""

    DUPLICATE_DIRECTIVE = "DuplicateDirective"
    EMPTY_NAME = "EmptyName"
    EMPTY_NAMESPACE = "EmptyNamespace"
    EMPTY_VERSION = "EmptyVersion"


@dataclass(frozen=True)
class Diagnostic:
    """A single validation finding about a UserCSS header.

    Attributes:
        field: The directive the finding is about, without the leading ``@``.
        kind: Which check produced this diagnostic.
        severity: How serious the issue is.
        message: Human-readable description of the problem.
    """

    field: str
    kind: ErrorKind
    severity: Severity
    message: str

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    @property
    def is_warning(self) -> bool:
        return self.severity is Severity.WARNING

    def __str__(self) -> str:
        return f"{self.severity.value} [{self.kind.value}] @{self.field}: {self.message}"
