"""Metadata model: Author, DocumentRule, and the UserCSS record."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum
from urllib.parse import urlsplit

logger = logging.getLogger("usercss.model")


class RuleKind(Enum):
    """Predicate keyword of an ``@-moz-document`` rule."""

    DOMAIN = "domain"
    URL = "url"
    URL_PREFIX = "url-prefix"
    REGEXP = "regexp"


@dataclass(frozen=True)
class Author:
    """Decomposed ``@author`` directive. Any part may be empty."""

    name: str = ""
    email: str = ""
    website: str = ""

    def __str__(self) -> str:
        parts = []
        if self.name:
            parts.append(self.name)
        if self.email:
            parts.append(f"<{self.email}>")
        if self.website:
            parts.append(f"({self.website})")
        return " ".join(parts)


@dataclass(frozen=True)
class DocumentRule:
    """A single ``keyword(value)`` predicate from an ``@-moz-document`` block."""

    kind: RuleKind
    value: str

    def matches(self, url: str) -> bool:
        """Return True if *url* satisfies this predicate.

        - domain     -> host equals value or is a subdomain of it
        - url        -> exact match
        - url-prefix -> url starts with value
        - regexp     -> pattern matches the entire url
        """
        if self.kind is RuleKind.URL:
            return url == self.value
        if self.kind is RuleKind.URL_PREFIX:
            return url.startswith(self.value)
        if self.kind is RuleKind.DOMAIN:
            host = (urlsplit(url).hostname or "").lower()
            domain = self.value.lower()
            return host == domain or host.endswith("." + domain)
        try:
            return re.fullmatch(self.value, url) is not None
        except re.error as exc:
            logger.debug("Invalid regexp rule %r: %s", self.value, exc)
            return False

    def __str__(self) -> str:
        return f'{self.kind.value}("{self.value}")'


@dataclass(frozen=True)
class UserCSS:
    """Parsed UserCSS header.

    ``source`` holds the verbatim text the record was parsed from and is only
    ever replaced wholesale (see :func:`usercss.rewrite.set_update_url`).
    ``duplicates`` lists directive names that occurred more than once, in the
    order their second occurrence was seen.
    """

    name: str = ""
    namespace: str = ""
    description: str = ""
    version: str = ""
    license: str = ""
    homepage_url: str = ""
    support_url: str = ""
    update_url: str = ""
    preprocessor: str = ""
    author: Author = Author()
    documents: tuple[DocumentRule, ...] = ()
    source: str = ""
    duplicates: tuple[str, ...] = ()

    def applies_to(self, url: str) -> bool:
        """Return True if any document rule matches *url*."""
        return any(rule.matches(url) for rule in self.documents)
