"""Field dispatcher: turns scanned directives into a :class:`UserCSS` record."""

from __future__ import annotations

import logging

from usercss.model.metadata import DocumentRule, UserCSS
from usercss.parser.author import parse_author
from usercss.parser.documents import parse_document_rules, strip_block_open
from usercss.parser.errors import EmptyInputError, NoDirectivesError
from usercss.parser.scanner import scan_directives

__all__ = ["parse_usercss", "FIELD_DIRECTIVES", "DOCUMENT_DIRECTIVE"]

logger = logging.getLogger("usercss.parser")

# Single-valued directives and the UserCSS field each one sets.
FIELD_DIRECTIVES: dict[str, str] = {
    "@name": "name",
    "@namespace": "namespace",
    "@description": "description",
    "@version": "version",
    "@license": "license",
    "@homepageURL": "homepage_url",
    "@supportURL": "support_url",
    "@updateURL": "update_url",
    "@preprocessor": "preprocessor",
    "@author": "author",
}

# The only directive that may repeat; its rules accumulate.
DOCUMENT_DIRECTIVE = "@-moz-document"


def parse_usercss(source: str) -> UserCSS:
    """Parse UserCSS source text into a :class:`UserCSS` record.

    Raises:
        EmptyInputError: *source* is empty or whitespace only.
        NoDirectivesError: no line of *source* starts with ``@``.
    """
    if not source.strip():
        raise EmptyInputError()

    fields: dict[str, object] = {}
    documents: list[DocumentRule] = []
    duplicates: list[str] = []
    seen = 0

    for directive in scan_directives(source):
        seen += 1
        name, tail = directive.name, directive.tail

        if name == DOCUMENT_DIRECTIVE:
            documents.extend(parse_document_rules(strip_block_open(tail)))
            continue

        field = FIELD_DIRECTIVES.get(name)
        if field is None:
            logger.debug("Skipping unknown directive %s on line %d", name, directive.line)
            continue

        if field in fields:
            logger.warning(
                "Directive %s repeated on line %d; later value wins", name, directive.line
            )
            if name[1:] not in duplicates:
                duplicates.append(name[1:])

        fields[field] = parse_author(tail) if field == "author" else tail

    if seen == 0:
        raise NoDirectivesError()

    return UserCSS(
        source=source,
        documents=tuple(documents),
        duplicates=tuple(duplicates),
        **fields,  # type: ignore[arg-type]
    )
