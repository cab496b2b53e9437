"""Extract document-matching rules from an ``@-moz-document`` tail.

Syntax example:
    @-moz-document url-prefix("https://x.org/"), domain('example.com') {
    @-moz-document regexp(^https?://(.+\\.example\\.org)/$) {
"""

from __future__ import annotations

import logging
import re

from usercss.model.metadata import DocumentRule, RuleKind

__all__ = ["parse_document_rules", "strip_block_open"]

logger = logging.getLogger("usercss.parser")

# Matches one predicate call. The closing paren must be followed by the end of
# the tail, the block's opening brace, or a comma and the next predicate call,
# so commas inside arguments and parens inside regexp patterns stay in the
# value. A brace followed by a digit or comma is a regexp quantifier.
_RULE_RE = re.compile(
    r"""
    (?<![\w-])
    (?P<keyword>url-prefix|url|domain|regexp)
    \(\s*
    (?:
        "(?P<double>[^"]*)"         # double-quoted argument
      | '(?P<single>[^']*)'         # single-quoted argument
      | (?P<raw>.*?)                # bare argument (non-greedy)
    )
    \s*\)
    (?=\s*(?:$|\{(?![\d,])|,\s*[\w-]+\s*\())
    """,
    re.VERBOSE,
)

_BLOCK_OPEN_RE = re.compile(r"\s*\{\s*$")


def strip_block_open(tail: str) -> str:
    """Remove the trailing ``{`` (and whitespace before it) from a rule line."""
    return _BLOCK_OPEN_RE.sub("", tail)


def parse_document_rules(tail: str) -> list[DocumentRule]:
    """Parse every recognized predicate in *tail*, left to right.

    Unknown predicate names and malformed calls are skipped silently.
    """
    rules: list[DocumentRule] = []
    for match in _RULE_RE.finditer(tail):
        value = match.group("double")
        if value is None:
            value = match.group("single")
        if value is None:
            value = match.group("raw")
        rules.append(DocumentRule(kind=RuleKind(match.group("keyword")), value=value))
    if not rules and tail:
        logger.debug("No document rules recognized in %r", tail)
    return rules
