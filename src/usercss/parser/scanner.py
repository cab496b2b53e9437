"""Directive scanner: finds every ``@name value`` line in UserCSS source.

Any physical line that starts with ``@`` is a candidate, whether it sits in
the ``==UserStyle==`` comment block or in the style body. That is how
``@-moz-document`` lines are picked up by the same pass.
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from typing import NamedTuple

__all__ = ["Directive", "scan_directives"]

# Matches one directive line: @name, then the rest of the physical line
_DIRECTIVE_RE = re.compile(
    r"""
    ^(?P<name>@\S+)         # directive name, up to the first whitespace
    (?P<tail>[^\r\n]*)      # remainder of the line
    """,
    re.MULTILINE | re.VERBOSE,
)


class Directive(NamedTuple):
    """One scanned directive line."""

    name: str
    tail: str
    line: int


def scan_directives(source: str) -> Iterator[Directive]:
    """Yield a :class:`Directive` for each ``@``-prefixed line, in document order.

    The tail is stripped of surrounding whitespace; a run of spaces or tabs
    between the name and the value is treated the same as a single space.
    """
    line = 1
    pos = 0
    for match in _DIRECTIVE_RE.finditer(source):
        line += source.count("\n", pos, match.start())
        pos = match.start()
        yield Directive(match.group("name"), match.group("tail").strip(), line)
