"""Decompose an ``@author`` tail into name, email and website.

Example:
    Temp <temp@example.com> (https://temp.example.com)

Tokens are positional: the first is the name, the second must look like
``<...>`` to yield an email, the third must look like ``(...)`` to yield a
website. A token in the wrong shape leaves its field empty.
"""

from __future__ import annotations

import re

from usercss.model.metadata import Author

__all__ = ["parse_author"]

_EMAIL_RE = re.compile(r"<(?P<email>[^<>]*)>")
_WEBSITE_RE = re.compile(r"\((?P<website>[^()]*)\)")


def parse_author(tail: str) -> Author:
    """Parse the raw ``@author`` value into an :class:`Author`. Never raises."""
    tokens = tail.split()
    name = tokens[0] if tokens else ""
    email = ""
    website = ""
    if len(tokens) > 1:
        match = _EMAIL_RE.search(tokens[1])
        if match:
            email = match.group("email")
    if len(tokens) > 2:
        match = _WEBSITE_RE.search(tokens[2])
        if match:
            website = match.group("website")
    return Author(name=name, email=email, website=website)
