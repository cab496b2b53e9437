"""In-place rewrite of the ``@updateURL`` directive.

The rewrite works on the raw source text rather than re-serializing the
record, so comments, alignment and every other directive stay byte-identical.
"""

from __future__ import annotations

import dataclasses
import logging
import re

from usercss.model.metadata import UserCSS

__all__ = ["rewrite_update_url", "set_update_url"]

logger = logging.getLogger("usercss.rewrite")

# Matches the value portion of the first @updateURL line, keeping the
# whitespace run after the name and any trailing whitespace.
_UPDATE_URL_RE = re.compile(
    r"""
    ^(?P<lead>@updateURL[ \t]+)     # directive name and separator
    (?P<value>\S[^\r\n]*?)          # current value
    (?P<trail>[ \t]*)               # trailing whitespace
    (?=\r?$)
    """,
    re.MULTILINE | re.VERBOSE,
)


def _check_url(url: str) -> str:
    url = url.strip()
    if not url:
        raise ValueError("update URL cannot be empty")
    if "\n" in url or "\r" in url:
        raise ValueError(f"update URL cannot contain line breaks: {url!r}")
    return url


def rewrite_update_url(source: str, url: str) -> str:
    """Replace the value of the first ``@updateURL`` line in *source* with *url*.

    Returns *source* unchanged when it has no ``@updateURL`` line with a value.
    """
    url = _check_url(url)
    new_source, count = _UPDATE_URL_RE.subn(
        lambda m: m.group("lead") + url + m.group("trail"), source, count=1
    )
    if not count:
        logger.debug("No @updateURL line to rewrite")
    return new_source


def set_update_url(usercss: UserCSS, url: str) -> UserCSS:
    """Return a copy of *usercss* pointing at *url*, with its source rewritten.

    A record without an update URL is returned as-is: this never adds a
    missing ``@updateURL`` directive.
    """
    if not usercss.update_url:
        logger.debug("Record has no @updateURL; leaving source untouched")
        return usercss
    url = _check_url(url)
    return dataclasses.replace(
        usercss,
        update_url=url,
        source=rewrite_update_url(usercss.source, url),
    )
