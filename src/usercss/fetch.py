"""Fetch UserCSS source over HTTP and hand it to the parser."""
from __future__ import annotations

import logging

import httpx

from usercss.config import UserCSSConfig
from usercss.errors import FetchError, FetchTimeoutError
from usercss.model.metadata import UserCSS
from usercss.parser import parse_usercss

__all__ = ["fetch_source", "parse_from_url"]

logger = logging.getLogger("usercss.fetch")


def _make_client(config: UserCSSConfig) -> httpx.Client:
    return httpx.Client(
        headers={"User-Agent": config.user_agent},
        timeout=httpx.Timeout(config.timeout),
        follow_redirects=config.follow_redirects,
    )


def fetch_source(
    url: str,
    *,
    config: UserCSSConfig | None = None,
    client: httpx.Client | None = None,
) -> str:
    """GET *url* and return the response body as text.

    Pass *client* to reuse a connection pool or inject a transport; otherwise
    a client is created from *config* and closed before returning.

    Raises :class:`FetchError` on transport failure or a non-2xx status.
    """
    cfg = config or UserCSSConfig()
    owned = client is None
    http = client if client is not None else _make_client(cfg)
    logger.debug("Fetching %s", url)
    try:
        resp = http.get(url)
    except httpx.TimeoutException as exc:
        raise FetchTimeoutError(str(exc), url=url, cause=exc) from exc
    except httpx.HTTPError as exc:
        raise FetchError(str(exc), url=url, cause=exc) from exc
    finally:
        if owned:
            http.close()

    if resp.status_code >= 300:
        raise FetchError(
            f"GET {url} returned HTTP {resp.status_code}",
            url=url,
            status_code=resp.status_code,
        )
    logger.debug("Fetched %d bytes from %s", len(resp.content), url)
    return resp.text


def parse_from_url(
    url: str,
    *,
    config: UserCSSConfig | None = None,
    client: httpx.Client | None = None,
) -> UserCSS:
    """Fetch *url* and parse it. Fetch errors propagate and nothing is parsed."""
    source = fetch_source(url, config=config, client=client)
    return parse_usercss(source)
