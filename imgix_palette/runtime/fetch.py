# Copyright (c) 2026 imgix-palette contributors
# SPDX-License-Identifier: MIT

"""
Retrieval of the imgix ``?palette=json`` document.

This is the only I/O in the package: a single GET per call, no retries.
Timeouts and cancellation are handled by httpx.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

import httpx

from imgix_palette.errors import FetchFailure
from imgix_palette.schema import RawPalette

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FetchConfig:
    """Configuration for fetching palette documents."""

    # Appended to the image URL after "?"
    query: str = "palette=json"

    # Seconds, applied to connect/read/write/pool
    timeout: float = 10.0

    # Extra request headers
    headers: dict[str, str] = field(default_factory=dict)

    follow_redirects: bool = True


def palette_url(url: str, config: Optional[FetchConfig] = None) -> str:
    """
    The palette endpoint for an imgix image URL.

    The URL is not validated; the query is appended verbatim.
    """
    config = config or FetchConfig()
    return f"{url}?{config.query}"


async def fetch_raw_palette(
    url: str,
    *,
    config: Optional[FetchConfig] = None,
    client: Optional[httpx.AsyncClient] = None,
) -> RawPalette:
    """
    Fetch and parse the palette document for an imgix-served image.

    Args:
        url: URL of an imgix-served image (without query string)
        config: Fetch configuration (defaults to ``FetchConfig()``)
        client: Optional shared client. It is used as-is and never closed.
            When omitted, a client is opened for this call only. The
            client's own timeout and redirect settings apply unless
            ``config`` is given explicitly.

    Returns:
        The parsed document

    Raises:
        FetchFailure: Transport error, timeout, invalid URL, or non-success status
        PaletteFormatError: The body is not a palette document
    """
    explicit = config is not None
    config = config or FetchConfig()
    target = palette_url(url, config)
    logger.debug("Fetching palette document %s", target)

    try:
        if client is None:
            async with httpx.AsyncClient(
                timeout=config.timeout,
                follow_redirects=config.follow_redirects,
            ) as owned:
                response = await owned.get(target, headers=config.headers)
        elif explicit:
            response = await client.get(
                target,
                headers=config.headers,
                timeout=config.timeout,
                follow_redirects=config.follow_redirects,
            )
        else:
            response = await client.get(target)
    # InvalidURL is raised before any request is sent and is not an HTTPError
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        raise FetchFailure(url, str(exc) or type(exc).__name__) from exc

    if not response.is_success:
        raise FetchFailure(url, f"HTTP {response.status_code}", response.status_code)

    return RawPalette.from_json(response.content)
