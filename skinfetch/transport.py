from __future__ import annotations

from typing import Any, Dict, Optional

import httpx
from loguru import logger

from .config import (
    HTTP_CONNECT_TIMEOUT,
    HTTP_MAX_REDIRECTS,
    HTTP_READ_TIMEOUT,
    HTTP_USER_AGENT,
)
from .errors import TransportError


def http_client() -> httpx.Client:
    return httpx.Client(
        headers={"User-Agent": HTTP_USER_AGENT},
        follow_redirects=True,
        timeout=httpx.Timeout(HTTP_READ_TIMEOUT, connect=HTTP_CONNECT_TIMEOUT),
        max_redirects=HTTP_MAX_REDIRECTS,
    )


def get_json(
    client: httpx.Client,
    url: str,
    params: Optional[Dict[str, str]] = None,
) -> Any:
    """
    GET ``url`` and decode the body as JSON.

    The HTTP status is not checked: the inspection API reports bad items as
    a JSON error object with a 4xx status, and callers inspect the payload.
    Network failures and non-JSON bodies raise ``TransportError``.
    """
    try:
        r = client.get(url, params=params)
    except httpx.HTTPError as e:
        raise TransportError(url, str(e)) from e

    logger.debug("GET {} -> HTTP {}", url, r.status_code)
    try:
        return r.json()
    except ValueError as e:
        raise TransportError(url, f"HTTP {r.status_code}, body is not JSON") from e
