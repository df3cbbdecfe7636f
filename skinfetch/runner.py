from __future__ import annotations

from typing import Optional

from loguru import logger

from .config import DEFAULT_ITEM_LIMIT
from .errors import UsageError
from .inventory import fetch_inventory
from .item_fetch import fetch_item
from .rate_limit import RateLimiter


def run_batch(
    inspect_url: Optional[str] = None,
    profile: Optional[str] = None,
    steam_id: Optional[str] = None,
    limit: int = DEFAULT_ITEM_LIMIT,
    retry_rejects: bool = False,
    limiter: Optional[RateLimiter] = None,
) -> str:
    """
    Produce the record text for one run.

    A direct inspect link fetches that single item. Otherwise the inventory
    of ``profile`` / ``steam_id`` is reconciled; the steam id is always
    needed there because it goes into every inspect link.
    """
    if inspect_url:
        if profile or steam_id:
            raise UsageError("Give either an inspect link or a profile, not both")
        logger.info("Fetching single item")
        return fetch_item(inspect_url) or ""

    if not profile and not steam_id:
        raise UsageError("No inspect link or profile given")
    if profile and not steam_id:
        raise UsageError("A steam id is required alongside the profile handle")
    if not profile:
        logger.info("Custom link not provided. Assuming /profiles/{}", steam_id)

    return fetch_inventory(profile, steam_id, limit, retry_rejects, limiter=limiter)
