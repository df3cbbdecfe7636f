from __future__ import annotations

"""
Inventory reconciliation.

Pulls a community inventory snapshot, pairs every owned item with its
description, rebuilds the per-item inspect link and runs each item through
the inspection API. Items the API rejects are collected and can be tried
once more at the end of the batch.

Notes:
  - ``rgInventory`` and ``rgDescriptions`` are keyed by unrelated ids, so
    entries are matched to descriptions by the (instanceid, classid) pair.
  - Several entries can share one description (stacked identical items that
    only differ by asset id).
  - Iteration order of the snapshot carries no meaning.
"""

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Tuple
from urllib.parse import quote

import httpx
from loguru import logger
from pydantic import ValidationError

from .config import (
    ASSET_PLACEHOLDER,
    DEFAULT_ITEM_LIMIT,
    INVENTORY_BY_HANDLE_URL,
    INVENTORY_BY_ID_URL,
    OWNER_PLACEHOLDER,
)
from .errors import InventoryUnavailableError
from .item_fetch import fetch_item
from .name_tag import find_name_tag
from .rate_limit import RateLimiter
from .schemas import InventoryEntry, InventorySnapshot, ItemDescription
from .transport import get_json, http_client

ItemFetcher = Callable[[str, Optional[str]], Optional[str]]
DescriptionIndex = Dict[Tuple[str, str], ItemDescription]


@dataclass
class ReconcileReport:
    """Outcome of one reconciliation pass over an inventory."""

    text: str = ""
    total: int = 0
    fetched: int = 0
    skipped: int = 0
    recovered: int = 0
    rejects: Dict[InventoryEntry, ItemDescription] = field(default_factory=dict)

    @property
    def still_rejected(self) -> int:
        return len(self.rejects) - self.recovered


# ---------------------------
# Snapshot retrieval
# ---------------------------

def inventory_url(profile: Optional[str], steam_id: Optional[str]) -> str:
    """Address by custom profile handle when given, otherwise by 64-bit id."""
    if profile:
        return INVENTORY_BY_HANDLE_URL.format(handle=quote(profile, safe=""))
    if steam_id:
        return INVENTORY_BY_ID_URL.format(steam_id=quote(steam_id, safe=""))
    raise ValueError("Either a profile handle or a steam id is required")


def fetch_snapshot(
    client: httpx.Client,
    profile: Optional[str],
    steam_id: Optional[str],
) -> InventorySnapshot:
    url = inventory_url(profile, steam_id)
    logger.info("Fetching inventory: {}", url)
    payload = get_json(client, url)

    try:
        snapshot = InventorySnapshot.model_validate(payload)
    except ValidationError as e:
        raise InventoryUnavailableError(f"Malformed inventory from {url}: {e}") from e

    if not snapshot.success:
        raise InventoryUnavailableError(f"Couldn't get inventory from {url}")

    logger.info(
        "Inventory has {} items, {} descriptions",
        len(snapshot.rgInventory),
        len(snapshot.rgDescriptions),
    )
    return snapshot


# ---------------------------
# Matching / link building
# ---------------------------

def index_descriptions(snapshot: InventorySnapshot) -> DescriptionIndex:
    return {desc.key: desc for desc in snapshot.descriptions}


def match_description(entry: InventoryEntry, index: DescriptionIndex) -> Optional[ItemDescription]:
    return index.get(entry.key)


def build_inspect_link(template: str, steam_id: str, asset_id: str) -> str:
    return template.replace(OWNER_PLACEHOLDER, steam_id).replace(ASSET_PLACEHOLDER, asset_id)


def _fetch_entry(
    entry: InventoryEntry,
    desc: ItemDescription,
    steam_id: str,
    fetcher: ItemFetcher,
) -> Optional[str]:
    link = build_inspect_link(desc.inspect_template or "", steam_id, entry.id)
    name_tag = find_name_tag(desc.fraudwarnings)
    if desc.fraudwarnings and name_tag is None:
        logger.debug("No name tag in warnings for asset {}: {}", entry.id, desc.fraudwarnings)
    return fetcher(link, name_tag)


# ---------------------------
# Reconciliation
# ---------------------------

def reconcile_snapshot(
    snapshot: InventorySnapshot,
    steam_id: str,
    limit: int = DEFAULT_ITEM_LIMIT,
    retry_rejects: bool = False,
    fetcher: Optional[ItemFetcher] = None,
    limiter: Optional[RateLimiter] = None,
) -> ReconcileReport:
    """
    Fetch up to ``limit`` inventory items and collect their record text.

    Entries without a matching description (or without an inspect action)
    are skipped and do not count against ``limit``. Failed fetches go to the
    reject set; with ``retry_rejects`` each of them is attempted exactly
    once more and nothing is re-queued.
    """
    if limit < 0:
        raise ValueError("limit must be >= 0")
    if fetcher is None:
        fetcher = fetch_item
    if limiter is None:
        limiter = RateLimiter()

    entries = snapshot.entries
    index = index_descriptions(snapshot)

    report = ReconcileReport(total=len(entries))
    limit = min(limit, len(entries))
    chunks: List[str] = []

    for entry in entries:
        if report.fetched >= limit:
            break

        desc = match_description(entry, index)
        if desc is None:
            logger.warning(
                "No description for asset {} (instanceid={}, classid={}); skipping",
                entry.id,
                entry.instanceid,
                entry.classid,
            )
            report.skipped += 1
            continue
        if desc.inspect_template is None:
            logger.warning("Asset {} has no inspect action; skipping", entry.id)
            report.skipped += 1
            continue

        report.fetched += 1
        logger.info(
            "{} / {}, {:.3f}% (Total: {}, {:.1f}%)",
            report.fetched,
            limit,
            report.fetched / limit * 100,
            report.total,
            report.fetched / report.total * 100,
        )

        data = _fetch_entry(entry, desc, steam_id, fetcher)
        if data is None:
            report.rejects[entry] = desc
        else:
            chunks.append(data)

        limiter.pause()

    if report.rejects:
        logger.info("{} item(s) rejected by the inspection API", len(report.rejects))

    if retry_rejects and report.rejects:
        n_rejects = len(report.rejects)
        for n, (entry, desc) in enumerate(report.rejects.items(), start=1):
            logger.info("Rejects: {} / {}, {:.3f}%", n, n_rejects, n / n_rejects * 100)
            data = _fetch_entry(entry, desc, steam_id, fetcher)
            if data is not None:
                chunks.append(data)
                report.recovered += 1
            limiter.pause()
        logger.info("Retry recovered {} of {} rejected item(s)", report.recovered, n_rejects)

    report.text = "".join(chunks)
    return report


def reconcile_inventory(
    profile: Optional[str],
    steam_id: str,
    limit: int = DEFAULT_ITEM_LIMIT,
    retry_rejects: bool = False,
    client: Optional[httpx.Client] = None,
    limiter: Optional[RateLimiter] = None,
) -> ReconcileReport:
    if client is None:
        with http_client() as own_client:
            return reconcile_inventory(
                profile, steam_id, limit, retry_rejects, client=own_client, limiter=limiter
            )

    snapshot = fetch_snapshot(client, profile, steam_id)

    def fetcher(url: str, name_tag: Optional[str]) -> Optional[str]:
        return fetch_item(url, name_tag, client=client)

    return reconcile_snapshot(
        snapshot,
        steam_id,
        limit=limit,
        retry_rejects=retry_rejects,
        fetcher=fetcher,
        limiter=limiter,
    )


def fetch_inventory(
    profile: Optional[str],
    steam_id: str,
    limit: int = DEFAULT_ITEM_LIMIT,
    retry_rejects: bool = False,
    client: Optional[httpx.Client] = None,
    limiter: Optional[RateLimiter] = None,
) -> str:
    """Concatenated record text for every item fetched from the inventory."""
    report = reconcile_inventory(
        profile, steam_id, limit, retry_rejects, client=client, limiter=limiter
    )
    logger.info(
        "Inventory done: {} fetched, {} skipped, {} rejected, {} recovered, {} lost",
        report.fetched,
        report.skipped,
        len(report.rejects),
        report.recovered,
        report.still_rejected,
    )
    return report.text
