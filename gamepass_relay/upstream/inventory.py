# gamepass_relay/upstream/inventory.py
"""
Paginated fetch-and-filter against the public inventory API.

The inventory listing returns every game pass visible in a user's inventory,
not just the ones they created, and offers no server-side creator filter.
We page through all of it and keep the items whose creatorId matches.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import requests

from gamepass_relay.config import Settings, get_settings
from gamepass_relay.upstream.session import get_session

logger = logging.getLogger(__name__)

GAME_PASS_ASSET_TYPE = 34
PAGE_SIZE = 100
SORT_ORDER = "Asc"


@dataclass(frozen=True)
class InventoryRecord:
    asset_id: int
    creator_id: int


@dataclass
class FetchResult:
    """
    Records accepted by the creator filter, in the order they were seen.

    complete is False when pagination stopped on an upstream failure; the
    records gathered before that point are still returned.
    """

    records: List[InventoryRecord] = field(default_factory=list)
    complete: bool = True
    error: Optional[str] = None

    @property
    def asset_ids(self) -> List[int]:
        return [r.asset_id for r in self.records]

    def truncate(self, reason: str) -> None:
        self.complete = False
        self.error = reason


def build_page_params(cursor: str = "") -> Dict[str, Any]:
    params: Dict[str, Any] = {
        "assetTypes": GAME_PASS_ASSET_TYPE,
        "limit": PAGE_SIZE,
        "sortOrder": SORT_ORDER,
    }
    if cursor:
        params["cursor"] = cursor
    return params


def _is_created_by(item: Any, user_id: int) -> bool:
    if not isinstance(item, dict):
        return False
    creator_id = item.get("creatorId")
    # JSON true would otherwise compare equal to 1
    if isinstance(creator_id, bool):
        return False
    return creator_id == user_id


def filter_created(items: Any, user_id: int) -> List[InventoryRecord]:
    """
    Keep the items whose creatorId equals user_id, preserving order.
    Repeated entries are kept as-is; matches without an integer assetId
    are dropped.
    """
    if not isinstance(items, list):
        return []

    records = []
    for item in items:
        if not _is_created_by(item, user_id):
            continue
        asset_id = item.get("assetId")
        if not isinstance(asset_id, int) or isinstance(asset_id, bool):
            logger.debug("Skipping item with unusable assetId %r for user %s", asset_id, user_id)
            continue
        records.append(InventoryRecord(asset_id=asset_id, creator_id=item["creatorId"]))
    return records


def fetch_created_gamepasses(
    user_id: int,
    session: Optional[requests.Session] = None,
    settings: Optional[Settings] = None,
) -> FetchResult:
    """
    Drain every inventory page for user_id and return the game passes they
    created.

    Never raises for upstream problems: a non-2xx status or a transport/JSON
    failure stops pagination and the partial result is returned with
    complete=False.
    """
    settings = settings or get_settings()
    owns_session = session is None
    if owns_session:
        session = get_session()

    try:
        return _drain_pages(session, user_id, settings)
    finally:
        if owns_session:
            session.close()


def _drain_pages(session, user_id: int, settings: Settings) -> FetchResult:
    url = settings.inventory_url.format(user_id=user_id)
    result = FetchResult()
    cursor = ""
    pages = 0

    while True:
        params = build_page_params(cursor)
        logger.debug("Fetching inventory page %s for user %s (cursor=%r)", pages + 1, user_id, cursor)

        try:
            response = session.get(url, params=params, timeout=settings.request_timeout_s)

            if not 200 <= response.status_code < 300:
                logger.error("Inventory API returned status: %s", response.status_code)
                result.truncate(f"upstream status {response.status_code}")
                break

            payload = response.json()
            if not isinstance(payload, dict):
                raise ValueError(f"expected a JSON object, got {type(payload).__name__}")

        except (requests.RequestException, ValueError) as e:
            logger.error("Error during inventory fetch for user %s: %r", user_id, e)
            result.truncate(repr(e))
            break

        pages += 1
        matches = filter_created(payload.get("data"), user_id)
        result.records.extend(matches)
        logger.debug("Page %s for user %s: %s match(es)", pages, user_id, len(matches))

        next_cursor = payload.get("nextPageCursor")
        if not next_cursor:
            break
        cursor = str(next_cursor)

    if result.complete:
        logger.info(
            "Fetched %s page(s) for user %s: %s game pass(es)",
            pages, user_id, len(result.records),
        )
    else:
        logger.warning(
            "Returning partial result for user %s after %s page(s): %s game pass(es) (%s)",
            user_id, pages, len(result.records), result.error,
        )

    return result
