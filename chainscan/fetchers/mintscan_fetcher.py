import logging

import httpx

from chainscan.config import settings
from chainscan.errors import UpstreamError
from chainscan.fetchers.relay import fetch_json
from chainscan.models.page import Page

logger = logging.getLogger(__name__)

PAGE_SIZE = 100


async def fetch_mintscan_page(client: httpx.AsyncClient, address: str, page: int) -> Page:
    """Cosmos LCD tx search through Mintscan. The API gives no total, only the page itself."""
    url = f"{settings.mintscan_api_url}/osmosis/lcd/cosmos/tx/v1beta1/txs"
    params = {
        "events": f"message.sender='{address}'",
        "pagination.limit": PAGE_SIZE,
        "pagination.offset": page * PAGE_SIZE,
    }

    try:
        resp_json = await fetch_json(
            client,
            url,
            headers={"Authorization": f"Bearer {settings.mintscan_api_key}" if settings.mintscan_api_key else ""},
            params=params,
        )
    except UpstreamError as exc:
        logger.warning("MINTSCAN: page %d failed for %s...: %s", page, address[:12], exc)
        return Page.empty()

    if not isinstance(resp_json, dict):
        logger.warning("MINTSCAN: malformed response for page %d", page)
        return Page.empty()

    items = resp_json.get("tx_responses") or resp_json.get("txs") or resp_json.get("data") or []
    logger.debug("MINTSCAN: page %d -> %d txs", page, len(items))
    return Page(records=items, total=None, has_more=len(items) == PAGE_SIZE)
