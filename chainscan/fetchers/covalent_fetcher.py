import logging

import httpx

from chainscan.config import settings
from chainscan.errors import UpstreamError
from chainscan.fetchers.relay import fetch_json
from chainscan.models.page import Page
from chainscan.validation.address import to_evm_address

logger = logging.getLogger(__name__)

RONIN_CHAIN_ID = 2020
PAGE_SIZE = 100


async def fetch_covalent_page(client: httpx.AsyncClient, address: str, page: int) -> Page:
    evm_address = to_evm_address(address)
    url = (
        f"{settings.covalent_api_url}/v1/{RONIN_CHAIN_ID}/address/{evm_address}"
        f"/transactions_v3/page/{page}/"
    )

    try:
        resp_json = await fetch_json(
            client,
            url,
            headers={"Authorization": f"Bearer {settings.goldrush_api_key}" if settings.goldrush_api_key else ""},
        )
    except UpstreamError as exc:
        logger.warning("COVALENT: page %d failed for %s: %s", page, evm_address[:10], exc)
        return Page.empty()

    if not isinstance(resp_json, dict):
        logger.warning("COVALENT: malformed response for page %d", page)
        return Page.empty()
    if resp_json.get("error"):
        logger.warning("COVALENT ERROR: page %d: %s", page, resp_json.get("error_message"))
        return Page.empty()

    data = resp_json.get("data")
    if not isinstance(data, dict):
        data = {}
    items = data.get("items") or resp_json.get("items") or []
    links = data.get("links")
    has_more = links.get("next") is not None if isinstance(links, dict) else None

    logger.debug("COVALENT: page %d -> %d txs (next=%s)", page, len(items), has_more)
    return Page(records=items, total=None, has_more=has_more)
