import logging

import httpx

from chainscan.config import settings
from chainscan.errors import UpstreamError
from chainscan.fetchers.relay import fetch_json
from chainscan.models.page import Page

logger = logging.getLogger(__name__)

PAGE_SIZE = 100


async def fetch_subscan_page(client: httpx.AsyncClient, address: str, page: int) -> Page:
    url = f"{settings.subscan_api_url}/api/v2/scan/transfers"
    body = {"address": address, "page": page, "row": PAGE_SIZE}

    try:
        resp_json = await fetch_json(
            client,
            url,
            headers={"Content-Type": "application/json", "X-API-Key": settings.subscan_api_key},
            json_body=body,
        )
    except UpstreamError as exc:
        logger.warning("SUBSCAN: page %d failed for %s...: %s", page, address[:10], exc)
        return Page.empty()

    if not isinstance(resp_json, dict) or resp_json.get("code") != 0:
        message = resp_json.get("message") if isinstance(resp_json, dict) else "malformed response"
        logger.warning("SUBSCAN ERROR: page %d for %s...: %s", page, address[:10], message)
        return Page.empty()

    data = resp_json.get("data")
    if not isinstance(data, dict):
        data = {}
    transfers = data.get("transfers") or []
    try:
        count = int(data.get("count") or 0)
    except (TypeError, ValueError):
        count = 0

    logger.debug("SUBSCAN: page %d -> %d transfers (count=%d)", page, len(transfers), count)
    return Page(
        records=transfers,
        total=count,
        has_more=(page + 1) * PAGE_SIZE < count,
    )
