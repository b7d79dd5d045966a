import logging

import httpx

from chainscan.config import settings
from chainscan.errors import UpstreamError
from chainscan.fetchers.relay import fetch_json
from chainscan.models.page import Page

logger = logging.getLogger(__name__)

PAGE_SIZE = 100


async def fetch_taostats_page(client: httpx.AsyncClient, address: str, page: int) -> Page:
    url = f"{settings.taostats_api_url}/api/transfer/v1"
    params = {"address": address, "page": page, "limit": PAGE_SIZE}

    try:
        resp_json = await fetch_json(
            client,
            url,
            headers={"Authorization": settings.taostats_api_key},
            params=params,
        )
    except UpstreamError as exc:
        logger.warning("TAOSTATS: page %d failed for %s...: %s", page, address[:10], exc)
        return Page.empty()

    if not isinstance(resp_json, dict):
        logger.warning("TAOSTATS: malformed response for page %d", page)
        return Page.empty()

    data = resp_json.get("data") or []
    pagination = resp_json.get("pagination")
    if not isinstance(pagination, dict):
        pagination = {}
    try:
        total = int(pagination.get("total_items") or 0)
    except (TypeError, ValueError):
        total = 0

    logger.debug("TAOSTATS: page %d -> %d transfers (total=%d)", page, len(data), total)
    return Page(
        records=data,
        total=total,
        has_more=pagination.get("next_page") is not None,
    )
