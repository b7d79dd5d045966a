"""
The one network capability the fetchers use: ``fetch_json(url, headers, body)``.

When ``RELAY_URL`` is configured the request is forwarded through the relay as
``POST {relay}?url=<target>`` with the auth headers and body passed along,
otherwise the indexer is called directly. Every failure (transport error,
non-2xx from the relay or the indexer, undecodable JSON) is raised as
``UpstreamError``.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from chainscan.config import settings
from chainscan.errors import UpstreamError

logger = logging.getLogger(__name__)

USER_AGENT = "ChainScan/1.0"


def _base_headers(extra: dict[str, str] | None) -> dict[str, str]:
    headers = {"Accept": "application/json", "User-Agent": USER_AGENT}
    if extra:
        headers.update({k: v for k, v in extra.items() if v})
    return headers


async def fetch_json(
    client: httpx.AsyncClient,
    url: str,
    headers: dict[str, str] | None = None,
    json_body: Any = None,
    params: dict[str, Any] | None = None,
) -> Any:
    request_headers = _base_headers(headers)
    logger.debug(
        "UPSTREAM %s %s%s",
        "POST" if json_body is not None else "GET",
        url,
        " (via relay)" if settings.use_relay else "",
    )

    try:
        if settings.use_relay:
            target = httpx.URL(url, params=params) if params else httpx.URL(url)
            resp = await client.post(
                settings.relay_url,
                params={"url": str(target)},
                headers=request_headers,
                json=json_body,
            )
        elif json_body is not None:
            resp = await client.post(url, params=params, headers=request_headers, json=json_body)
        else:
            resp = await client.get(url, params=params, headers=request_headers)
    except httpx.TimeoutException as exc:
        raise UpstreamError("request timed out", url=url) from exc
    except httpx.HTTPError as exc:
        raise UpstreamError(f"request failed: {exc}", url=url) from exc

    if resp.status_code < 200 or resp.status_code >= 300:
        raise UpstreamError("upstream returned an error status", url=url, status_code=resp.status_code)

    try:
        return resp.json()
    except ValueError as exc:
        raise UpstreamError("response is not valid JSON", url=url, status_code=resp.status_code) from exc
