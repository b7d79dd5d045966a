"""
Pagination driver shared by every chain adapter.

One scan is one sequential coroutine: fetch a page, decode its records into
events (skipping transaction hashes already seen in this scan), report
progress, and decide whether another page is worth asking for. Upstream
failures arrive here as empty pages, so the loop simply ends with whatever
it has accumulated; any other exception is logged and ends the scan the same
way. Nothing in a ``ScanContext`` is shared between scans.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import httpx

from chainscan.config import settings
from chainscan.models.event import TransactionEvent
from chainscan.models.page import Page
from chainscan.scan.progress import ProgressCallback, ProgressEstimator

if TYPE_CHECKING:
    from chainscan.adapters.base import ChainAdapter

logger = logging.getLogger(__name__)


@dataclass
class ScanContext:
    address: str
    seen: set[str] = field(default_factory=set)
    events: list[TransactionEvent] = field(default_factory=list)
    pages_fetched: int = 0
    records_seen: int = 0


def sort_events(events: list[TransactionEvent]) -> list[TransactionEvent]:
    """Newest first. ``sorted`` is stable, so equal timestamps keep fetch order."""
    return sorted(events, key=lambda e: e.timestamp, reverse=True)


def record_hash(adapter: ChainAdapter, record: Any) -> str | None:
    """Upstream hash of ``record``, or ``None`` when it is missing or not a string."""
    try:
        tx_hash = adapter.record_hash(record)
    except (AttributeError, KeyError, TypeError):
        return None
    return tx_hash if isinstance(tx_hash, str) and tx_hash else None


class PaginationDriver:
    def __init__(self, adapter: ChainAdapter):
        self.adapter = adapter

    async def run(
        self,
        address: str,
        on_progress: ProgressCallback | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> list[TransactionEvent]:
        if client is None:
            async with httpx.AsyncClient(timeout=settings.http_timeout) as own_client:
                return await self._scan(own_client, address, on_progress)
        return await self._scan(client, address, on_progress)

    async def _scan(
        self,
        client: httpx.AsyncClient,
        address: str,
        on_progress: ProgressCallback | None,
    ) -> list[TransactionEvent]:
        adapter = self.adapter
        ctx = ScanContext(address=address)
        cursor = adapter.first_cursor
        progress = ProgressEstimator(on_progress)
        logger.info("SCAN START: %s %s...", adapter.chain.value, address[:10])

        try:
            first_page: Page | None = None
            if adapter.authoritative_total:
                first_page = await self._fetch(client, ctx, cursor)
                total = first_page.total or 0
                if total == 0:
                    logger.info("SCAN DONE: %s %s... has no transfers", adapter.chain.value, address[:10])
                    return []
                progress = ProgressEstimator(on_progress, total=total)

            while True:
                if first_page is not None:
                    page, first_page = first_page, None
                else:
                    page = await self._fetch(client, ctx, cursor)

                records = page.records
                if not records:
                    logger.debug("SCAN: empty page at cursor %s, stopping", cursor)
                    break

                self._accumulate(ctx, records)

                short_page = len(records) < adapter.page_size
                is_last = short_page or page.has_more is False
                progress.page_done(len(records), adapter.page_size, is_last)
                logger.debug(
                    "SCAN: cursor %s done, %d/%s records, %s%%",
                    cursor,
                    progress.processed,
                    progress.estimate,
                    progress.last_reported,
                )

                if is_last:
                    break
                if ctx.pages_fetched >= adapter.max_pages:
                    logger.info(
                        "SCAN: %s safety ceiling of %d pages reached, stopping with %d events",
                        adapter.chain.value,
                        adapter.max_pages,
                        len(ctx.events),
                    )
                    break
                cursor += 1
        except Exception:
            logger.exception(
                "SCAN: %s %s... aborted at cursor %s, keeping %d events",
                adapter.chain.value,
                address[:10],
                cursor,
                len(ctx.events),
            )
        finally:
            progress.finish()

        logger.info(
            "SCAN DONE: %s %s... -> %d events from %d records over %d pages",
            adapter.chain.value,
            address[:10],
            len(ctx.events),
            ctx.records_seen,
            ctx.pages_fetched,
        )
        return sort_events(ctx.events)

    async def _fetch(self, client: httpx.AsyncClient, ctx: ScanContext, cursor: int) -> Page:
        if ctx.pages_fetched > 0 and self.adapter.page_delay > 0:
            await asyncio.sleep(self.adapter.page_delay)
        ctx.pages_fetched += 1
        return await self.adapter.fetch_page(client, ctx.address, cursor)

    def _accumulate(self, ctx: ScanContext, records: list[Any]) -> None:
        for record in records:
            ctx.records_seen += 1
            tx_hash = record_hash(self.adapter, record)
            if not tx_hash or tx_hash in ctx.seen:
                continue
            ctx.seen.add(tx_hash)

            try:
                events = self.adapter.decode(record, ctx.address)
            except Exception:
                logger.exception("SCAN: decoder failed on %s, record skipped", tx_hash)
                continue
            ctx.events.extend(events)
