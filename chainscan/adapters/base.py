"""
Base chain adapter.

An adapter ties together the three chain-specific pieces of a scan: the
upstream client that fetches one page, the decoder that turns one raw record
into canonical events, and the address validator. The pagination loop itself
is shared (``chainscan.scan.driver``); adapters only describe how their
indexer paginates through the class attributes below.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

import httpx

from chainscan.errors import InvalidAddressError
from chainscan.models.chain import CHAINS, Chain, ChainInfo
from chainscan.models.event import TransactionEvent
from chainscan.models.page import Page
from chainscan.scan.driver import PaginationDriver
from chainscan.scan.progress import ProgressCallback


class ChainAdapter(ABC):
    chain: Chain

    # pagination shape of the upstream indexer
    page_size: int = 100
    first_cursor: int = 0
    max_pages: int = 100
    authoritative_total: bool = False

    @property
    def info(self) -> ChainInfo:
        return CHAINS[self.chain]

    @property
    def page_delay(self) -> float:
        """Blocking wait before every page request after the first."""
        return 0.0

    @abstractmethod
    def validate_address(self, address: str) -> bool: ...

    @abstractmethod
    async def fetch_page(self, client: httpx.AsyncClient, address: str, cursor: int) -> Page: ...

    @abstractmethod
    def decode(self, record: Any, address: str) -> list[TransactionEvent]: ...

    @abstractmethod
    def record_hash(self, record: Any) -> str | None:
        """Upstream identity of a raw record, used to drop repeats within one scan."""

    def normalize_address(self, address: str) -> str:
        return address.strip()

    async def fetch_all_transactions(
        self,
        address: str,
        on_progress: ProgressCallback | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> list[TransactionEvent]:
        """Scan every page for ``address`` and return its events, newest first.

        Raises ``InvalidAddressError`` before any request when the address is
        malformed; otherwise never raises and always ends with a 100% report.
        """
        address = self.normalize_address(address)
        if not self.validate_address(address):
            raise InvalidAddressError(self.chain.value, address)
        return await PaginationDriver(self).run(address, on_progress=on_progress, client=client)
