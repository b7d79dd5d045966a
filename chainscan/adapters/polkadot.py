from typing import Any

import httpx

from chainscan.adapters.base import ChainAdapter
from chainscan.decoders.substrate_decoder import decode_subscan_transfer
from chainscan.fetchers.subscan_fetcher import PAGE_SIZE, fetch_subscan_page
from chainscan.models.chain import Chain
from chainscan.models.event import TransactionEvent
from chainscan.models.page import Page
from chainscan.validation.address import is_valid_polkadot_address


class PolkadotAdapter(ChainAdapter):
    chain = Chain.POLKADOT
    page_size = PAGE_SIZE
    first_cursor = 0
    max_pages = 100
    authoritative_total = True

    def validate_address(self, address: str) -> bool:
        return is_valid_polkadot_address(address)

    async def fetch_page(self, client: httpx.AsyncClient, address: str, cursor: int) -> Page:
        return await fetch_subscan_page(client, address, cursor)

    def decode(self, record: Any, address: str) -> list[TransactionEvent]:
        return decode_subscan_transfer(record, address)

    def record_hash(self, record: Any) -> str | None:
        return record.get("hash")
