from typing import Any

import httpx

from chainscan.adapters.base import ChainAdapter
from chainscan.decoders.substrate_decoder import decode_taostats_transfer
from chainscan.fetchers.taostats_fetcher import PAGE_SIZE, fetch_taostats_page
from chainscan.models.chain import Chain
from chainscan.models.event import TransactionEvent
from chainscan.models.page import Page
from chainscan.validation.address import is_valid_bittensor_address


class BittensorAdapter(ChainAdapter):
    chain = Chain.BITTENSOR
    page_size = PAGE_SIZE
    first_cursor = 1
    max_pages = 100
    authoritative_total = True

    def validate_address(self, address: str) -> bool:
        return is_valid_bittensor_address(address)

    async def fetch_page(self, client: httpx.AsyncClient, address: str, cursor: int) -> Page:
        return await fetch_taostats_page(client, address, cursor)

    def decode(self, record: Any, address: str) -> list[TransactionEvent]:
        return decode_taostats_transfer(record, address)

    def record_hash(self, record: Any) -> str | None:
        return record.get("transaction_hash") or record.get("extrinsic_id")
