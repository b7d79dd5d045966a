from typing import Any

import httpx

from chainscan.adapters.base import ChainAdapter
from chainscan.decoders.cosmos_decoder import decode_cosmos_tx
from chainscan.fetchers.mintscan_fetcher import PAGE_SIZE, fetch_mintscan_page
from chainscan.models.chain import Chain
from chainscan.models.event import TransactionEvent
from chainscan.models.page import Page
from chainscan.validation.address import is_valid_osmosis_address


class OsmosisAdapter(ChainAdapter):
    chain = Chain.OSMOSIS
    page_size = PAGE_SIZE
    first_cursor = 0
    max_pages = 100

    def validate_address(self, address: str) -> bool:
        return is_valid_osmosis_address(address)

    async def fetch_page(self, client: httpx.AsyncClient, address: str, cursor: int) -> Page:
        return await fetch_mintscan_page(client, address, cursor)

    def decode(self, record: Any, address: str) -> list[TransactionEvent]:
        return decode_cosmos_tx(record, address)

    def record_hash(self, record: Any) -> str | None:
        return record.get("txhash") or record.get("tx_hash")
