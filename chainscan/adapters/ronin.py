from typing import Any

import httpx

from chainscan.adapters.base import ChainAdapter
from chainscan.config import settings
from chainscan.decoders.evm_decoder import decode_evm_tx
from chainscan.fetchers.covalent_fetcher import PAGE_SIZE, fetch_covalent_page
from chainscan.models.chain import Chain
from chainscan.models.event import TransactionEvent
from chainscan.models.page import Page
from chainscan.validation.address import is_valid_ronin_address


class RoninAdapter(ChainAdapter):
    chain = Chain.RONIN
    page_size = PAGE_SIZE
    first_cursor = 0
    max_pages = 50

    @property
    def page_delay(self) -> float:
        # GoldRush free tier allows roughly five requests per second
        return settings.ronin_page_delay

    def validate_address(self, address: str) -> bool:
        return is_valid_ronin_address(address)

    async def fetch_page(self, client: httpx.AsyncClient, address: str, cursor: int) -> Page:
        return await fetch_covalent_page(client, address, cursor)

    def decode(self, record: Any, address: str) -> list[TransactionEvent]:
        return decode_evm_tx(record, address)

    def record_hash(self, record: Any) -> str | None:
        return record.get("tx_hash")
