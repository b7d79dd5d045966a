from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel

from chainscan.models.chain import CHAINS, Chain
from chainscan.models.event import TransactionEvent


class WalletSummary(BaseModel):
    chain: Chain
    symbol: str
    count: int
    total_received: str
    total_sent: str
    total_fees: str


def _fmt(value: Decimal) -> str:
    text = format(value.normalize(), "f")
    return "0" if text in ("0", "-0") else text


def summarize(events: list[TransactionEvent], chain: Chain) -> WalletSummary:
    """Native-coin totals over a scan; token amounts in other currencies are left out."""
    symbol = CHAINS[chain].symbol
    received = sent = fees = Decimal(0)

    for event in events:
        if event.is_incoming:
            if event.received_currency == symbol:
                received += Decimal(event.received_quantity)
        elif event.sent_currency == symbol:
            sent += Decimal(event.sent_quantity)
        if event.fee_amount and event.fee_currency == symbol:
            fees += Decimal(event.fee_amount)

    return WalletSummary(
        chain=chain,
        symbol=symbol,
        count=len(events),
        total_received=_fmt(received),
        total_sent=_fmt(sent),
        total_fees=_fmt(fees),
    )
