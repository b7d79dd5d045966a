"""
Tax-tool CSV output.

``strict`` is the nine-column import layout; ``enriched`` appends the
provenance columns for people who want to audit the rows.
"""

from __future__ import annotations

import csv
import io
from datetime import date
from typing import Literal

from chainscan.models.event import TransactionEvent

CsvMode = Literal["strict", "enriched"]

STRICT_HEADERS = [
    "Date",
    "Received Quantity",
    "Received Currency",
    "Sent Quantity",
    "Sent Currency",
    "Fee Amount",
    "Fee Currency",
    "Transaction Hash",
    "Notes",
]

ENRICHED_HEADERS = [
    "Chain",
    "Wallet",
    "From",
    "To",
    "Tx Type",
    "Protocol",
    "Block Height",
    "Explorer URL",
]

def headers_for(mode: CsvMode) -> list[str]:
    return STRICT_HEADERS if mode == "strict" else STRICT_HEADERS + ENRICHED_HEADERS


def event_row(event: TransactionEvent, mode: CsvMode) -> list[object | None]:
    row: list[object | None] = [
        event.date,
        event.received_quantity,
        event.received_currency,
        event.sent_quantity,
        event.sent_currency,
        event.fee_amount,
        event.fee_currency,
        event.tx_hash,
        event.notes,
    ]
    if mode == "enriched":
        row += [
            event.chain,
            event.wallet,
            event.from_address,
            event.to_address,
            event.tx_type,
            event.protocol,
            event.block_height,
            event.explorer_url,
        ]
    return row


def generate_csv(events: list[TransactionEvent], mode: CsvMode = "strict") -> str:
    if mode not in ("strict", "enriched"):
        raise ValueError(f"unknown CSV mode {mode!r}")
    buf = io.StringIO()
    # minimal quoting; None is written as an empty field
    writer = csv.writer(buf, lineterminator="\n")
    writer.writerow(headers_for(mode))
    writer.writerows(event_row(event, mode) for event in events)
    return buf.getvalue().removesuffix("\n")


def csv_filename(chain: str, address: str, today: date | None = None) -> str:
    today = today or date.today()
    return f"{chain}_{address[:8]}_transactions_{today.isoformat()}.csv"
