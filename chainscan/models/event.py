from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, field_validator, model_validator

from chainscan.formatting import as_utc, format_date


class TransactionEvent(BaseModel):
    """One normalized, single-direction transfer as it lands in the tax CSV."""

    timestamp: datetime

    received_quantity: str | None = None
    received_currency: str | None = None
    sent_quantity: str | None = None
    sent_currency: str | None = None

    fee_amount: str | None = None
    fee_currency: str | None = None

    tx_hash: str
    notes: str = ""

    chain: str
    wallet: str
    from_address: str | None = None
    to_address: str | None = None
    tx_type: Literal["transfer"] = "transfer"
    protocol: str | None = None
    block_height: int | None = None
    explorer_url: str = ""

    model_config = {"frozen": True}

    @field_validator("timestamp")
    @classmethod
    def _utc_seconds(cls, value: datetime) -> datetime:
        return as_utc(value)

    @model_validator(mode="after")
    def _one_direction(self) -> TransactionEvent:
        received = self.received_quantity is not None
        sent = self.sent_quantity is not None
        if received == sent:
            raise ValueError("exactly one of received_quantity / sent_quantity must be set")
        if received and not self.received_currency:
            raise ValueError("received_quantity requires received_currency")
        if sent and not self.sent_currency:
            raise ValueError("sent_quantity requires sent_currency")
        if (self.fee_amount is None) != (self.fee_currency is None):
            raise ValueError("fee_amount and fee_currency must be set together")
        return self

    @property
    def date(self) -> str:
        return format_date(self.timestamp)

    @property
    def is_incoming(self) -> bool:
        return self.received_quantity is not None

    def with_fee(self, amount: str, currency: str) -> TransactionEvent:
        return self.model_copy(update={"fee_amount": amount, "fee_currency": currency})
