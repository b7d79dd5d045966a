"""
Partial record types for the upstream indexer APIs.

Every field is optional: indexers drop fields between API versions and for
odd transactions, so absence is a normal case that decoders handle
explicitly. Unknown fields are ignored. A record that does not validate at
all (wrong nesting, not an object) is treated by the decoders as
undecodable and contributes no events.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import AliasChoices, BaseModel, Field, model_validator


class UpstreamRecord(BaseModel):
    model_config = {
        "extra": "ignore",
        "populate_by_name": True,
        "coerce_numbers_to_str": True,
    }


# --- Subscan (Polkadot) ---


class SubscanTransfer(UpstreamRecord):
    hash: str | None = None
    block_num: int | None = None
    block_timestamp: datetime | None = None
    from_: str | None = Field(None, alias="from")
    to: str | None = None
    amount: str | None = None
    amount_v2: str | None = None
    fee: str | None = None
    module: str | None = None
    asset_symbol: str | None = None
    success: bool | None = None


# --- Taostats (Bittensor) ---


class TaostatsAccount(UpstreamRecord):
    ss58: str | None = None
    hex: str | None = None

    @model_validator(mode="before")
    @classmethod
    def _bare_address(cls, data: Any) -> Any:
        if isinstance(data, str):
            return {"hex": data} if data.startswith("0x") else {"ss58": data}
        return data

    @property
    def display(self) -> str | None:
        return self.ss58 or self.hex


class TaostatsTransfer(UpstreamRecord):
    transaction_hash: str | None = None
    extrinsic_id: str | None = None
    block_number: int | None = None
    timestamp: datetime | None = None
    from_: TaostatsAccount | None = Field(None, alias="from")
    to: TaostatsAccount | None = None
    amount: str | None = None
    fee: str | None = None

    @property
    def identity(self) -> str | None:
        return self.transaction_hash or self.extrinsic_id


# --- Cosmos LCD (Osmosis) ---


class Coin(UpstreamRecord):
    denom: str | None = None
    amount: str | None = None


class CosmosMessage(UpstreamRecord):
    type: str | None = Field(None, validation_alias=AliasChoices("@type", "type"))
    from_address: str | None = None
    to_address: str | None = None
    amount: list[Coin] | None = None
    sender: str | None = None
    receiver: str | None = None
    token: Coin | None = None

    @model_validator(mode="before")
    @classmethod
    def _unwrap_amino(cls, data: Any) -> Any:
        # legacy amino JSON: {"type": "cosmos-sdk/MsgSend", "value": {...}}
        if isinstance(data, dict) and isinstance(data.get("value"), dict):
            return {**data["value"], "type": data.get("@type") or data.get("type")}
        return data


class EventAttribute(UpstreamRecord):
    key: str | None = None
    value: str | None = None


class TxEvent(UpstreamRecord):
    type: str | None = None
    attributes: list[EventAttribute] | None = None

    def attribute(self, key: str) -> str | None:
        for attr in self.attributes or []:
            if attr.key == key:
                return attr.value
        return None


class TxLog(UpstreamRecord):
    events: list[TxEvent] | None = None


class CosmosFee(UpstreamRecord):
    amount: list[Coin] | None = None
    payer: str | None = None


class AuthInfo(UpstreamRecord):
    fee: CosmosFee | None = None


class TxBody(UpstreamRecord):
    # validated one by one so a single exotic message cannot void the record
    messages: list[Any] | None = None


class CosmosTx(UpstreamRecord):
    body: TxBody | None = None
    auth_info: AuthInfo | None = None


class CosmosTxResponse(UpstreamRecord):
    txhash: str | None = Field(None, validation_alias=AliasChoices("txhash", "tx_hash"))
    height: int | None = Field(None, validation_alias=AliasChoices("height", "block_height"))
    code: int | None = None
    timestamp: datetime | None = Field(
        None, validation_alias=AliasChoices("timestamp", "time", "block_signed_at")
    )
    tx: CosmosTx | None = None
    body: TxBody | None = None
    auth_info: AuthInfo | None = None
    logs: list[TxLog] | None = None
    events: list[TxEvent] | None = None

    @property
    def messages(self) -> list[Any]:
        body = (self.tx.body if self.tx else None) or self.body
        return (body.messages if body else None) or []

    @property
    def fee(self) -> CosmosFee | None:
        auth_info = (self.tx.auth_info if self.tx else None) or self.auth_info
        return auth_info.fee if auth_info else None

    def transfer_events(self) -> list[TxEvent]:
        """``transfer`` events from per-message logs, or the flat event list newer nodes return."""
        from_logs = [
            event
            for log in self.logs or []
            for event in log.events or []
            if event.type == "transfer"
        ]
        if from_logs:
            return from_logs
        # flat events also carry the ante-handler fee transfer, which has no msg_index
        return [
            event
            for event in self.events or []
            if event.type == "transfer" and event.attribute("msg_index") is not None
        ]


# --- Covalent / GoldRush (Ronin) ---


class DecodedParam(UpstreamRecord):
    name: str | None = None
    type: str | None = None
    value: Any = None


class DecodedLog(UpstreamRecord):
    name: str | None = None
    signature: str | None = None
    params: list[DecodedParam] | None = None

    def param(self, name: str) -> DecodedParam | None:
        for param in self.params or []:
            if param.name == name:
                return param
        return None


class CovalentLogEvent(UpstreamRecord):
    sender_address: str | None = None
    sender_contract_decimals: int | None = None
    sender_contract_ticker_symbol: str | None = None
    decoded: DecodedLog | None = None


class Explorer(UpstreamRecord):
    label: str | None = None
    url: str | None = None


class CovalentTransaction(UpstreamRecord):
    tx_hash: str | None = None
    block_signed_at: datetime | None = None
    block_height: int | None = None
    from_address: str | None = None
    to_address: str | None = None
    value: str | None = None
    fees_paid: str | None = None
    gas_spent: int | None = None
    gas_price: int | None = None
    successful: bool | None = None
    explorers: list[Explorer] | None = None
    log_events: list[CovalentLogEvent] | None = None
