"""
Decoders for the account-balance chains (Polkadot via Subscan, Bittensor via
Taostats). Each upstream record is one balance transfer, so a record yields at
most one event; direction comes from comparing the record's recipient with
the queried address by public key.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from chainscan.formatting import format_amount, is_zero_amount, parse_amount, short
from chainscan.models.chain import CHAINS, Chain
from chainscan.models.event import TransactionEvent
from chainscan.models.upstream import SubscanTransfer, TaostatsTransfer
from chainscan.validation.address import same_substrate_account

logger = logging.getLogger(__name__)

POLKADOT = CHAINS[Chain.POLKADOT]
BITTENSOR = CHAINS[Chain.BITTENSOR]


def decode_subscan_transfer(raw: Any, address: str) -> list[TransactionEvent]:
    try:
        tx = SubscanTransfer.model_validate(raw)
    except ValidationError:
        logger.debug("SUBSCAN: undecodable transfer record skipped")
        return []

    if not tx.hash or tx.block_timestamp is None or tx.success is False:
        return []

    try:
        if tx.amount_v2:
            amount = format_amount(tx.amount_v2, POLKADOT.decimals)
        else:
            amount = parse_amount(tx.amount or "0", POLKADOT.decimals)
    except ValueError:
        logger.debug("SUBSCAN: unparsable amount in %s", tx.hash)
        return []

    incoming = same_substrate_account(tx.to, address)
    symbol = tx.asset_symbol or POLKADOT.symbol

    fields: dict[str, Any] = {
        "timestamp": tx.block_timestamp,
        "tx_hash": tx.hash,
        "chain": POLKADOT.name,
        "wallet": address,
        "from_address": tx.from_,
        "to_address": tx.to,
        "protocol": tx.module or "balances",
        "block_height": tx.block_num,
        "explorer_url": f"{POLKADOT.explorer_url}/extrinsic/{tx.hash}",
    }

    if incoming:
        fields.update(
            received_quantity=amount,
            received_currency=symbol,
            notes=f"Received from {short(tx.from_)}",
        )
    else:
        fields.update(
            sent_quantity=amount,
            sent_currency=symbol,
            notes=f"Sent to {short(tx.to)}",
        )
        fee = _fee(tx.fee, POLKADOT.decimals)
        if fee:
            fields.update(fee_amount=fee, fee_currency=POLKADOT.symbol)

    return [TransactionEvent(**fields)]


def decode_taostats_transfer(raw: Any, address: str) -> list[TransactionEvent]:
    try:
        tx = TaostatsTransfer.model_validate(raw)
    except ValidationError:
        logger.debug("TAOSTATS: undecodable transfer record skipped")
        return []

    tx_hash = tx.identity
    if not tx_hash or tx.timestamp is None:
        return []

    try:
        amount = format_amount(tx.amount or "0", BITTENSOR.decimals)
    except ValueError:
        logger.debug("TAOSTATS: unparsable amount in %s", tx_hash)
        return []

    sender = tx.from_.display if tx.from_ else None
    recipient = tx.to.display if tx.to else None
    incoming = tx.to is not None and (
        same_substrate_account(tx.to.ss58, address) or same_substrate_account(tx.to.hex, address)
    )

    fields: dict[str, Any] = {
        "timestamp": tx.timestamp,
        "tx_hash": tx_hash,
        "chain": BITTENSOR.name,
        "wallet": address,
        "from_address": sender,
        "to_address": recipient,
        "protocol": "balances",
        "block_height": tx.block_number,
        "explorer_url": f"{BITTENSOR.explorer_url}/extrinsic/{tx_hash}",
    }

    if incoming:
        fields.update(
            received_quantity=amount,
            received_currency=BITTENSOR.symbol,
            notes=f"Received from {short(sender)}",
        )
    else:
        fields.update(
            sent_quantity=amount,
            sent_currency=BITTENSOR.symbol,
            notes=f"Sent to {short(recipient)}",
        )
        fee = _fee(tx.fee, BITTENSOR.decimals)
        if fee:
            fields.update(fee_amount=fee, fee_currency=BITTENSOR.symbol)

    return [TransactionEvent(**fields)]


def _fee(raw_fee: str | None, decimals: int) -> str | None:
    try:
        fee = format_amount(raw_fee, decimals) if raw_fee else None
    except ValueError:
        return None
    return None if is_zero_amount(fee) else fee
