"""
Cosmos (Osmosis) transaction decoder.

Bank sends and IBC transfers are read from the transaction body. When no
message touches the wallet (contract calls, swaps, ...), the ``transfer``
events the chain emitted are used instead; their ``amount`` attribute can hold
several comma-joined coins such as ``1000uosmo,25ibc/27394F...``.
"""

from __future__ import annotations

import logging
import re
from typing import Any

from pydantic import ValidationError

from chainscan.formatting import format_amount, is_zero_amount, short
from chainscan.models.chain import CHAINS, Chain
from chainscan.models.event import TransactionEvent
from chainscan.models.upstream import Coin, CosmosMessage, CosmosTxResponse, TxEvent
from chainscan.tokens.denoms import resolve_denom

logger = logging.getLogger(__name__)

OSMOSIS = CHAINS[Chain.OSMOSIS]

MSG_SEND = "MsgSend"
MSG_TRANSFER = "MsgTransfer"

_COIN_RE = re.compile(r"^(\d+)\s*(\S+)$")


def _coin_amount(coin: Coin) -> tuple[str, str] | None:
    if not coin.amount or not coin.denom:
        return None
    meta = resolve_denom(coin.denom)
    try:
        return format_amount(coin.amount, meta["decimals"]), meta["symbol"]
    except ValueError:
        return None


def _leg(
    coin: Coin,
    sender: str | None,
    recipient: str | None,
    address: str,
    protocol: str,
    label_in: str = "Received from",
    label_out: str = "Sent to",
) -> dict | None:
    parsed = _coin_amount(coin)
    if parsed is None:
        return None
    amount, symbol = parsed

    leg: dict[str, Any] = {"from_address": sender, "to_address": recipient, "protocol": protocol}
    if recipient == address:
        leg.update(received_quantity=amount, received_currency=symbol, notes=f"{label_in} {short(sender, 10)}")
    elif sender == address:
        leg.update(sent_quantity=amount, sent_currency=symbol, notes=f"{label_out} {short(recipient, 10)}")
    else:
        return None
    return leg


def _message_legs(messages: list[Any], address: str) -> list[dict]:
    legs: list[dict] = []
    for raw_msg in messages:
        try:
            msg = CosmosMessage.model_validate(raw_msg)
        except ValidationError:
            continue
        msg_type = msg.type or ""

        if MSG_SEND in msg_type:
            for coin in msg.amount or []:
                leg = _leg(coin, msg.from_address, msg.to_address, address, "bank")
                if leg:
                    legs.append(leg)
        elif MSG_TRANSFER in msg_type and msg.token is not None:
            leg = _leg(
                msg.token,
                msg.sender,
                msg.receiver,
                address,
                "ibc",
                label_in="IBC Transfer from",
                label_out="IBC Transfer to",
            )
            if leg:
                legs.append(leg)
    return legs


def parse_coins(amount: str | None) -> list[Coin]:
    """``"1000uosmo,5ibc/ABC"`` -> two coins. Unparsable parts are dropped."""
    coins: list[Coin] = []
    for part in (amount or "").split(","):
        match = _COIN_RE.match(part.strip())
        if match:
            coins.append(Coin(amount=match.group(1), denom=match.group(2)))
    return coins


def _event_legs(events: list[TxEvent], address: str) -> list[dict]:
    legs: list[dict] = []
    for event in events:
        sender = event.attribute("sender")
        recipient = event.attribute("recipient")
        if address not in (sender, recipient):
            continue
        for coin in parse_coins(event.attribute("amount")):
            leg = _leg(coin, sender, recipient, address, "bank")
            if leg:
                legs.append(leg)
    return legs


def _first_signer(messages: list[Any]) -> str | None:
    if not messages:
        return None
    try:
        msg = CosmosMessage.model_validate(messages[0])
    except ValidationError:
        return None
    return msg.from_address or msg.sender


def _fee(tx: CosmosTxResponse, address: str, legs: list[dict]) -> tuple[str, str] | None:
    """The tx fee, when the wallet paid it.

    An empty ``payer`` means the first signer paid. Without a readable signer
    the wallet is taken as payer only when one of its legs is outgoing.
    """
    fee = tx.fee
    if fee is None or not fee.amount:
        return None
    payer = fee.payer or _first_signer(tx.messages)
    if payer and payer != address:
        return None
    if not payer and not any("sent_quantity" in leg for leg in legs):
        return None
    parsed = _coin_amount(fee.amount[0])
    if parsed is None or is_zero_amount(parsed[0]):
        return None
    return parsed


def decode_cosmos_tx(raw: Any, address: str) -> list[TransactionEvent]:
    try:
        tx = CosmosTxResponse.model_validate(raw)
    except ValidationError:
        logger.debug("COSMOS: undecodable tx record skipped")
        return []

    if not tx.txhash or tx.timestamp is None:
        return []
    if tx.code:
        logger.debug("COSMOS: failed tx %s (code=%s) skipped", tx.txhash, tx.code)
        return []

    legs = _message_legs(tx.messages, address) or _event_legs(tx.transfer_events(), address)
    if not legs:
        return []

    base = {
        "timestamp": tx.timestamp,
        "tx_hash": tx.txhash,
        "chain": OSMOSIS.name,
        "wallet": address,
        "block_height": tx.height,
        "explorer_url": f"{OSMOSIS.explorer_url}/tx/{tx.txhash}",
    }
    events = [TransactionEvent(**base, **leg) for leg in legs]

    fee = _fee(tx, address, legs)
    if fee:
        events[0] = events[0].with_fee(*fee)
    return events
