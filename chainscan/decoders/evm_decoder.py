"""
EVM (Ronin) transaction decoder for Covalent ``transactions_v3`` items.

Token movements come from decoded ERC20 ``Transfer(from, to, value)`` log
events; every leg touching the wallet becomes its own event. Mints and burns
(a zero-address side) are ignored. The native RON value only becomes an
event when the transaction has no qualifying token leg.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from chainscan.formatting import format_amount, is_zero_amount
from chainscan.models.chain import CHAINS, Chain
from chainscan.models.event import TransactionEvent
from chainscan.models.upstream import CovalentLogEvent, CovalentTransaction
from chainscan.validation.address import to_evm_address, to_ronin_address

logger = logging.getLogger(__name__)

RONIN = CHAINS[Chain.RONIN]

ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"
TRANSFER_EVENT = "Transfer"
DEFAULT_TOKEN_DECIMALS = 18
UNKNOWN_SYMBOL = "UNKNOWN"


def _hex_or_int(value: Any) -> int:
    if value is None or value == "":
        return 0
    if isinstance(value, int):
        return value
    text = str(value).strip()
    if text.lower().startswith("0x"):
        return int(text, 16) if len(text) > 2 else 0
    return int(text)


def _token_legs(log_events: list[CovalentLogEvent], user: str) -> list[dict]:
    legs: list[dict] = []
    for log in log_events:
        decoded = log.decoded
        if decoded is None or decoded.name != TRANSFER_EVENT:
            continue

        from_param = decoded.param("from")
        to_param = decoded.param("to")
        value_param = decoded.param("value")
        if from_param is None or to_param is None or value_param is None:
            continue

        from_addr = to_evm_address(str(from_param.value or ""))
        to_addr = to_evm_address(str(to_param.value or ""))
        if ZERO_ADDRESS in (from_addr, to_addr):
            continue
        if user not in (from_addr, to_addr):
            continue

        decimals = (
            log.sender_contract_decimals
            if log.sender_contract_decimals is not None
            else DEFAULT_TOKEN_DECIMALS
        )
        try:
            amount = format_amount(_hex_or_int(value_param.value), decimals)
        except (TypeError, ValueError):
            continue

        legs.append(
            {
                "incoming": to_addr == user,
                "from": from_addr,
                "to": to_addr,
                "amount": amount,
                "symbol": log.sender_contract_ticker_symbol or UNKNOWN_SYMBOL,
            }
        )
    return legs


def _fee(tx: CovalentTransaction) -> str | None:
    try:
        if tx.fees_paid:
            wei = _hex_or_int(tx.fees_paid)
        elif tx.gas_spent and tx.gas_price:
            wei = tx.gas_spent * tx.gas_price
        else:
            return None
        fee = format_amount(wei, RONIN.decimals)
    except (TypeError, ValueError):
        return None
    return None if is_zero_amount(fee) else fee


def decode_evm_tx(raw: Any, address: str) -> list[TransactionEvent]:
    try:
        tx = CovalentTransaction.model_validate(raw)
    except ValidationError:
        logger.debug("EVM: undecodable tx record skipped")
        return []

    if not tx.tx_hash or tx.block_signed_at is None or tx.successful is False:
        return []

    user = to_evm_address(address)
    explorer_url = next(
        (e.url for e in tx.explorers or [] if e.url),
        f"{RONIN.explorer_url}/tx/{tx.tx_hash}",
    )
    base = {
        "timestamp": tx.block_signed_at,
        "tx_hash": tx.tx_hash,
        "chain": RONIN.name,
        "wallet": to_ronin_address(address),
        "block_height": tx.block_height,
        "explorer_url": explorer_url,
    }

    events: list[TransactionEvent] = []
    legs = _token_legs(tx.log_events or [], user)

    if legs:
        for leg in legs:
            direction = (
                {"received_quantity": leg["amount"], "received_currency": leg["symbol"], "notes": f"Received {leg['symbol']}"}
                if leg["incoming"]
                else {"sent_quantity": leg["amount"], "sent_currency": leg["symbol"], "notes": f"Sent {leg['symbol']}"}
            )
            events.append(
                TransactionEvent(
                    **base,
                    **direction,
                    from_address=to_ronin_address(leg["from"]),
                    to_address=to_ronin_address(leg["to"]),
                    protocol=leg["symbol"],
                )
            )
    else:
        try:
            value = _hex_or_int(tx.value)
        except (TypeError, ValueError):
            return []
        if value == 0:
            return []

        amount = format_amount(value, RONIN.decimals)
        incoming = to_evm_address(tx.to_address) == user
        direction = (
            {"received_quantity": amount, "received_currency": RONIN.symbol, "notes": f"Received {RONIN.symbol}"}
            if incoming
            else {"sent_quantity": amount, "sent_currency": RONIN.symbol, "notes": f"Sent {RONIN.symbol}"}
        )
        events.append(
            TransactionEvent(
                **base,
                **direction,
                from_address=to_ronin_address(tx.from_address),
                to_address=to_ronin_address(tx.to_address),
                protocol="native",
            )
        )

    if to_evm_address(tx.from_address) == user:
        fee = _fee(tx)
        if fee:
            events[0] = events[0].with_fee(fee, RONIN.symbol)
    return events
