import hashlib

import base58
import pytest

from chainscan.config import settings


def ss58_encode(public_key: bytes, prefix: int) -> str:
    data = bytes([prefix]) + public_key
    checksum = hashlib.blake2b(b"SS58PRE" + data, digest_size=64).digest()[:2]
    return base58.b58encode(data + checksum).decode()


@pytest.fixture(autouse=True)
def direct_upstream(monkeypatch):
    """Tests talk to the indexers directly with no relay and no inter-page wait."""
    monkeypatch.setattr(settings, "relay_url", "")
    monkeypatch.setattr(settings, "ronin_page_delay", 0.0)


# --- Addresses ---

DOT_KEY = b"\x01" * 32
DOT_OTHER_KEY = b"\x02" * 32
DOT_ADDRESS = ss58_encode(DOT_KEY, 0)
DOT_OTHER = ss58_encode(DOT_OTHER_KEY, 0)

TAO_KEY = b"\x03" * 32
TAO_ADDRESS = ss58_encode(TAO_KEY, 42)
TAO_OTHER = ss58_encode(b"\x04" * 32, 42)

OSMO_ADDRESS = "osmo1" + "a" * 38
OSMO_OTHER = "osmo1" + "b" * 38

RONIN_ADDRESS = "0x" + "11" * 20
RONIN_OTHER = "0x" + "22" * 20
ZERO_ADDRESS = "0x" + "00" * 20


# --- Subscan (Polkadot) ---


def subscan_transfer(
    tx_hash: str,
    incoming: bool = True,
    amount_v2: str = "15000000000",
    timestamp: int = 1706140800,
    fee: str = "160000000",
) -> dict:
    return {
        "hash": tx_hash,
        "block_num": 19000000,
        "block_timestamp": timestamp,
        "from": DOT_OTHER if incoming else DOT_ADDRESS,
        "to": DOT_ADDRESS if incoming else DOT_OTHER,
        "amount": "1.5",
        "amount_v2": amount_v2,
        "fee": fee,
        "module": "balances",
        "asset_symbol": "DOT",
        "success": True,
    }


def subscan_response(transfers: list, count: int) -> dict:
    return {"code": 0, "message": "Success", "data": {"count": count, "transfers": transfers}}


MOCK_SUBSCAN_EMPTY = {"code": 0, "message": "Success", "data": {"count": 0, "transfers": None}}
MOCK_SUBSCAN_ERROR = {"code": 10004, "message": "API rate limit exceeded", "data": None}


# --- Taostats (Bittensor) ---


def taostats_transfer(
    tx_hash: str,
    incoming: bool = True,
    amount: str = "2500000000",
    timestamp: str = "2024-01-25T00:00:00Z",
) -> dict:
    me = {"ss58": TAO_ADDRESS, "hex": "0x" + TAO_KEY.hex()}
    other = {"ss58": TAO_OTHER, "hex": "0x" + "04" * 32}
    return {
        "block_number": 2000000,
        "timestamp": timestamp,
        "transaction_hash": tx_hash,
        "extrinsic_id": "2000000-0004",
        "amount": amount,
        "fee": "125000",
        "from": other if incoming else me,
        "to": me if incoming else other,
    }


def taostats_response(data: list, total: int, next_page: int | None) -> dict:
    return {
        "pagination": {
            "current_page": 1,
            "per_page": 100,
            "total_items": total,
            "next_page": next_page,
            "prev_page": None,
        },
        "data": data,
    }


# --- Cosmos LCD (Osmosis) ---


def cosmos_send_tx(
    tx_hash: str,
    from_address: str = OSMO_ADDRESS,
    to_address: str = OSMO_OTHER,
    amount: str = "2500000",
    denom: str = "uosmo",
    timestamp: str = "2024-01-24T12:00:00Z",
) -> dict:
    return {
        "height": "13000000",
        "txhash": tx_hash,
        "code": 0,
        "timestamp": timestamp,
        "tx": {
            "body": {
                "messages": [
                    {
                        "@type": "/cosmos.bank.v1beta1.MsgSend",
                        "from_address": from_address,
                        "to_address": to_address,
                        "amount": [{"denom": denom, "amount": amount}],
                    }
                ]
            },
            "auth_info": {"fee": {"amount": [{"denom": "uosmo", "amount": "2500"}], "gas_limit": "100000"}},
        },
        "logs": [],
    }


# --- Covalent (Ronin) ---


def covalent_transfer_log(
    from_address: str,
    to_address: str,
    value: str,
    symbol: str = "AXS",
    decimals: int | None = 18,
) -> dict:
    return {
        "sender_address": "0x" + "97" * 20,
        "sender_contract_decimals": decimals,
        "sender_contract_ticker_symbol": symbol,
        "decoded": {
            "name": "Transfer",
            "signature": "Transfer(indexed address from, indexed address to, uint256 value)",
            "params": [
                {"name": "from", "type": "address", "indexed": True, "decoded": True, "value": from_address},
                {"name": "to", "type": "address", "indexed": True, "decoded": True, "value": to_address},
                {"name": "value", "type": "uint256", "indexed": False, "decoded": True, "value": value},
            ],
        },
    }


def covalent_tx(
    tx_hash: str,
    from_address: str = RONIN_ADDRESS,
    to_address: str = RONIN_OTHER,
    value: str = "0",
    log_events: list | None = None,
    block_signed_at: str = "2024-01-24T00:00:00Z",
    fees_paid: str | None = "420000000000000",
) -> dict:
    return {
        "block_signed_at": block_signed_at,
        "block_height": 31000000,
        "tx_hash": tx_hash,
        "successful": True,
        "from_address": from_address,
        "to_address": to_address,
        "value": value,
        "fees_paid": fees_paid,
        "gas_spent": 21000,
        "gas_price": 20000000000,
        "explorers": [{"label": None, "url": f"https://app.roninchain.com/tx/{tx_hash}"}],
        "log_events": log_events or [],
    }


def covalent_response(items: list, has_next: bool) -> dict:
    return {
        "data": {
            "address": RONIN_ADDRESS,
            "chain_id": 2020,
            "items": items,
            "links": {"prev": None, "next": "https://api.covalenthq.com/next" if has_next else None},
        },
        "error": False,
        "error_message": None,
    }
