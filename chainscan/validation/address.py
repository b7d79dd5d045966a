from __future__ import annotations

import hashlib
import re

import base58

SS58_PREFIX = b"SS58PRE"
POLKADOT_PREFIX = 0
SUBSTRATE_PREFIX = 42

OSMOSIS_ADDRESS_RE = re.compile(r"^osmo1[a-z0-9]{38}$")
EVM_ADDRESS_RE = re.compile(r"^0x[0-9a-fA-F]{40}$")
RONIN_ADDRESS_RE = re.compile(r"^ronin:[0-9a-fA-F]{40}$")


def ss58_decode(address: str) -> tuple[int, bytes]:
    """Return ``(network_prefix, public_key)`` for a single-byte-prefix SS58 address.

    Raises ``ValueError`` for bad base58, wrong length or a checksum mismatch.
    """
    try:
        data = base58.b58decode(address.strip())
    except ValueError as exc:
        raise ValueError(f"invalid base58: {address!r}") from exc

    if len(data) != 35 or data[0] >= 64:
        raise ValueError(f"unsupported SS58 length/prefix for {address!r}")

    checksum = hashlib.blake2b(SS58_PREFIX + data[:-2], digest_size=64).digest()[:2]
    if checksum != data[-2:]:
        raise ValueError(f"SS58 checksum mismatch for {address!r}")
    return data[0], data[1:33]


def ss58_public_key(address: str | None) -> bytes | None:
    if not address:
        return None
    try:
        return ss58_decode(address)[1]
    except ValueError:
        return None


def is_valid_ss58(address: str, prefixes: set[int]) -> bool:
    try:
        prefix, _ = ss58_decode(address)
    except ValueError:
        return False
    return prefix in prefixes


def same_substrate_account(a: str | None, b: str | None) -> bool:
    """Compare two substrate addresses by public key, ignoring the network prefix.

    Either side may also be a ``0x`` hex public key. Falls back to a
    case-insensitive string comparison when neither decodes.
    """
    if not a or not b:
        return False
    key_a = _substrate_key(a)
    key_b = _substrate_key(b)
    if key_a is not None and key_b is not None:
        return key_a == key_b
    return a.strip().lower() == b.strip().lower()


def _substrate_key(address: str) -> bytes | None:
    address = address.strip()
    if address.startswith("0x"):
        try:
            key = bytes.fromhex(address[2:])
        except ValueError:
            return None
        return key if len(key) == 32 else None
    return ss58_public_key(address)


def is_valid_polkadot_address(address: str) -> bool:
    return is_valid_ss58(address, {POLKADOT_PREFIX, SUBSTRATE_PREFIX})


def is_valid_bittensor_address(address: str) -> bool:
    return is_valid_ss58(address, {SUBSTRATE_PREFIX})


def is_valid_osmosis_address(address: str) -> bool:
    return bool(OSMOSIS_ADDRESS_RE.match(address.strip()))


def is_valid_ronin_address(address: str) -> bool:
    address = address.strip()
    return bool(EVM_ADDRESS_RE.match(address) or RONIN_ADDRESS_RE.match(address))


def to_evm_address(address: str | None) -> str:
    """``ronin:abcd...`` -> ``0xabcd...``, lower-cased for comparisons."""
    address = (address or "").strip()
    if address.lower().startswith("ronin:"):
        address = "0x" + address[6:]
    return address.lower()


def to_ronin_address(address: str | None) -> str:
    evm = to_evm_address(address)
    if not evm:
        return ""
    return "ronin:" + (evm[2:] if evm.startswith("0x") else evm)
