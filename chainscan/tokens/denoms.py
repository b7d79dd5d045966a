from __future__ import annotations

DEFAULT_COSMOS_DECIMALS = 6
POOL_SHARE_DECIMALS = 18

_REGISTRY: dict[str, dict] = {
    "uosmo": {"symbol": "OSMO", "decimals": 6},
    "uion": {"symbol": "ION", "decimals": 6},
    "uatom": {"symbol": "ATOM", "decimals": 6},
    "usdc": {"symbol": "USDC", "decimals": 6},
    "ibc/ED07A3391A112B175915C8FA7438DDD30D8E4E5E": {"symbol": "USDC", "decimals": 6},
    "ibc/27394FB092D2ECCD56123C74F36E4C1F926001CEADA9CA97EA622B25F41E85EB": {"symbol": "USDC", "decimals": 6},
}


def resolve_denom(denom: str | None) -> dict:
    """Display symbol and decimals for a Cosmos denom.

    Known denoms come from the registry; other ``ibc/...`` denoms collapse to
    ``IBC``, ``gamm/pool/<id>`` to ``LP <id>``, anything else loses one
    leading ``u`` and is upper-cased.
    """
    denom = (denom or "").strip()
    if denom in _REGISTRY:
        return _REGISTRY[denom]

    if denom.startswith("ibc/"):
        return {"symbol": "IBC", "decimals": DEFAULT_COSMOS_DECIMALS}
    if denom.startswith("gamm/pool/"):
        return {"symbol": f"LP {denom.split('/')[2]}", "decimals": POOL_SHARE_DECIMALS}

    symbol = denom[1:] if denom.startswith("u") else denom
    return {"symbol": symbol.upper(), "decimals": DEFAULT_COSMOS_DECIMALS}
