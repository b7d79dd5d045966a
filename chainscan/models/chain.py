from __future__ import annotations

from enum import Enum

from pydantic import BaseModel


class Chain(str, Enum):
    BITTENSOR = "bittensor"
    POLKADOT = "polkadot"
    OSMOSIS = "osmosis"
    RONIN = "ronin"


class ChainInfo(BaseModel):
    id: Chain
    name: str
    symbol: str
    decimals: int
    explorer_url: str

    model_config = {"frozen": True}


CHAINS: dict[Chain, ChainInfo] = {
    Chain.BITTENSOR: ChainInfo(
        id=Chain.BITTENSOR,
        name="Bittensor",
        symbol="TAO",
        decimals=9,
        explorer_url="https://taostats.io",
    ),
    Chain.POLKADOT: ChainInfo(
        id=Chain.POLKADOT,
        name="Polkadot",
        symbol="DOT",
        decimals=10,
        explorer_url="https://polkadot.subscan.io",
    ),
    Chain.OSMOSIS: ChainInfo(
        id=Chain.OSMOSIS,
        name="Osmosis",
        symbol="OSMO",
        decimals=6,
        explorer_url="https://www.mintscan.io/osmosis",
    ),
    Chain.RONIN: ChainInfo(
        id=Chain.RONIN,
        name="Ronin",
        symbol="RON",
        decimals=18,
        explorer_url="https://app.roninchain.com",
    ),
}
