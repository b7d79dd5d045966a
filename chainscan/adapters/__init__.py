from chainscan.adapters.base import ChainAdapter
from chainscan.adapters.bittensor import BittensorAdapter
from chainscan.adapters.osmosis import OsmosisAdapter
from chainscan.adapters.polkadot import PolkadotAdapter
from chainscan.adapters.ronin import RoninAdapter
from chainscan.errors import UnsupportedChainError
from chainscan.models.chain import Chain
from chainscan.models.event import TransactionEvent
from chainscan.scan.progress import ProgressCallback

ADAPTERS: dict[Chain, ChainAdapter] = {
    Chain.BITTENSOR: BittensorAdapter(),
    Chain.POLKADOT: PolkadotAdapter(),
    Chain.OSMOSIS: OsmosisAdapter(),
    Chain.RONIN: RoninAdapter(),
}


def get_adapter(chain: Chain | str) -> ChainAdapter:
    try:
        return ADAPTERS[Chain(chain.lower().strip() if isinstance(chain, str) else chain)]
    except (ValueError, KeyError):
        raise UnsupportedChainError(str(getattr(chain, "value", chain))) from None


def validate_address(chain: Chain | str, address: str) -> bool:
    return get_adapter(chain).validate_address(address.strip())


async def fetch_all_transactions(
    chain: Chain | str,
    address: str,
    on_progress: ProgressCallback | None = None,
) -> list[TransactionEvent]:
    return await get_adapter(chain).fetch_all_transactions(address, on_progress)
