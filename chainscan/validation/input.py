from fastapi import HTTPException

from chainscan.adapters import get_adapter
from chainscan.errors import UnsupportedChainError
from chainscan.models.chain import CHAINS, Chain

SUPPORTED_CHAINS = {c.value for c in Chain}
CSV_MODES = {"strict", "enriched"}
OUTPUT_FORMATS = {"json", "csv"}


def validate_chain(chain: str) -> Chain:
    try:
        return get_adapter(chain).chain
    except UnsupportedChainError:
        raise HTTPException(
            status_code=400,
            detail=f"Unsupported chain '{chain.lower().strip()}'. Supported: {', '.join(sorted(SUPPORTED_CHAINS))}",
        )


def validate_address(chain: Chain, address: str) -> str:
    address = (address or "").strip()
    if not address:
        raise HTTPException(status_code=400, detail="Missing wallet address")
    if not get_adapter(chain).validate_address(address):
        raise HTTPException(
            status_code=400,
            detail=f"Invalid {CHAINS[chain].name} address format",
        )
    return address


def validate_mode(mode: str) -> str:
    mode = (mode or "strict").lower().strip()
    if mode not in CSV_MODES:
        raise HTTPException(status_code=400, detail=f"Unknown CSV mode '{mode}'. Use strict or enriched.")
    return mode


def validate_format(fmt: str) -> str:
    fmt = (fmt or "json").lower().strip()
    if fmt not in OUTPUT_FORMATS:
        raise HTTPException(status_code=400, detail=f"Unknown format '{fmt}'. Use json or csv.")
    return fmt
