"""Exception hierarchy for chain scans.

Upstream failures never reach the caller of a scan: the fetchers turn
``UpstreamError`` into an empty page. Only ``ScanInputError`` subclasses are
raised out of ``fetch_all_transactions``, and always before any network call.
"""

from __future__ import annotations


class ChainScanError(Exception):
    """Base exception for all chainscan errors."""


class UpstreamError(ChainScanError):
    """Transport, status or JSON failure talking to an indexer or the relay."""

    def __init__(self, message: str, url: str = "", status_code: int | None = None):
        super().__init__(message)
        self.url = url
        self.status_code = status_code

    def __str__(self) -> str:
        parts = [super().__str__()]
        if self.status_code is not None:
            parts.append(f"[status={self.status_code}]")
        if self.url:
            parts.append(f"[url={self.url}]")
        return " ".join(parts)


class ScanInputError(ChainScanError, ValueError):
    """Rejected scan input, surfaced before any network activity."""


class UnsupportedChainError(ScanInputError):
    def __init__(self, chain: str):
        super().__init__(f"Unsupported chain '{chain}'")
        self.chain = chain


class InvalidAddressError(ScanInputError):
    def __init__(self, chain: str, address: str):
        super().__init__(f"Invalid {chain} address: {address!r}")
        self.chain = chain
        self.address = address
