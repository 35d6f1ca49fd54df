"""JSON-RPC contract reader backed by web3."""

from __future__ import annotations

import structlog

logger = structlog.get_logger()


class Web3ContractReader:
    """ContractReader that issues eth_call requests through a web3 provider.

    Reads target the last finalized block by default so every node in a
    deployment sees the same state.
    """

    def __init__(self, web3_provider: str, block_identifier: str | int = "finalized"):
        """Initialize reader with a web3 provider.

        Args:
            web3_provider: HTTP RPC URL (e.g., "https://arb1.arbitrum.io/rpc")
            block_identifier: Block tag or number used for calls
        """
        from web3 import Web3

        self.w3 = Web3(Web3.HTTPProvider(web3_provider))
        self.block_identifier = block_identifier

    def call(self, to: str, data: bytes) -> bytes:
        """Execute eth_call and return the raw return data."""
        from web3 import Web3

        result = self.w3.eth.call(
            {"to": Web3.to_checksum_address(to), "data": Web3.to_hex(data)},
            block_identifier=self.block_identifier,
        )
        logger.debug("contract_call", to=to, selector=data[:4].hex(), size=len(result))
        return bytes(result)


__all__ = ["Web3ContractReader"]
