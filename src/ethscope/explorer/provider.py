# File: src/ethscope/explorer/provider.py
import asyncio
import logging
from typing import Any, Dict, List, Optional

from web3 import AsyncWeb3, AsyncHTTPProvider, Web3

from .models import Transaction
from ..exceptions import ProviderError

logger = logging.getLogger(__name__)

def _to_hex(value: Any) -> Any:
    """Return a 0x-prefixed hex string for bytes-like ``value``."""
    if isinstance(value, (bytes, bytearray)):
        return Web3.to_hex(value)
    return value

class AlchemyProvider:
    """
    Fetches block data from an Alchemy (or any Ethereum JSON-RPC) endpoint
    using web3.py's async client.
    """
    def __init__(self, rpc_url: Optional[str] = None, w3: Optional[AsyncWeb3] = None):
        if w3 is None:
            if not rpc_url:
                raise ValueError("rpc_url is required when no web3 client is given")
            w3 = AsyncWeb3(AsyncHTTPProvider(rpc_url))
        self.w3 = w3

    @classmethod
    def from_config(cls, config) -> "AlchemyProvider":
        return cls(config.rpc_url)

    async def get_block_number(self) -> int:
        """Current chain head."""
        try:
            return await self.w3.eth.block_number
        except Exception as e:
            raise ProviderError(f"Failed to fetch block number: {e}") from e

    async def get_block_with_transactions(self, block_number: int) -> List[Transaction]:
        """
        Fetch a block with full transaction objects.
        Args:
            block_number: The block number to fetch.
        Returns:
            The block's transactions in provider order.
        Raises:
            ProviderError if the block cannot be fetched.
        """
        try:
            head, block = await asyncio.gather(
                self.w3.eth.block_number,
                self.w3.eth.get_block(block_number, full_transactions=True)
            )
            transactions = [self._to_transaction(tx, head) for tx in block.get("transactions", [])]
        except Exception as e:
            raise ProviderError(f"Failed to fetch block {block_number}: {e}") from e

        logger.debug(f"Fetched block {block_number} with {len(transactions)} transactions")
        return transactions

    @staticmethod
    def _to_transaction(tx: Dict[str, Any], head: int) -> Transaction:
        tx_block = tx.get("blockNumber")
        confirmations = None
        if tx_block is not None:
            confirmations = max(head - tx_block + 1, 0)

        return Transaction(
            hash=_to_hex(tx.get("hash")),
            block_number=tx_block,
            from_address=tx.get("from"),
            to_address=tx.get("to"),
            confirmations=confirmations,
            value=tx.get("value"),
            gas_limit=tx.get("gas"),
            gas_price=tx.get("gasPrice"),
            data=_to_hex(tx.get("input"))
        )
