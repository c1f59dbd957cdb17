# File: src/ethscope/explorer/loader.py
import asyncio
import logging
from typing import List, Optional, Set

from .models import Transaction
from .state import ExplorerState
from ..exceptions import ProviderError
from ..monitoring.metrics import MetricsCollector

logger = logging.getLogger(__name__)

class TransactionLoader:
    """Loads the transactions of the current block into ``ExplorerState``.

    Each load is tagged with the block number it was issued for. A response
    that arrives after the state moved to another block is discarded, so an
    older load can never overwrite a newer one. The previous transaction list
    stays in place while a load is in flight.
    """

    def __init__(self, provider, state: ExplorerState, metrics: Optional[MetricsCollector] = None):
        self.provider = provider
        self.state = state
        self.metrics = metrics
        self._tasks: Set[asyncio.Task] = set()

    def on_block_changed(self, block_number: int) -> asyncio.Task:
        """Schedule a load for ``block_number`` on the running event loop."""
        if self.metrics:
            self.metrics.record_block(block_number)
        task = asyncio.get_running_loop().create_task(self.load(block_number))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def drain(self) -> None:
        """Wait for every in-flight load to finish."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks))

    def cancel(self) -> None:
        """Cancel every in-flight load."""
        for task in list(self._tasks):
            task.cancel()

    def _is_stale(self, block_number: int) -> bool:
        return self.state.block_number != block_number

    async def load(self, block_number: int) -> Optional[List[Transaction]]:
        """Load ``block_number`` and apply the result if it is still current.

        Returns the applied transaction list (empty on provider failure), or
        None when the response was discarded as stale.
        """
        try:
            transactions = await self.provider.get_block_with_transactions(block_number)
        except ProviderError as e:
            if self._is_stale(block_number):
                self._discard(block_number)
                return None
            logger.warning(f"Failed to load transactions for block {block_number}: {e}")
            transactions = []
            self._record(MetricsCollector.LOAD_FAILURE, 0)
        else:
            if self._is_stale(block_number):
                self._discard(block_number)
                return None
            logger.debug(f"Loaded {len(transactions)} transactions for block {block_number}")
            self._record(MetricsCollector.LOAD_SUCCESS, len(transactions))

        self.state.transactions = list(transactions)
        return self.state.transactions

    def _discard(self, block_number: int):
        logger.debug(
            f"Discarding stale load for block {block_number}, "
            f"current block is {self.state.block_number}"
        )
        self._record(MetricsCollector.LOAD_STALE)

    def _record(self, outcome: str, transaction_count: Optional[int] = None):
        if self.metrics:
            self.metrics.record_load(outcome, transaction_count)
