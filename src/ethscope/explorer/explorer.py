# File: src/ethscope/explorer/explorer.py
import logging
from typing import List, Optional

from .loader import TransactionLoader
from .models import BlockView, Transaction, TransactionDetail, TransactionRow
from .navigator import BlockNavigator
from .selector import TransactionSelector
from .state import ExplorerState
from .views import build_detail, build_rows
from ..exceptions import ProviderError
from ..monitoring.metrics import MetricsCollector

logger = logging.getLogger(__name__)

class BlockExplorer:
    """Block navigation, transaction loading and selection over one state container."""

    def __init__(self, provider, metrics: Optional[MetricsCollector] = None):
        self.provider = provider
        self.state = ExplorerState()
        self.navigator = BlockNavigator(self.state)
        self.loader = TransactionLoader(provider, self.state, metrics)
        self.selector = TransactionSelector(self.state)

        self.navigator.subscribe(self.loader.on_block_changed)

    async def start(self) -> Optional[int]:
        """Fetch the chain head once and load its transactions."""
        try:
            head = await self.provider.get_block_number()
        except ProviderError as e:
            logger.error(f"Could not fetch the current block number: {e}")
            return None

        logger.info(f"Starting at block {head}")
        self.navigator.set_block(head)
        await self.loader.drain()
        return head

    async def show_block(self, block_number: int) -> List[Transaction]:
        """Jump to ``block_number`` and wait for its transactions."""
        self.navigator.set_block(block_number)
        await self.loader.drain()
        return self.state.transactions

    def go_previous(self) -> Optional[int]:
        return self.navigator.go_previous()

    def go_next(self) -> Optional[int]:
        return self.navigator.go_next()

    def select(self, tx_hash: str) -> str:
        return self.selector.select(tx_hash)

    def find_by_hash(self, tx_hash: str) -> Transaction:
        return self.selector.find_by_hash(tx_hash)

    def block_view(self) -> BlockView:
        return BlockView(block_number=self.state.block_number)

    def transaction_rows(self) -> List[TransactionRow]:
        return build_rows(self.state.transactions)

    def transaction_detail(self) -> TransactionDetail:
        return build_detail(self.selector.selected())
