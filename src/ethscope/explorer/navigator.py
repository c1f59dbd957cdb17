# File: src/ethscope/explorer/navigator.py
import logging
from typing import Callable, List, Optional

from .state import ExplorerState

logger = logging.getLogger(__name__)

BlockListener = Callable[[int], None]

class BlockNavigator:
    """Owns ``ExplorerState.block_number`` and publishes every change."""

    def __init__(self, state: ExplorerState):
        self.state = state
        self._listeners: List[BlockListener] = []

    def subscribe(self, listener: BlockListener) -> None:
        self._listeners.append(listener)

    def set_block(self, block_number: int) -> int:
        if block_number < 0:
            raise ValueError(f"Block number must be non-negative, got {block_number}")
        self.state.block_number = block_number
        for listener in self._listeners:
            listener(block_number)
        return block_number

    def go_previous(self) -> Optional[int]:
        """Step back one block, clamped at zero."""
        current = self.state.block_number
        if current is None:
            logger.debug("Ignoring previous-block request before the chain head is known")
            return None
        previous = max(current - 1, 0)
        if previous == current:
            return current
        return self.set_block(previous)

    def go_next(self) -> Optional[int]:
        """Step forward one block; the chain head is not checked."""
        current = self.state.block_number
        if current is None:
            logger.debug("Ignoring next-block request before the chain head is known")
            return None
        return self.set_block(current + 1)
