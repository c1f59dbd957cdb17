# File: src/ethscope/explorer/selector.py
from .models import Transaction
from .state import ExplorerState

class TransactionSelector:
    def __init__(self, state: ExplorerState):
        self.state = state

    def select(self, tx_hash: str) -> str:
        """Select a transaction by hash; nothing is selected while no transactions are loaded."""
        if not self.state.transactions:
            self.state.selected_hash = ""
        else:
            self.state.selected_hash = tx_hash
        return self.state.selected_hash

    def find_by_hash(self, tx_hash: str) -> Transaction:
        """First loaded transaction with ``tx_hash``, or the empty placeholder."""
        if tx_hash:
            for tx in self.state.transactions:
                if tx.hash == tx_hash:
                    return tx
        return Transaction.empty()

    def selected(self) -> Transaction:
        return self.find_by_hash(self.state.selected_hash)
