# File: src/ethscope/explorer/__init__.py
from .explorer import BlockExplorer
from .models import Transaction, TransactionRow, TransactionDetail, BlockView
from .provider import AlchemyProvider

__all__ = [
    'BlockExplorer',
    'Transaction',
    'TransactionRow',
    'TransactionDetail',
    'BlockView',
    'AlchemyProvider',
]
