# File: src/ethscope/explorer/state.py
from dataclasses import dataclass, field
from typing import List, Optional

from .models import Transaction

@dataclass
class ExplorerState:
    """View state shared by the navigator, loader and selector.

    ``block_number`` stays ``None`` until the chain head has been fetched.
    ``transactions`` always holds the last applied load for
    ``block_number``. ``selected_hash`` is ``""`` when nothing is selected.
    """
    block_number: Optional[int] = None
    transactions: List[Transaction] = field(default_factory=list)
    selected_hash: str = ""
