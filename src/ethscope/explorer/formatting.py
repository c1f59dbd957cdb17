# File: src/ethscope/explorer/formatting.py
from decimal import Decimal
from typing import Any, Optional

from web3 import Web3

from ..utils.config import Config

def _as_wei(raw: Any) -> Optional[int]:
    """Integer amount in wei, or None when ``raw`` is absent, non-numeric or out of range."""
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        wei = raw
    elif isinstance(raw, str):
        try:
            wei = int(raw, 0)
        except ValueError:
            return None
    else:
        return None

    if not 0 <= wei <= Config.MAX_WEI:
        return None
    return wei

def _to_base_unit(wei: int) -> Decimal:
    # from_wei returns a plain int 0 for zero amounts
    return Decimal(Web3.from_wei(wei, Config.BASE_UNIT))

def format_value(raw_value: Any, decimal_places: Optional[int] = None) -> str:
    """Convert a wei amount to ether as a decimal string.

    With ``decimal_places`` the result is fixed to that many places,
    otherwise the shortest plain decimal is returned. Absent or zero values
    without a place count, and any non-numeric or out-of-range value, render
    as ``"0"``.
    """
    wei = _as_wei(raw_value)
    if wei is None:
        return Config.ZERO

    amount = _to_base_unit(wei)
    if decimal_places is None:
        if not amount:
            return Config.ZERO
        return format(amount.normalize(), 'f')
    return f"{amount:.{decimal_places}f}"

def calculate_fee(gas_limit: Any, gas_price: Any, decimal_places: int) -> str:
    """Fee of gas_limit * gas_price in ether, fixed to ``decimal_places``."""
    limit = _as_wei(gas_limit)
    price = _as_wei(gas_price)
    if limit is None or price is None:
        return Config.ZERO

    # The product is range-checked again by format_value
    return format_value(limit * price, decimal_places)

def truncate(text: Any, length: Any) -> str:
    """First ``length`` characters of ``text`` followed by an ellipsis.

    Negative lengths keep no characters; a non-string text or non-integer
    length gives ``""``.
    """
    if not isinstance(text, str):
        return ""
    if not isinstance(length, int) or isinstance(length, bool):
        return ""
    return f"{text[:max(length, 0)]}{Config.ELLIPSIS}"
