# File: src/ethscope/explorer/views.py
from typing import Iterable, List

from tabulate import tabulate

from .formatting import calculate_fee, format_value, truncate
from .models import Transaction, TransactionDetail, TransactionRow
from ..utils.config import Config

TABLE_HEADERS = (
    "Transaction Hash",
    "Block",
    "From",
    "To",
    "Confirmations",
    "Value",
    "Transaction Fee",
    "Data",
)

def build_row(tx: Transaction) -> TransactionRow:
    return TransactionRow(
        hash=truncate(tx.hash, Config.HASH_PREVIEW_LENGTH),
        block_number=tx.block_number,
        from_address=truncate(tx.from_address, Config.ADDRESS_PREVIEW_LENGTH),
        to_address=truncate(tx.to_address, Config.ADDRESS_PREVIEW_LENGTH),
        confirmations=tx.confirmations,
        value=format_value(tx.value, Config.TABLE_VALUE_DECIMAL_PLACES),
        fee=calculate_fee(tx.gas_limit, tx.gas_price, Config.TABLE_FEE_DECIMAL_PLACES),
        data=truncate(tx.data, Config.DATA_PREVIEW_LENGTH)
    )

def build_rows(transactions: Iterable[Transaction]) -> List[TransactionRow]:
    return [build_row(tx) for tx in transactions]

def build_detail(tx: Transaction) -> TransactionDetail:
    return TransactionDetail(
        hash=tx.hash,
        block_number=tx.block_number,
        from_address=tx.from_address,
        to_address=tx.to_address,
        confirmations=tx.confirmations,
        value=format_value(tx.value),
        fee=calculate_fee(tx.gas_limit, tx.gas_price, Config.DETAIL_FEE_DECIMAL_PLACES),
        data=tx.data
    )

def render_table(rows: List[TransactionRow]) -> str:
    """Transaction table with one line per row under the column headers."""
    table = [[
        row.hash, row.block_number, row.from_address, row.to_address,
        row.confirmations, row.value, row.fee, row.data
    ] for row in rows]
    # Amounts are already formatted; keep them as strings
    return tabulate(table, headers=TABLE_HEADERS, disable_numparse=True)

def render_detail(detail: TransactionDetail) -> str:
    table = [
        ["Transaction Hash", detail.hash],
        ["Block", detail.block_number],
        ["From", detail.from_address],
        ["To", detail.to_address],
        ["Confirmations", detail.confirmations],
        ["Value", detail.value],
        ["Transaction Fee", detail.fee],
        ["Data", detail.data],
    ]
    return tabulate(table, headers=["Attribute", "Value"], disable_numparse=True)
