# File: src/ethscope/explorer/models.py
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional

class Transaction(BaseModel):
    """Transaction as returned by the provider.

    Every field may be absent; ``to`` is absent for contract creation and the
    placeholder returned by lookups has no fields at all.
    """
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    hash: Optional[str] = None
    block_number: Optional[int] = Field(default=None, alias="blockNumber")
    from_address: Optional[str] = Field(default=None, alias="from")
    to_address: Optional[str] = Field(default=None, alias="to")
    confirmations: Optional[int] = None
    value: Optional[int] = None
    gas_limit: Optional[int] = Field(default=None, alias="gasLimit")
    gas_price: Optional[int] = Field(default=None, alias="gasPrice")
    data: Optional[str] = None

    @classmethod
    def empty(cls) -> "Transaction":
        return cls()

    @property
    def is_empty(self) -> bool:
        return self == Transaction.empty()

class TransactionRow(BaseModel):
    hash: str
    block_number: Optional[int]
    from_address: str
    to_address: str
    confirmations: Optional[int]
    value: str
    fee: str
    data: str

class TransactionDetail(BaseModel):
    hash: Optional[str]
    block_number: Optional[int]
    from_address: Optional[str]
    to_address: Optional[str]
    confirmations: Optional[int]
    value: str
    fee: str
    data: Optional[str]

class BlockView(BaseModel):
    block_number: Optional[int]
