# tests/conftest.py
import asyncio
import pytest
from ethscope.exceptions import ProviderError
from ethscope.explorer.models import Transaction

class FakeProvider:
    """In-memory provider; blocks listed in ``failing`` raise ProviderError."""

    def __init__(self, head=100, blocks=None, failing=()):
        self.head = head
        self.blocks = blocks or {}
        self.failing = set(failing)
        self.gates = {}
        self.requested = []

    def gate(self, block_number) -> asyncio.Event:
        """Hold loads of ``block_number`` until the returned event is set."""
        event = asyncio.Event()
        self.gates[block_number] = event
        return event

    async def get_block_number(self):
        if self.head is None:
            raise ProviderError("head unavailable")
        return self.head

    async def get_block_with_transactions(self, block_number):
        self.requested.append(block_number)
        if block_number in self.gates:
            await self.gates[block_number].wait()
        if block_number in self.failing:
            raise ProviderError(f"block {block_number} unavailable")
        return list(self.blocks.get(block_number, []))

def make_transaction(tx_hash, block_number=100, **overrides):
    fields = {
        "hash": tx_hash,
        "blockNumber": block_number,
        "from": "0x1111111111111111111111111111111111111111",
        "to": "0x2222222222222222222222222222222222222222",
        "confirmations": 3,
        "value": 1_500_000_000_000_000_000,
        "gasLimit": 21000,
        "gasPrice": 30_000_000_000,
        "data": "0x",
    }
    fields.update(overrides)
    return Transaction(**fields)

@pytest.fixture
def sample_transactions():
    return [
        make_transaction("0xabc...1"),
        make_transaction("0xabc...2", value=0, data="0xa9059cbb000000000000000000000000"),
    ]

@pytest.fixture
def provider(sample_transactions):
    return FakeProvider(
        head=100,
        blocks={
            100: sample_transactions,
            101: [make_transaction("0xdef...1", block_number=101)],
        }
    )
