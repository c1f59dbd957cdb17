# File: src/ethscope/monitoring/metrics.py

from typing import Optional
from prometheus_client import CollectorRegistry, Counter, Gauge, start_http_server

class MetricsCollector:
    LOAD_SUCCESS = "success"
    LOAD_FAILURE = "failure"
    LOAD_STALE = "stale"

    def __init__(self, registry: Optional[CollectorRegistry] = None):
        self.registry = registry or CollectorRegistry()

        # Loader metrics
        self.block_loads = Counter(
            'ethscope_block_loads',
            'Block transaction loads by outcome',
            ['outcome'],
            registry=self.registry
        )
        self.loaded_transactions = Gauge(
            'ethscope_loaded_transactions',
            'Number of transactions currently displayed',
            registry=self.registry
        )

        # Navigation metrics
        self.current_block = Gauge(
            'ethscope_current_block',
            'Currently selected block number',
            registry=self.registry
        )

    def serve(self, port: int):
        start_http_server(port, registry=self.registry)

    def record_load(self, outcome: str, transaction_count: Optional[int] = None):
        self.block_loads.labels(outcome=outcome).inc()
        if transaction_count is not None:
            self.loaded_transactions.set(transaction_count)

    def record_block(self, block_number: int):
        self.current_block.set(block_number)
