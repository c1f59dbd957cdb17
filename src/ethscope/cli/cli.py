# src/ethscope/cli/cli.py
import argparse
import asyncio
import logging
import sys
import uvicorn
from typing import List, Optional
from ..api.server import create_app
from ..config.settings import ExplorerConfig
from ..exceptions import ProviderError
from ..explorer.explorer import BlockExplorer
from ..explorer.provider import AlchemyProvider
from ..explorer.views import render_table, render_detail
from ..monitoring.logging_config import LogConfig
from ..monitoring.metrics import MetricsCollector

logger = logging.getLogger(__name__)

class CLI:
    def __init__(self, provider: Optional[AlchemyProvider] = None):
        self.provider = provider
        self.config = None

    def main(self, args: List[str]) -> int:
        parser = self.create_parser()
        args = parser.parse_args(args)

        if not hasattr(args, 'func'):
            parser.print_help()
            return 1

        self.config = ExplorerConfig(args.config)
        if self.provider is None:
            self.provider = AlchemyProvider.from_config(self.config)

        try:
            args.func(args)
        except ProviderError as e:
            print(f"Error: {e}")
            return 1
        return 0

    def create_parser(self) -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(description='ethscope CLI')
        parser.add_argument('--config', default='config/ethscope.yaml', help='Config file path')
        subparsers = parser.add_subparsers(title='commands', dest='command')

        serve = subparsers.add_parser('serve', help='Start the explorer HTTP API')
        serve.add_argument('--host', default=None, help='API host')
        serve.add_argument('--port', type=int, default=None, help='API port')
        serve.set_defaults(func=self.serve)

        head = subparsers.add_parser('head', help='Show the current block number')
        head.set_defaults(func=self.show_head)

        block = subparsers.add_parser('block', help='List the transactions of a block')
        block.add_argument('number', type=int, help='Block number')
        block.set_defaults(func=self.show_block)

        tx = subparsers.add_parser('tx', help='Show transaction details')
        tx.add_argument('number', type=int, help='Block number containing the transaction')
        tx.add_argument('hash', help='Transaction hash')
        tx.set_defaults(func=self.show_transaction)

        return parser

    def serve(self, args):
        LogConfig.from_config(self.config).setup_logging()
        metrics = MetricsCollector()
        metrics.serve(self.config.get('monitoring.metrics_port'))

        host = args.host or self.config.get('api.host')
        port = args.port or self.config.get('api.port')
        app = create_app(BlockExplorer(self.provider, metrics))
        logger.info(f"Serving ethscope at http://{host}:{port}")
        uvicorn.run(app, host=host, port=port)

    def show_head(self, args):
        block_number = asyncio.run(self.provider.get_block_number())
        print(f"Block Number: {block_number}")

    def show_block(self, args):
        async def load():
            explorer = BlockExplorer(self.provider)
            await explorer.show_block(args.number)
            return explorer.transaction_rows()

        rows = asyncio.run(load())
        print(f"Block Number: {args.number}")
        print(render_table(rows))

    def show_transaction(self, args):
        async def lookup():
            explorer = BlockExplorer(self.provider)
            await explorer.show_block(args.number)
            explorer.select(args.hash)
            return explorer.transaction_detail()

        print(render_detail(asyncio.run(lookup())))

def main():
    cli = CLI()
    sys.exit(cli.main(sys.argv[1:]))

if __name__ == "__main__":
    main()
