from .settings import ExplorerConfig

__all__ = ['ExplorerConfig']
