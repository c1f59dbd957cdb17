# src/ethscope/exceptions.py

class ExplorerError(Exception):
    """Base exception class for explorer-related errors"""
    pass

class ProviderError(ExplorerError):
    """Raised when the blockchain API provider call fails"""
    pass

class ConfigError(ExplorerError):
    """Raised when configuration is invalid"""
    pass
