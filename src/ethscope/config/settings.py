# File: src/ethscope/config/settings.py

import yaml
import os
from typing import Dict, Any

from ..exceptions import ConfigError
from ..utils.config import Config

class ExplorerConfig:
    def __init__(self, config_path: str = "config/ethscope.yaml"):
        self.config_path = config_path
        self.config = self._load_config()

    def _load_config(self) -> Dict[str, Any]:
        if not os.path.exists(self.config_path):
            return self._create_default_config()

        with open(self.config_path, 'r') as f:
            config = yaml.safe_load(f)

        if config is None:
            return {}
        if not isinstance(config, dict):
            raise ConfigError(f"Config file {self.config_path} must contain a mapping")
        return config

    def _create_default_config(self) -> Dict[str, Any]:
        config = {
            "provider": {
                "network": Config.DEFAULT_NETWORK,
                "rpc_url": None,
                # Name of the environment variable holding the API key
                "api_key_env": Config.DEFAULT_API_KEY_ENV
            },
            "api": {
                "host": Config.DEFAULT_API_HOST,
                "port": Config.DEFAULT_API_PORT
            },
            "monitoring": {
                "metrics_port": Config.DEFAULT_METRICS_PORT,
                "log_dir": "logs",
                "log_level": "INFO"
            }
        }

        config_dir = os.path.dirname(self.config_path)
        if config_dir:
            os.makedirs(config_dir, exist_ok=True)
        with open(self.config_path, 'w') as f:
            yaml.dump(config, f)

        return config

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value."""
        try:
            keys = key.split('.')
            value = self.config
            for k in keys:
                value = value[k]
            return value
        except (KeyError, TypeError):
            return default

    def update(self, key: str, value: Any):
        """Update configuration value."""
        keys = key.split('.')
        config = self.config
        for k in keys[:-1]:
            config = config.setdefault(k, {})
        config[keys[-1]] = value

        with open(self.config_path, 'w') as f:
            yaml.dump(self.config, f)

    @property
    def network(self) -> str:
        network = self.get("provider.network") or Config.DEFAULT_NETWORK
        if network not in Config.ALCHEMY_NETWORKS:
            raise ConfigError(f"Unsupported network: {network}")
        return network

    @property
    def api_key(self) -> str:
        """API key from the environment; empty when unset."""
        env_name = self.get("provider.api_key_env") or Config.DEFAULT_API_KEY_ENV
        return os.environ.get(env_name, "")

    @property
    def rpc_url(self) -> str:
        explicit = self.get("provider.rpc_url")
        if explicit:
            return explicit
        return Config.ALCHEMY_URL_TEMPLATE.format(
            network=self.network,
            api_key=self.api_key
        )
