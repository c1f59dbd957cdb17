# tests/test_config.py
import logging
import os
import pytest
import yaml
import ethscope.cli.cli
from ethscope.config.settings import ExplorerConfig
from ethscope.exceptions import ConfigError
from ethscope.monitoring.logging_config import LogConfig

class TestExplorerConfig:
    @pytest.fixture
    def config_path(self, tmp_path):
        return str(tmp_path / "config" / "ethscope.yaml")

    def test_default_config_is_written(self, config_path):
        config = ExplorerConfig(config_path)

        assert os.path.exists(config_path)
        assert config.get("provider.network") == "eth-mainnet"
        assert config.get("api.port") == 8000
        with open(config_path) as f:
            assert yaml.safe_load(f)["monitoring"]["log_level"] == "INFO"

    def test_get_missing_key_returns_default(self, config_path):
        config = ExplorerConfig(config_path)
        assert config.get("provider.missing", "fallback") == "fallback"
        assert config.get("api.port.nested") is None

    def test_update_persists(self, config_path):
        config = ExplorerConfig(config_path)
        config.update("api.port", 9000)

        assert ExplorerConfig(config_path).get("api.port") == 9000

    def test_rpc_url_from_environment_key(self, config_path, monkeypatch):
        monkeypatch.setenv("ALCHEMY_API_KEY", "secret-key")
        config = ExplorerConfig(config_path)

        assert config.rpc_url == "https://eth-mainnet.g.alchemy.com/v2/secret-key"
        with open(config_path) as f:
            assert "secret-key" not in f.read()

    def test_missing_key_is_not_an_error(self, config_path, monkeypatch):
        monkeypatch.delenv("ALCHEMY_API_KEY", raising=False)
        config = ExplorerConfig(config_path)
        assert config.api_key == ""
        assert config.rpc_url == "https://eth-mainnet.g.alchemy.com/v2/"

    def test_custom_key_variable_and_network(self, config_path, monkeypatch):
        monkeypatch.setenv("MY_KEY", "abc")
        config = ExplorerConfig(config_path)
        config.update("provider.api_key_env", "MY_KEY")
        config.update("provider.network", "eth-sepolia")

        assert config.rpc_url == "https://eth-sepolia.g.alchemy.com/v2/abc"

    def test_explicit_rpc_url_wins(self, config_path):
        config = ExplorerConfig(config_path)
        config.update("provider.rpc_url", "http://127.0.0.1:8545")
        assert config.rpc_url == "http://127.0.0.1:8545"

    def test_unknown_network(self, config_path):
        config = ExplorerConfig(config_path)
        config.update("provider.network", "doge-mainnet")
        with pytest.raises(ConfigError):
            config.rpc_url

    def test_non_mapping_file(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("- just\n- a list\n")
        with pytest.raises(ConfigError):
            ExplorerConfig(str(path))

class TestLogging:
    def test_modules_log_through_root_handlers(self):
        # Handlers live only on the root logger so lines are not printed twice
        assert logging.getLogger("ethscope.cli.cli").handlers == []
        assert logging.getLogger("ethscope.cli.cli").propagate

    def test_log_config_creates_log_file(self, tmp_path):
        log_dir = str(tmp_path / "logs")
        root_logger = logging.getLogger()
        handlers = list(root_logger.handlers)
        level = root_logger.level
        try:
            log_file = LogConfig(log_dir=log_dir).setup_logging()
            logging.getLogger("ethscope.test").info("hello")
            assert os.path.exists(log_file)
        finally:
            for handler in root_logger.handlers[len(handlers):]:
                handler.close()
            root_logger.handlers = handlers
            root_logger.setLevel(level)
