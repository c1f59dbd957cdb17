# src/ethscope/utils/config.py

class Config:
    # Unit conversion
    BASE_UNIT = "ether"

    # Table view
    TABLE_VALUE_DECIMAL_PLACES = 12
    TABLE_FEE_DECIMAL_PLACES = 5
    HASH_PREVIEW_LENGTH = 10
    ADDRESS_PREVIEW_LENGTH = 15
    DATA_PREVIEW_LENGTH = 15
    ELLIPSIS = "..."

    # Detail view
    DETAIL_FEE_DECIMAL_PLACES = 18

    # Placeholder for absent or non-numeric amounts
    ZERO = "0"
    MAX_WEI = 2 ** 256 - 1

    # Provider configuration
    DEFAULT_NETWORK = "eth-mainnet"
    DEFAULT_API_KEY_ENV = "ALCHEMY_API_KEY"
    ALCHEMY_URL_TEMPLATE = "https://{network}.g.alchemy.com/v2/{api_key}"
    ALCHEMY_NETWORKS = (
        "eth-mainnet",
        "eth-sepolia",
        "eth-holesky",
        "opt-mainnet",
        "arb-mainnet",
        "polygon-mainnet",
        "base-mainnet",
    )

    # HTTP API
    DEFAULT_API_HOST = "127.0.0.1"
    DEFAULT_API_PORT = 8000
    DEFAULT_METRICS_PORT = 9090
