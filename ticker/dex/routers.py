# ticker/dex/routers.py

from web3 import Web3

# Uniswap V2 Router02 (Ethereum mainnet)
UNISWAP_V2_ROUTER = Web3.to_checksum_address(
    "0x7a250d5630b4cf539739df2c5dacb4c659f2488d"
)

ROUTER_ABI = [
    {
        "name": "getAmountsOut",
        "type": "function",
        "stateMutability": "view",
        "inputs": [
            {"name": "amountIn", "type": "uint256"},
            {"name": "path", "type": "address[]"},
        ],
        "outputs": [{"name": "amounts", "type": "uint256[]"}],
    }
]
