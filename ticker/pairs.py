# ticker/pairs.py
"""
Token Registry for Ethereum mainnet
Tokens, quote pairs and the router endpoint polled by the ticker
"""

from web3 import Web3
from dataclasses import dataclass
from types import MappingProxyType
from typing import List, Mapping, Tuple

from ticker.dex.routers import UNISWAP_V2_ROUTER

# =============================================================================
# TOKEN ADDRESSES (Ethereum Mainnet - All Checksummed)
# =============================================================================

USDT_ADDRESS = Web3.to_checksum_address("0xdAC17F958D2ee523a2206206994597C13D831ec7")
USDC_ADDRESS = Web3.to_checksum_address("0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48")
WETH_ADDRESS = Web3.to_checksum_address("0xC02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2")

# =============================================================================
# DATA CLASSES
# =============================================================================

@dataclass(frozen=True)
class Token:
    address: str
    symbol: str
    decimals: int

    def __post_init__(self):
        if self.decimals < 0:
            raise ValueError(f"{self.symbol}: decimals must be >= 0, got {self.decimals}")


@dataclass(frozen=True)
class Pair:
    """Ordered quote direction token_in -> token_out"""
    token_in: Token
    token_out: Token

    def __str__(self) -> str:
        return f"{self.token_in.symbol}/{self.token_out.symbol}"


@dataclass(frozen=True)
class RouterEndpoint:
    """Router contract plus the token used as the middle hop"""
    address: str
    intermediate: Token

    def route(self, pair: Pair) -> List[str]:
        return [
            pair.token_in.address,
            self.intermediate.address,
            pair.token_out.address,
        ]


# =============================================================================
# TOKEN METADATA
# =============================================================================

USDT = Token(USDT_ADDRESS, "USDT", 6)
USDC = Token(USDC_ADDRESS, "USDC", 6)
WETH = Token(WETH_ADDRESS, "WETH", 18)

TOKENS: Mapping[str, Token] = MappingProxyType({
    token.symbol: token for token in (USDT, USDC, WETH)
})

# Polled in this order every cycle
DEFAULT_PAIRS: Tuple[Pair, ...] = (
    Pair(USDT, USDC),
    Pair(USDC, USDT),
)

UNISWAP_V2 = RouterEndpoint(address=UNISWAP_V2_ROUTER, intermediate=WETH)

