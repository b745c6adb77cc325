# ticker/__init__.py
"""
Ethereum Quote Ticker
Polls a Uniswap V2 router for stablecoin quotes

Modules:
- config: Environment and startup configuration
- pairs: Token registry, quote pairs and router endpoint
- units: Base-unit conversion
- quote_engine: Router getAmountsOut quotes
- poller: Delay-then-run polling loop
- rpc_health: Startup RPC check
- main: Entry point
"""

__version__ = "1.0.0"

from ticker.pairs import (
    USDT,
    USDC,
    WETH,
    TOKENS,
    DEFAULT_PAIRS,
    UNISWAP_V2,
    Token,
    Pair,
    RouterEndpoint,
)
from ticker.quote_engine import Quote, QuoteEngine, QuoteError
from ticker.poller import QuotePoller, PollerState

__all__ = [
    "USDT",
    "USDC",
    "WETH",
    "TOKENS",
    "DEFAULT_PAIRS",
    "UNISWAP_V2",
    "Token",
    "Pair",
    "RouterEndpoint",
    "Quote",
    "QuoteEngine",
    "QuoteError",
    "QuotePoller",
    "PollerState",
]
