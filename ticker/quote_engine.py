# ticker/quote_engine.py
"""
Router Quote Engine
Asks a V2-style router how much token_out one unit of token_in buys,
routed through the intermediate token
"""

import logging
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from web3 import Web3

from ticker.dex.routers import ROUTER_ABI
from ticker.pairs import Pair, RouterEndpoint
from ticker.units import from_base_units, to_base_units

logger = logging.getLogger(__name__)


class QuoteError(RuntimeError):
    """Router call failed or returned something we can't use"""


# =============================================================================
# DATA CLASSES
# =============================================================================

@dataclass
class Quote:
    """Single router quote"""
    pair: Pair
    amount_in: int
    amounts: Tuple[int, ...]
    amount_out: int
    display: str  # amount_out in human units

    def line(self) -> str:
        return f"{self.pair.token_in.symbol} => {self.pair.token_out.symbol} : {self.display}"


# =============================================================================
# QUOTE ENGINE
# =============================================================================

class QuoteEngine:

    def __init__(self, router, endpoint: RouterEndpoint):
        self.router = router
        self.endpoint = endpoint

    @classmethod
    def from_web3(cls, w3: Web3, endpoint: RouterEndpoint) -> "QuoteEngine":
        router = w3.eth.contract(address=endpoint.address, abi=ROUTER_ABI)
        return cls(router, endpoint)

    def get_amounts_out(self, amount_in: int, path: Sequence[str]) -> List[int]:
        """
        Call getAmountsOut on the router
        Returns one amount per address in path; the last one is the output
        """
        if len(path) < 2:
            raise ValueError(f"path needs at least 2 tokens, got {len(path)}")

        try:
            amounts = self.router.functions.getAmountsOut(amount_in, list(path)).call()
        except Exception as e:
            raise QuoteError(f"getAmountsOut failed: {e}") from e

        if not isinstance(amounts, (list, tuple)) or len(amounts) != len(path):
            raise QuoteError(
                f"getAmountsOut returned {amounts!r}, expected {len(path)} amounts"
            )
        if not all(isinstance(a, int) and a >= 0 for a in amounts):
            raise QuoteError(f"getAmountsOut returned non-uint amounts: {amounts!r}")

        return list(amounts)

    def quote(self, pair: Pair) -> Quote:
        """Quote exactly 1 token_in through the intermediate hop"""
        amount_in = to_base_units(1, pair.token_in.decimals)
        path = self.endpoint.route(pair)

        amounts = self.get_amounts_out(amount_in, path)
        amount_out = amounts[-1]
        logger.debug(f"{pair}: amounts={amounts}")

        return Quote(
            pair=pair,
            amount_in=amount_in,
            amounts=tuple(amounts),
            amount_out=amount_out,
            # amount_out is denominated in token_out
            display=from_base_units(amount_out, pair.token_out.decimals),
        )
