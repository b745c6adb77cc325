from __future__ import annotations

import pytest

from ticker.pairs import (
    DEFAULT_PAIRS,
    TOKENS,
    UNISWAP_V2,
    USDC,
    USDT,
    WETH,
    Pair,
    Token,
)


def test_registry_tokens() -> None:
    assert TOKENS["USDT"] == USDT
    assert TOKENS["USDC"] == USDC
    assert USDT.decimals == 6
    assert USDC.decimals == 6
    assert WETH.decimals == 18
    assert USDT.address == "0xdAC17F958D2ee523a2206206994597C13D831ec7"


def test_registry_is_read_only() -> None:
    with pytest.raises(TypeError):
        TOKENS["DAI"] = Token("0x6B175474E89094C44Da98b954EedeAC495271d0F", "DAI", 18)  # type: ignore[index]

    with pytest.raises(AttributeError):
        USDT.decimals = 18  # type: ignore[misc]


def test_default_pairs_are_both_directions_in_order() -> None:
    assert DEFAULT_PAIRS == (Pair(USDT, USDC), Pair(USDC, USDT))
    assert DEFAULT_PAIRS[1] == Pair(DEFAULT_PAIRS[0].token_out, DEFAULT_PAIRS[0].token_in)
    assert DEFAULT_PAIRS[0] != DEFAULT_PAIRS[1]


def test_route_goes_through_weth() -> None:
    assert UNISWAP_V2.intermediate == WETH
    assert UNISWAP_V2.route(Pair(USDT, USDC)) == [USDT.address, WETH.address, USDC.address]
    assert UNISWAP_V2.address == "0x7a250d5630B4cF539739dF2C5dAcb4c659F2488D"


def test_negative_decimals_rejected() -> None:
    with pytest.raises(ValueError):
        Token("0x0000000000000000000000000000000000000001", "BAD", -1)
