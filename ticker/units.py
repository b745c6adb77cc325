# ticker/units.py
"""
Conversions between human-readable amounts and integer base units
"""

from decimal import Decimal, getcontext
from typing import Union

# uint256 has up to 78 digits
getcontext().prec = 80


def _scale(decimals: int) -> Decimal:
    if decimals < 0:
        raise ValueError(f"decimals must be >= 0, got {decimals}")
    return Decimal(10) ** decimals


def to_base_units(amount: Union[int, str, Decimal], decimals: int) -> int:
    """
    Convert a human amount to base units (amount * 10^decimals)
    Raises ValueError if the amount has more precision than the token
    """
    scaled = Decimal(str(amount)) * _scale(decimals)
    if scaled != scaled.to_integral_value():
        raise ValueError(f"{amount} has more than {decimals} fractional digits")
    return int(scaled)


def from_base_units(value: int, decimals: int) -> str:
    """
    Convert base units to a plain decimal string
    e.g. (990000, 6) -> "0.99", (10**18, 18) -> "1"
    """
    human = (Decimal(int(value)) / _scale(decimals)).normalize()
    return format(human, "f")
