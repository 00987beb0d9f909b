"""Utility functions for the Flash Loan SDK."""

from decimal import Decimal, InvalidOperation, localcontext
from functools import cmp_to_key
from typing import Callable, List, TypeVar, Union

T = TypeVar("T")

Number = Union[int, float, Decimal]

# Token amounts are 18-decimal fixed point
DEFAULT_DECIMALS = 18


def sort_by(items: List[T], *key_fns: Callable[[T], Number]) -> List[T]:
    """Sort ``items`` in place by several keys and return it.

    Keys are compared in order; the next key only breaks ties of the previous
    one. Two ints compare exactly. Any other pairing compares as floats, which
    loses precision for integers beyond 2**53. Items whose keys all tie keep
    their original order.

    Args:
        items: List to sort
        key_fns: Key functions returning int, float or Decimal

    Returns:
        The same list, sorted
    """

    def compare(a: T, b: T) -> int:
        for fn in key_fns:
            a_value = fn(a)
            b_value = fn(b)
            if isinstance(a_value, int) and isinstance(b_value, int):
                diff = a_value - b_value
            else:
                diff = float(a_value) - float(b_value)
            if diff:
                return -1 if diff < 0 else 1
        return 0

    items.sort(key=cmp_to_key(compare))
    return items


def parse_units(value: Union[str, int, float, Decimal], decimals: int = DEFAULT_DECIMALS) -> int:
    """Parse a human readable amount into a scaled integer.

    Args:
        value: Amount, e.g. "1.5" or Decimal("0.01")
        decimals: Number of decimal places of the token

    Returns:
        Scaled amount (e.g. "1.5" -> 1500000000000000000)

    Raises:
        ValueError: If the value is negative, not a number or has more
            fractional digits than ``decimals``
    """
    if isinstance(value, bool):
        raise ValueError(f"Invalid amount: {value!r}")
    try:
        amount = Decimal(str(value))
    except InvalidOperation:
        raise ValueError(f"Invalid amount: {value!r}")
    if not amount.is_finite() or amount < 0:
        raise ValueError(f"Invalid amount: {value!r}")

    with localcontext() as ctx:
        ctx.prec = 200
        scaled = amount.scaleb(decimals)
    if scaled != scaled.to_integral_value():
        raise ValueError(f"Too many decimal places in {value!r}, maximum is {decimals}")
    return int(scaled)


def format_units(amount: int, decimals: int = DEFAULT_DECIMALS) -> str:
    """Format a scaled integer amount as a human readable string.

    Args:
        amount: Scaled amount (e.g. 1500000000000000000)
        decimals: Number of decimal places of the token

    Returns:
        Human readable string (e.g. "1.5")
    """
    sign = "-" if amount < 0 else ""
    whole, fraction = divmod(abs(amount), 10**decimals)
    fraction_str = str(fraction).zfill(decimals).rstrip("0")
    if not fraction_str:
        return f"{sign}{whole}"
    return f"{sign}{whole}.{fraction_str}"


def parse_ether(value: Union[str, int, float, Decimal]) -> int:
    return parse_units(value, 18)


def format_ether(amount: int) -> str:
    return format_units(amount, 18)
