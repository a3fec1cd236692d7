"""
Numeric helpers for money values.
"""

from decimal import Decimal, ROUND_HALF_UP, localcontext


def round_half_up(value: float, places: int) -> float:
    """
    Round a float to `places` decimals, ties away from zero.

    Works on the exact binary value of the float, so 1.005 (stored as
    1.00499999...) rounds to 1.0 while 0.125 rounds to 0.13.
    """
    exact = Decimal(value)
    quantum = Decimal(1).scaleb(-places)
    with localcontext() as ctx:
        # quantize needs every integer digit plus `places` decimals
        ctx.prec = max(28, exact.adjusted() + places + 2)
        return float(exact.quantize(quantum, rounding=ROUND_HALF_UP))
