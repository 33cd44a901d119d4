#!/usr/bin/env python
# -*- codeing:utf-8 -*-

"""Errors raised by the tick math conversions.
"""

__author__ = "XiaoHuiHui"
__version__ = "1.2"


class TickMathError(ValueError):
    """The base error of this package. Both conversions only raise it
    from their precondition checks, never in the middle of a
    computation.
    """
    pass


class TickOutOfRange(TickMathError):
    """An error indicating that the absolute value of the given tick is
    greater than the maximum tick.
    """

    def __init__(self, tick: int) -> None:
        super().__init__(
            f"The given tick {tick} is out of range, its absolute value "
            "must be less than, or equal to, the maximum tick."
        )
        self.tick = tick


class PriceOutOfRange(TickMathError):
    """An error indicating that the given sqrt price is not inside
    [MIN_SQRT_RATIO, MAX_SQRT_RATIO).

    The second inequality must be < because the price can never reach
    the price at the max tick.
    """

    def __init__(self, sqrt_price_x96: int) -> None:
        super().__init__(
            f"The given sqrt price {sqrt_price_x96} is out of range, it "
            "must be at least MIN_SQRT_RATIO and less than MAX_SQRT_RATIO."
        )
        self.sqrt_price_x96 = sqrt_price_x96
