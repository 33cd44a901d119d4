#!/usr/bin/env python
# -*- codeing:utf-8 -*-

"""Conversions between ticks and sqrt prices.

A tick ``t`` corresponds to the price ``1.0001 ** t``, and the sqrt price
is stored as a Q64.96 number, ``sqrt(1.0001 ** t) * 2 ** 96``. Both
directions only use integer shifts, multiplies and bit tests, so the
results agree bit-for-bit with the on-chain implementation.
"""

__author__ = "XiaoHuiHui"
__version__ = "1.2"

import logging

from .base import UINT256_MAX, low_i32, wrapping_mul, wrapping_mul_signed
from .constants import MAGIC_RATIOS, MAX_SQRT_RATIO, MAX_TICK
from .constants import MIN_SQRT_RATIO, Q128, SQRT_10001
from .constants import TICK_HIGH_ERR, TICK_LOW_ERR
from .errors import PriceOutOfRange, TickOutOfRange

logger = logging.getLogger("tickmath.tick")

# (threshold, width) pairs of the binary search for the most significant
# bit, from 128 bits down to 2 bits
MSB_STEPS = tuple(
    ((1 << (1 << k)) - 1, 1 << k) for k in range(7, 0, -1)
)
# bit positions of the fractional log2 extracted by repeated squaring
LOG2_BITS = range(63, 49, -1)


def get_sqrt_ratio_at_tick(tick: int) -> int:
    """Calculates sqrt(1.0001 ** tick) * 2 ** 96.

    :param int tick: The input tick for the above formula.
    :return int: A Q64.96 number representing the sqrt of the ratio of
        the two assets (token1/token0) at the given tick.
    :raises TickOutOfRange: If ``|tick| > MAX_TICK``.
    """
    abs_tick = -tick if tick < 0 else tick
    if abs_tick > MAX_TICK:
        logger.debug(f"Rejected tick {tick}.")
        raise TickOutOfRange(tick)

    ratio = MAGIC_RATIOS[0] if abs_tick & 0x1 != 0 else Q128
    for i in range(1, len(MAGIC_RATIOS)):
        if abs_tick & (1 << i) != 0:
            ratio = wrapping_mul(ratio, MAGIC_RATIOS[i]) >> 128

    # the table holds the ratios of negative ticks
    if tick > 0:
        ratio = UINT256_MAX // ratio

    # this divides by 1<<32 rounding up to go from a Q128.128 to a Q128.96.
    # we then downcast because we know the result always fits within 160 bits
    # due to our tick input constraint
    # we round up in the division so get_tick_at_sqrt_ratio of the output
    # price is always consistent
    return (ratio >> 32) + (0 if ratio % (1 << 32) == 0 else 1)


def get_tick_at_sqrt_ratio(sqrt_price_x96: int) -> int:
    """Calculates the greatest tick value such that
    get_sqrt_ratio_at_tick(tick) <= sqrt_price_x96.

    :param int sqrt_price_x96: The sqrt ratio for which to compute the
        tick as a Q64.96.
    :return int: The greatest tick for which the ratio is less than or
        equal to the input ratio.
    :raises PriceOutOfRange: If the price is not inside
        [MIN_SQRT_RATIO, MAX_SQRT_RATIO).
    """
    # second inequality must be < because the price can never reach the
    # price at the max tick
    if not MIN_SQRT_RATIO <= sqrt_price_x96 < MAX_SQRT_RATIO:
        logger.debug(f"Rejected sqrt price {sqrt_price_x96}.")
        raise PriceOutOfRange(sqrt_price_x96)
    ratio = sqrt_price_x96 << 32

    r = ratio
    msb = 0
    for threshold, width in MSB_STEPS:
        f = width if r > threshold else 0
        msb |= f
        r >>= f
    msb |= 1 if r > 0x1 else 0

    if msb >= 128:
        r = ratio >> (msb - 127)
    else:
        r = ratio << (127 - msb)

    log_2 = (msb - 128) << 64

    for bit in LOG2_BITS:
        r = wrapping_mul(r, r) >> 127
        f = r >> 128
        log_2 |= f << bit
        r >>= f

    # 128.128 number
    log_sqrt10001 = wrapping_mul_signed(log_2, SQRT_10001)

    tick_low = low_i32((log_sqrt10001 - TICK_LOW_ERR) >> 128)
    tick_high = low_i32((log_sqrt10001 + TICK_HIGH_ERR) >> 128)

    if tick_low == tick_high:
        return tick_low
    if get_sqrt_ratio_at_tick(tick_high) <= sqrt_price_x96:
        return tick_high
    return tick_low
