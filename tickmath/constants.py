#!/usr/bin/env python
# -*- codeing:utf-8 -*-

"""Bounds and magic numbers of the tick math.

These are protocol constants and must be kept bit-for-bit identical to
the on-chain values.
"""

__author__ = "XiaoHuiHui"
__version__ = "1.2"

MIN_TICK = -887272
MAX_TICK = -MIN_TICK
# get_sqrt_ratio_at_tick(MIN_TICK) and get_sqrt_ratio_at_tick(MAX_TICK)
MIN_SQRT_RATIO = 4295128739
MAX_SQRT_RATIO = 1461446703485210103287273052203988822378723970342

# 1.0 in Q128.128
Q128 = 0x100000000000000000000000000000000

# MAGIC_RATIOS[i] is 1 / sqrt(1.0001) ** (2 ** i) in Q128.128, the factor
# applied when bit i of the absolute tick is set
MAGIC_RATIOS = (
    0xfffcb933bd6fad37aa2d162d1a594001,
    0xfff97272373d413259a46990580e213a,
    0xfff2e50f5f656932ef12357cf3c7fdcc,
    0xffe5caca7e10e4e61c3624eaa0941cd0,
    0xffcb9843d60f6159c9db58835c926644,
    0xff973b41fa98c081472e6896dfb254c0,
    0xff2ea16466c96a3843ec78b326b52861,
    0xfe5dee046a99a2a811c461f1969c3053,
    0xfcbe86c7900a88aedcffc83b479aa3a4,
    0xf987a7253ac413176f2b074cf7815e54,
    0xf3392b0822b70005940c7a398e4b70f3,
    0xe7159475a2c29b7443b29c7fa6e889d9,
    0xd097f3bdfd2022b8845ad8f792aa5825,
    0xa9f746462d870fdf8a65dc1f90e061e5,
    0x70d869a156d2a1b890bb3df62baf32f7,
    0x31be135f97d08fd981231505542fcfa6,
    0x9aa508b5b7a84e1c677de54f3e99bc9,
    0x5d6af8dedb81196699c329225ee604,
    0x2216e584f5fa1ea926041bedfe98,
    0x48a170391f7dc42444e8fa2,
)

# 2 ** 64 / log2(sqrt(1.0001)), turns the Q64 log2 into a Q128 tick
SQRT_10001 = 255738958999603826347141
# error bounds of the log approximation in Q128
TICK_LOW_ERR = 3402992956809132418596140100660247210
TICK_HIGH_ERR = 291339464771989622907027621153398088495
