#!/usr/bin/env python
# -*- codeing:utf-8 -*-

"""Integer-only tick math of a concentrated liquidity AMM.

Converts a tick index into a Q64.96 sqrt price and back, matching the
on-chain TickMath library bit-for-bit.
"""

__author__ = "XiaoHuiHui"
__version__ = "1.2"

import logging
import os
from logging import FileHandler, Formatter, StreamHandler

import config as opts

if not os.path.exists(opts.LOG_DIR):
    os.makedirs(opts.LOG_DIR)

from .constants import MAX_SQRT_RATIO, MAX_TICK, MIN_SQRT_RATIO, MIN_TICK
from .errors import PriceOutOfRange, TickMathError, TickOutOfRange
from .tick import get_sqrt_ratio_at_tick, get_tick_at_sqrt_ratio

sh = StreamHandler()
fh = FileHandler(
    os.path.join(opts.LOG_DIR, "tickmath.log"), "a", encoding="utf-8"
)
fmt = Formatter(opts.LOG_FORMAT)
sh.setFormatter(fmt)
fh.setFormatter(fmt)

logger = logging.getLogger("tickmath")
logger.addHandler(sh)
logger.addHandler(fh)


def set_debug(debug: bool) -> None:
    level = logging.DEBUG if debug else logging.INFO
    sh.setLevel(level)
    fh.setLevel(level)
    logger.setLevel(level)


set_debug(opts.DEBUG)

__all__ = [
    "MIN_TICK",
    "MAX_TICK",
    "MIN_SQRT_RATIO",
    "MAX_SQRT_RATIO",
    "TickMathError",
    "TickOutOfRange",
    "PriceOutOfRange",
    "get_sqrt_ratio_at_tick",
    "get_tick_at_sqrt_ratio",
    "set_debug",
]
