#!/usr/bin/env python
# -*- codeing:utf-8 -*-

"""Fixed-width integer helpers.

Python ints have infinite bits, so every place where the on-chain code
relies on 256-bit wraparound has to reduce the result explicitly.
"""

__author__ = "XiaoHuiHui"
__version__ = "1.2"

UINT256_MAX = 2 ** 256 - 1
INT256_MAX = 2 ** 255 - 1
INT256_MIN = -(2 ** 255)
UINT32_MASK = 0xFFFFFFFF


def to_uint256(x: int) -> int:
    """Reinterpret ``x`` as an unsigned 256-bit word.

    Negative numbers come back in two's complement form.
    """
    return x & UINT256_MAX


def to_int256(x: int) -> int:
    """Reinterpret the low 256 bits of ``x`` as a signed word."""
    x &= UINT256_MAX
    return x - (1 << 256) if x > INT256_MAX else x


def wrapping_mul(a: int, b: int) -> int:
    # unsigned product modulo 2**256, the high half is dropped
    return to_uint256(a * b)


def wrapping_mul_signed(a: int, b: int) -> int:
    return to_int256(a * b)


def low_i32(x: int) -> int:
    """Return the low 32 bits of ``x`` as a signed 32-bit integer."""
    x &= UINT32_MASK
    return x - (1 << 32) if x > 0x7FFFFFFF else x
