#!/usr/bin/env python
# -*- codeing:utf-8 -*-

"""A implementation of tick table data store module.

A tick table is a json list of rows like
``{"tick": -887272, "sqrt_price_x96": "4295128739"}``. The sqrt price is
kept as a decimal string since it does not fit in a json number.
"""

__author__ = "XiaoHuiHui"
__version__ = "1.2"

import logging
import os
from typing import Any

import ujson

from tickmath import get_sqrt_ratio_at_tick

logger = logging.getLogger("store.tick")

TickRow = dict[str, Any]


def build_tick_table(start: int, end: int, step: int = 1) -> list[TickRow]:
    """Return the rows of every ``step``-th tick from ``start`` to
    ``end``, both ends inclusive.

    :raises TickOutOfRange: If a tick of the range is out of bounds.
    """
    if step <= 0:
        raise ValueError(f"Invalid step: {step}.")
    return [
        {"tick": tick, "sqrt_price_x96": str(get_sqrt_ratio_at_tick(tick))}
        for tick in range(start, end + 1, step)
    ]


def write_tick_table(path: str, rows: list[TickRow]) -> None:
    folder = os.path.dirname(path)
    if folder and not os.path.exists(folder):
        os.makedirs(folder)
    with open(path, "w") as wf:
        ujson.dump(rows, wf, ensure_ascii=False, indent=4)
    logger.info(f"Wrote {len(rows)} rows to {path}.")


def read_tick_table(path: str) -> list[tuple[int, int]]:
    """Load a tick table written by :func:`write_tick_table`.

    :param str path: The path of the json file.
    :return list[tuple[int, int]]: (tick, sqrt_price_x96) pairs.
    :raises ValueError: If the content is not a list of tick rows.
    """
    with open(path, "r") as rf:
        d = ujson.load(rf)
    if not isinstance(d, list):
        raise ValueError(f"Tick table {path} is not a list.")
    result = []
    for row in d:
        if not isinstance(row, dict) \
                or "tick" not in row or "sqrt_price_x96" not in row:
            raise ValueError(f"Invalid row in tick table {path}: {row}.")
        tick = row["tick"]
        sqrt_price = row["sqrt_price_x96"]
        # bool is a subclass of int
        if not isinstance(tick, int) or isinstance(tick, bool) \
                or not isinstance(sqrt_price, (int, str)) \
                or isinstance(sqrt_price, bool):
            raise ValueError(f"Invalid row in tick table {path}: {row}.")
        try:
            result.append((tick, int(sqrt_price)))
        except ValueError:
            raise ValueError(
                f"Invalid sqrt price in tick table {path}: {row}."
            )
    logger.info(f"Read {len(result)} rows from {path}.")
    return result
