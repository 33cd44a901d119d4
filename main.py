#!/usr/bin/env python
# -*- codeing:utf-8 -*-
"""Command line entry of the tick math.
"""

__author__ = "XiaoHuiHui"
__version__ = "1.2"

import argparse
import logging
import os
import sys
from logging import FileHandler, Formatter, StreamHandler
from typing import Optional

import ujson

import config as opts
import tickmath
from tickmath import MAX_TICK, MIN_TICK
from tickmath import get_sqrt_ratio_at_tick, get_tick_at_sqrt_ratio
from store import tick as tick_store

logger = logging.getLogger("main")

if not os.path.exists(opts.LOG_DIR):
    os.makedirs(opts.LOG_DIR)

sh = StreamHandler()
fh = FileHandler(
    os.path.join(opts.LOG_DIR, "main.log"), "a", encoding="utf-8"
)
fmt = Formatter(opts.LOG_FORMAT)
sh.setFormatter(fmt)
fh.setFormatter(fmt)

loggers = [
    logger,
    logging.getLogger("store"),
]

for app_logger in loggers:
    app_logger.addHandler(sh)
    app_logger.addHandler(fh)


def set_debug(debug: bool) -> None:
    level = logging.DEBUG if debug else logging.INFO
    sh.setLevel(level)
    fh.setLevel(level)
    for app_logger in loggers:
        app_logger.setLevel(level)
    tickmath.set_debug(debug)


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    par_main = argparse.ArgumentParser(
        prog="tickmath",
        description=" Convert between ticks and Q64.96 sqrt prices ",
    )
    par_main.add_argument(
        "--debug",
        action="store_true",
        help=" debug mode",
    )
    sub = par_main.add_subparsers(dest="command", required=True)

    par_price = sub.add_parser("price", help=" sqrt price of a tick ")
    par_price.add_argument("tick", type=int)

    par_tick = sub.add_parser("tick", help=" tick of a sqrt price ")
    par_tick.add_argument(
        "sqrt_price_x96",
        type=lambda s: int(s, 0),
        help="decimal or 0x prefixed hex",
    )

    par_table = sub.add_parser("table", help=" build a tick table ")
    par_table.add_argument("start", type=int)
    par_table.add_argument("end", type=int)
    par_table.add_argument("--step", type=int, default=opts.TABLE_STEP)
    par_table.add_argument(
        "-o",
        "--output",
        type=str,
        nargs="?",
        const=os.path.join(opts.DATA_DIR, opts.TABLE_FILE),
        help="write the table to a json file",
    )

    par_verify = sub.add_parser(
        "verify", help=" round trip every tick of a range "
    )
    par_verify.add_argument("--start", type=int, default=MIN_TICK)
    par_verify.add_argument("--end", type=int, default=MAX_TICK)

    return par_main.parse_args(argv)


def verify(start: int, end: int) -> bool:
    """Check that every tick in [start, end] survives a round trip and
    that the sqrt prices are strictly increasing.

    :raises ValueError: If the range is empty.
    """
    if start > end:
        raise ValueError(f"Empty tick range: {start} > {end}.")
    total = end - start + 1
    last = None
    for cnt, i in enumerate(range(start, end + 1), 1):
        sr = get_sqrt_ratio_at_tick(i)
        if last is not None and sr <= last:
            logger.error(f"Sqrt price is not increasing at tick {i}.")
            return False
        last = sr
        # the max tick price is outside the domain of the inverse
        if i != MAX_TICK and get_tick_at_sqrt_ratio(sr) != i:
            logger.error(f"Round trip failed at tick {i}.")
            return False
        if cnt % opts.PRINT_INTERVAL == 0:
            logger.info(f"Verified {cnt / total * 100:.2f}%")
    logger.info(f"Verified {total} ticks from {start} to {end}.")
    return True


def main(argv: Optional[list[str]] = None) -> int:
    args = parse_args(argv)
    set_debug(args.debug or opts.DEBUG)
    try:
        if args.command == "price":
            print(get_sqrt_ratio_at_tick(args.tick))
        elif args.command == "tick":
            print(get_tick_at_sqrt_ratio(args.sqrt_price_x96))
        elif args.command == "table":
            rows = tick_store.build_tick_table(
                args.start, args.end, args.step
            )
            if args.output:
                tick_store.write_tick_table(args.output, rows)
            else:
                print(ujson.dumps(rows, indent=4))
        elif args.command == "verify":
            if not verify(args.start, args.end):
                return 1
    except ValueError as err:
        logger.debug(f"Conversion failed: {err}")
        print(err, file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
