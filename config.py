#!/usr/bin/env python
# -*- codeing:utf-8 -*-

"""
"""

__author__ = "XiaoHuiHui"
__version__ = "1.2"

# Logging config
DEBUG = False
LOG_DIR = "./logs"
LOG_FORMAT = "%(asctime)s [%(name)s][%(levelname)s] %(message)s"
# Tick table config
DATA_DIR = "./datas"
TABLE_FILE = "tick_table.json"
TABLE_STEP = 1
# Verify config
PRINT_INTERVAL = 10000
