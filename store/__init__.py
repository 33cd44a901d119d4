#!/usr/bin/env python
# -*- codeing:utf-8 -*-

"""Data store modules.
"""

__author__ = "XiaoHuiHui"
__version__ = "1.2"
