#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
domainerator

组合词表与公共后缀生成候选域名，并通过DNS NS查询并发检测其可用性。
"""

PROGRAM_NAME = "Domainerator"
VERSION = "1.0.0"
DESCRIPTION = "基于DNS NS查询的域名组合生成与可用性扫描工具"

__version__ = VERSION
