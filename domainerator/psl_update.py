#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
psl_update.py

公共后缀表更新工具，从 publicsuffix.org 下载最新的公共后缀列表，
生成 psl_data.py 模块。离线使用，扫描时不会访问网络。
"""

import os
import sys
import logging
import argparse
from typing import Iterable, List, Optional

import requests

from .wordlist import remove_duplicates

logger = logging.getLogger("psl_update")

PSL_URL = "https://publicsuffix.org/list/public_suffix_list.dat"
DEFAULT_OUTPUT = os.path.join(os.path.dirname(os.path.abspath(__file__)), "psl_data.py")
USER_AGENT = "Domainerator/1.0 (public suffix list updater)"

MODULE_HEADER = """# -*- coding: utf-8 -*-
# 此文件由 domainerator-update-psl 自动生成，请勿手工修改。
# 来源: {url}

PUBLIC_SUFFIXES = {{
"""


def fetch_public_suffix_list(url: str = PSL_URL, session: Optional[requests.Session] = None,
                             timeout: int = 30) -> str:
    """
    下载公共后缀列表

    参数:
        url: 列表地址
        session: 可复用的requests会话
        timeout: 请求超时时间(秒)

    返回:
        列表文本
    """
    session = session or requests.Session()
    logger.info(f"正在下载公共后缀列表: {url}")
    response = session.get(url, headers={'User-Agent': USER_AGENT}, timeout=timeout)
    response.raise_for_status()
    response.encoding = 'utf-8'
    return response.text


def parse_public_suffix_list(text: str) -> List[str]:
    """
    解析公共后缀列表文本

    跳过空行、// 注释和 ! 例外规则，通配规则 "*.ck" 记为 "ck"。
    """
    suffixes = []
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith("//") or line.startswith("!"):
            continue
        if line.startswith("*."):
            line = line[2:]
        suffixes.append(line.split()[0].lower())
    return remove_duplicates(suffixes)


def render_module(suffixes: Iterable[str], url: str = PSL_URL) -> str:
    """生成 psl_data.py 的源码"""
    lines = [MODULE_HEADER.format(url=url)]
    for suffix in sorted(set(suffixes)):
        lines.append(f'    "{suffix}": True,\n')
    lines.append("}\n")
    return "".join(lines)


def main(argv: Optional[List[str]] = None) -> int:
    """命令行入口: 下载列表并写入 psl_data.py"""
    parser = argparse.ArgumentParser(description="更新内置的公共后缀表")
    parser.add_argument("-o", "--output", default=DEFAULT_OUTPUT,
                        help="生成的模块路径 ('-' 表示标准输出)")
    parser.add_argument("--url", default=PSL_URL, help="公共后缀列表地址")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO,
                        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')

    try:
        suffixes = parse_public_suffix_list(fetch_public_suffix_list(args.url))
    except requests.RequestException as e:
        logger.error(f"下载公共后缀列表失败: {e}")
        return 1

    source = render_module(suffixes, args.url)
    if args.output == "-":
        sys.stdout.write(source)
    else:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(source)
        logger.info(f"已写入 {len(suffixes)} 个公共后缀到 {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
