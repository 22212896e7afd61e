#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
suffixes.py

公共后缀(Public Suffix)处理模块，根据已知后缀表校验用户指定的后缀，
可选地扩展为全部顶级域名。
"""

import logging
from typing import Dict, Iterable, List, Mapping, Optional

from .errors import UnknownSuffixError
from .psl_data import PUBLIC_SUFFIXES
from .wordlist import remove_duplicates

logger = logging.getLogger("suffixes")

# 默认组合的公共后缀
DEFAULT_PUBLIC_SUFFIXES = "com,net,org,info,biz,in,us,me,co,ca,mobi,de,eu,ws,tk,es,it,nl,be"


def known_suffixes() -> Dict[str, bool]:
    """返回内置的已知公共后缀表"""
    return PUBLIC_SUFFIXES


def top_level_suffixes(accepted: Mapping[str, bool]) -> List[str]:
    """已知后缀中所有单标签(不含点)的条目"""
    return [ps for ps, ok in accepted.items() if ok and "." not in ps]


def resolve_public_suffixes(names: Iterable[str],
                            accepted: Optional[Mapping[str, bool]] = None,
                            include_tlds: bool = False) -> List[str]:
    """
    校验并整理公共后缀列表

    参数:
        names: 用户指定的后缀 (如 ["com", "co.uk"])
        accepted: 已知后缀表，默认为内置表
        include_tlds: 是否追加全部顶级域名

    返回:
        去重并排序后的后缀列表

    异常:
        UnknownSuffixError: 列表为空或包含未知后缀
    """
    if accepted is None:
        accepted = PUBLIC_SUFFIXES

    psl = [name.strip().lstrip(".").lower() for name in names]
    psl = [ps for ps in psl if ps]
    if not psl:
        raise UnknownSuffixError("公共后缀列表为空")

    for ps in psl:
        if not accepted.get(ps, False):
            raise UnknownSuffixError(f"Public Suffix {ps!r} is unknown")

    if include_tlds:
        psl.extend(top_level_suffixes(accepted))

    psl = sorted(remove_duplicates(psl))
    logger.debug(f"公共后缀: {', '.join(psl)}")
    return psl
