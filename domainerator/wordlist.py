#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
wordlist.py

词表工具模块，负责从文件加载前缀/后缀词表、解析逗号分隔列表，
并提供去重和UTF-8过滤等辅助函数。
"""

import os
import logging
from typing import Iterable, List

from .errors import WordListError

# 配置日志
logger = logging.getLogger("wordlist")


def trim_word(word: str) -> str:
    """去掉单词中的所有空白字符 ("wor d" -> "word")"""
    return "".join(word.split())


def remove_duplicates(words: Iterable[str]) -> List[str]:
    """
    去除重复项，保留首次出现的顺序

    参数:
        words: 单词序列

    返回:
        去重后的列表
    """
    seen = set()
    cleaned = []
    for word in words:
        if word not in seen:
            seen.add(word)
            cleaned.append(word)
    return cleaned


def filter_utf8(words: Iterable[str]) -> List[str]:
    """只保留纯ASCII的字符串 (字符数等于UTF-8字节数)"""
    return [word for word in words if len(word) == len(word.encode("utf-8"))]


def from_csv(csv: str) -> List[str]:
    """
    解析逗号分隔的字符串

    参数:
        csv: 形如 "com, net,,org" 的字符串

    返回:
        去掉空白与空项后的列表 (不去重，保持原顺序)
    """
    words = [trim_word(part) for part in csv.strip().split(",")]
    return [word for word in words if word]


def load(filepath: str) -> List[str]:
    """
    从文件加载词表

    每行一个单词，空行和以#开头的注释行会被跳过，
    单词统一转为小写并去重。

    参数:
        filepath: 词表文件路径

    返回:
        单词列表

    异常:
        WordListError: 文件不存在或无法读取
    """
    if not os.path.exists(filepath):
        logger.error(f"文件不存在: {filepath}")
        raise WordListError(f"找不到词表文件: {filepath}")

    words = []
    line_count = 0
    try:
        with open(filepath, "r", encoding="utf-8") as f:
            for line in f:
                line_count += 1
                word = trim_word(line).lower()
                if not word or word.startswith("#"):
                    continue
                words.append(word)
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"读取词表时出错: {e}")
        raise WordListError(f"无法读取词表文件 {filepath}: {e}") from e

    words = remove_duplicates(words)
    logger.info(f"词表加载完成: {filepath}，总行数: {line_count}，有效单词: {len(words)}")

    if not words:
        logger.warning(f"警告: 词表 {filepath} 中没有有效单词")

    return words
