#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
generator.py

域名生成器模块，将前缀词表、后缀词表与公共后缀组合成候选域名。
支持单词直组、连字符、自身组合、域名黑客(domain hack)和重叠融合，
并按长度、字符集和注册商限制过滤，输出去重且有序的域名列表。
"""

import logging
from dataclasses import dataclass
from typing import Iterable, List, Mapping, Optional, Sequence

from .errors import EmptyWordListError, NoDomainsError
from .psl_data import PUBLIC_SUFFIXES
from .wordlist import filter_utf8

# 配置日志
logger = logging.getLogger("generator")

DEFAULT_MIN_LABEL_LENGTH = 3
DEFAULT_MAX_DOMAIN_LENGTH = 64
MAX_FUSE_OVERLAP = 2


@dataclass(frozen=True)
class CombineOptions:
    """组合选项"""
    include_single_words: bool = False
    hyphenate: bool = False
    include_self_pairing: bool = False
    domain_hacks: bool = False
    fuse: bool = False
    min_label_length: int = DEFAULT_MIN_LABEL_LENGTH
    max_domain_length: int = DEFAULT_MAX_DOMAIN_LENGTH
    allow_utf8: bool = False
    strict: bool = True


def combine_phrase_and_public_suffixes(phrase: str, psl: Sequence[str], hacks: bool,
                                       min_label_length: int = 0) -> List[str]:
    """
    将一个短语与所有公共后缀组合

    启用hacks时，若短语以某个后缀结尾，额外生成截断后的域名，
    例如 "index" 与 "ex" 生成 "ind.ex"。

    参数:
        phrase: 域名主体
        psl: 公共后缀列表
        hacks: 是否生成域名黑客形式
        min_label_length: 截断后主体的最小长度

    返回:
        域名列表
    """
    domains = []
    for ps in psl:
        domains.append(f"{phrase}.{ps}")
        if hacks and len(phrase) > len(ps) and phrase.endswith(ps):
            label = phrase[:-len(ps)]
            if len(label) >= min_label_length and not label.endswith("-"):
                domains.append(f"{label}.{ps}")
    return domains


def fuse_words(prefix: str, suffix: str) -> List[str]:
    """
    融合前缀尾部与后缀头部重叠的1~2个字符

    例如 "soft" + "tea" -> "softea"，"data" + "table" -> "datable"。
    """
    fused = []
    for overlap in range(1, MAX_FUSE_OVERLAP + 1):
        if len(prefix) <= overlap or len(suffix) <= overlap:
            break
        if prefix[-overlap:] == suffix[:overlap]:
            fused.append(prefix + suffix[overlap:])
    return fused


def combine_prefix_and_suffix(prefix: str, suffix: str, itself: bool = False,
                              hyphenate: bool = False, fuse: bool = False) -> List[str]:
    """
    组合两个单词，后缀永远在前缀之后

    参数:
        prefix: 前缀单词
        suffix: 后缀单词
        itself: 是否允许单词与自身组合
        hyphenate: 是否额外生成连字符形式
        fuse: 是否额外生成重叠融合形式

    返回:
        组合后的短语列表
    """
    if prefix == suffix and not itself:
        return []
    phrases = [prefix + suffix]
    if hyphenate:
        phrases.append(f"{prefix}-{suffix}")
    if fuse:
        phrases.extend(fuse_words(prefix, suffix))
    return phrases


def filter_max_length(domains: Iterable[str], max_length: int) -> List[str]:
    """过滤超过最大长度(按字符数计)的域名"""
    return [domain for domain in domains if len(domain) <= max_length]


def filter_prohibited(domains: Iterable[str], known: Mapping[str, bool]) -> List[str]:
    """过滤主体部分本身就是公共后缀的域名 (如 com.net)，注册商不允许注册"""
    return [domain for domain in domains if domain.split(".", 1)[0] not in known]


def combine(prefixes: Sequence[str], suffixes: Sequence[str], psl: Sequence[str],
            options: Optional[CombineOptions] = None,
            known: Optional[Mapping[str, bool]] = None) -> List[str]:
    """
    组合词表与公共后缀，生成最终的候选域名列表

    参数:
        prefixes: 前缀词表
        suffixes: 后缀词表
        psl: 已校验的公共后缀列表
        options: 组合选项
        known: 已知公共后缀表，用于strict过滤

    返回:
        去重并按字典序排序的域名列表

    异常:
        EmptyWordListError: 前缀和后缀词表都为空
        NoDomainsError: 过滤后没有任何候选域名
    """
    if options is None:
        options = CombineOptions()
    if known is None:
        known = PUBLIC_SUFFIXES

    if not prefixes and not suffixes:
        raise EmptyWordListError("前缀和后缀词表都为空")

    candidates = set()

    if options.include_single_words:
        for word in list(prefixes) + list(suffixes):
            candidates.update(combine_phrase_and_public_suffixes(word, psl, options.domain_hacks))

    for prefix in prefixes:
        for suffix in suffixes:
            phrases = combine_prefix_and_suffix(prefix, suffix,
                                                itself=options.include_self_pairing,
                                                hyphenate=options.hyphenate,
                                                fuse=options.fuse)
            for phrase in phrases:
                if len(phrase) < options.min_label_length:
                    continue
                candidates.update(combine_phrase_and_public_suffixes(
                    phrase, psl, options.domain_hacks, options.min_label_length))

    domains = filter_max_length(sorted(candidates), options.max_domain_length)
    if not options.allow_utf8:
        domains = filter_utf8(domains)
    if options.strict:
        domains = filter_prohibited(domains, known)

    if not domains:
        raise NoDomainsError("过滤后没有生成任何域名")

    return domains


class DomainGenerator:
    """域名生成器类，持有组合选项和已知后缀表"""

    def __init__(self, options: Optional[CombineOptions] = None,
                 known: Optional[Mapping[str, bool]] = None):
        """
        初始化域名生成器

        参数:
            options: 组合选项
            known: 已知公共后缀表，默认为内置表
        """
        self.options = options or CombineOptions()
        self.known = PUBLIC_SUFFIXES if known is None else known

    def generate(self, prefixes: Sequence[str], suffixes: Sequence[str],
                 psl: Sequence[str]) -> List[str]:
        """生成候选域名，见 combine"""
        logger.info(f"开始生成域名: 前缀 {len(prefixes)} 个，后缀 {len(suffixes)} 个，"
                    f"公共后缀 {len(psl)} 个")
        domains = combine(prefixes, suffixes, psl, self.options, self.known)
        logger.info(f"域名生成完成，共 {len(domains)} 个候选域名")
        return domains
