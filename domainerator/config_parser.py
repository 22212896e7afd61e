#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
config_parser.py

配置解析模块，负责读取 key = value 格式的配置文件，
与默认配置和命令行参数合并，并生成不可变的 Settings 对象。
"""

import os
import logging
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Tuple

from .checker import DEFAULT_DNS_SERVERS, DEFAULT_TIMEOUT, PROTOCOLS, validate_server
from .collector import DEFAULT_PROGRESS_INTERVAL
from .errors import ConfigError, InvalidOptionError, NoDnsServersError, UnknownProtocolError
from .generator import CombineOptions, DEFAULT_MAX_DOMAIN_LENGTH, DEFAULT_MIN_LABEL_LENGTH
from .scanner import DEFAULT_CONCURRENCY, DEFAULT_MAX_RETRIES, DEFAULT_RETRY_BACKOFF
from .suffixes import DEFAULT_PUBLIC_SUFFIXES
from .wordlist import from_csv

# 默认配置，键名与命令行参数一致
DEFAULT_CONFIG: Dict[str, Any] = {
    "single": False,
    "itself": False,
    "hyphen": False,
    "hacks": False,
    "fuse": False,
    "tlds": False,
    "utf8": False,
    "ps": DEFAULT_PUBLIC_SUFFIXES,
    "dns": DEFAULT_DNS_SERVERS,
    "proto": "udp",
    "maxlen": DEFAULT_MAX_DOMAIN_LENGTH,
    "minlen": DEFAULT_MIN_LABEL_LENGTH,
    "concurrency": DEFAULT_CONCURRENCY,
    "avail": True,
    "strict": True,
    "timeout": DEFAULT_TIMEOUT,
    "retries": DEFAULT_MAX_RETRIES,
    "backoff": DEFAULT_RETRY_BACKOFF,
    "progress": DEFAULT_PROGRESS_INTERVAL,
}

BOOL_KEYS = {"single", "itself", "hyphen", "hacks", "fuse", "tlds", "utf8", "avail", "strict"}
INT_KEYS = {"maxlen", "minlen", "concurrency", "retries"}
FLOAT_KEYS = {"timeout", "backoff", "progress"}
STR_KEYS = {"ps", "dns", "proto"}

# 配置文件中允许的别名
ALIASES = {"c": "concurrency"}

TRUE_VALUES = {"1", "true", "yes", "on"}
FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class Settings:
    """一次运行的完整配置，启动时构建一次后不再修改"""
    prefixes_path: str
    suffixes_path: str
    output_path: str
    single: bool
    itself: bool
    hyphenate: bool
    hacks: bool
    fuse: bool
    include_tlds: bool
    allow_utf8: bool
    public_suffixes: Tuple[str, ...]
    dns_servers: Tuple[str, ...]
    protocol: str
    max_length: int
    min_length: int
    concurrency: int
    available_only: bool
    strict: bool
    timeout: float
    max_retries: Optional[int]
    retry_backoff: float
    progress_interval: float

    def combine_options(self) -> CombineOptions:
        """生成器使用的组合选项"""
        return CombineOptions(
            include_single_words=self.single,
            hyphenate=self.hyphenate,
            include_self_pairing=self.itself,
            domain_hacks=self.hacks,
            fuse=self.fuse,
            min_label_length=self.min_length,
            max_domain_length=self.max_length,
            allow_utf8=self.allow_utf8,
            strict=self.strict,
        )


def parse_bool(key: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in TRUE_VALUES:
        return True
    if lowered in FALSE_VALUES:
        return False
    raise InvalidOptionError(f"无效的{key}值: {value}")


class ConfigParser:
    """配置解析器类，处理配置文件的读取和验证"""

    def __init__(self, config_path: Optional[str] = None):
        """
        初始化配置解析器

        参数:
            config_path: 配置文件路径，None表示只使用默认配置
        """
        self.config_path = config_path
        self.logger = logging.getLogger("config")
        self.config = DEFAULT_CONFIG.copy()

    def parse_config(self) -> Dict[str, Any]:
        """
        解析配置文件

        返回:
            配置字典

        异常:
            ConfigError: 配置文件不存在或无法读取
        """
        if self.config_path is None:
            return self.config

        if not os.path.exists(self.config_path):
            raise ConfigError(f"配置文件 {self.config_path} 不存在")

        self.logger.info(f"正在读取配置文件: {self.config_path}")
        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                for line_number, line in enumerate(f, 1):
                    line = line.strip()
                    # 跳过空行和注释
                    if not line or line.startswith('#'):
                        continue

                    if '=' not in line:
                        self.logger.warning(f"无法解析配置行 {line_number}: {line}")
                        continue

                    key, value = [part.strip() for part in line.split('=', 1)]
                    self._process_config_item(key, value)
        except OSError as e:
            raise ConfigError(f"读取配置文件时出错: {e}") from e

        return self.config

    def _process_config_item(self, key: str, value: str) -> None:
        """
        处理单个配置项

        参数:
            key: 配置键
            value: 配置值字符串
        """
        key = ALIASES.get(key, key)

        if key in BOOL_KEYS:
            self.config[key] = parse_bool(key, value)
        elif key in INT_KEYS:
            try:
                self.config[key] = int(value)
            except ValueError:
                raise InvalidOptionError(f"无效的{key}值: {value}")
        elif key in FLOAT_KEYS:
            try:
                self.config[key] = float(value)
            except ValueError:
                raise InvalidOptionError(f"无效的{key}值: {value}")
        elif key in STR_KEYS:
            self.config[key] = value
        else:
            self.logger.warning(f"未知配置项: {key}")


def merge_config(config: Mapping[str, Any], overrides: Mapping[str, Any]) -> Dict[str, Any]:
    """命令行中显式给出(非None)的参数覆盖配置文件"""
    merged = dict(config)
    for key, value in overrides.items():
        if value is not None:
            merged[ALIASES.get(key, key)] = value
    return merged


def build_settings(prefixes_path: str, suffixes_path: str, output_path: str,
                   config: Mapping[str, Any]) -> Settings:
    """
    校验配置并构建 Settings

    参数:
        prefixes_path: 前缀词表路径
        suffixes_path: 后缀词表路径
        output_path: 输出文件路径
        config: 合并后的配置字典

    返回:
        不可变的 Settings 对象

    异常:
        NoDnsServersError: 没有配置DNS服务器
        UnknownProtocolError: 协议不是udp或tcp
        InvalidOptionError: 数值参数超出范围或DNS服务器地址无效
    """
    dns_servers = tuple(from_csv(config["dns"]))
    if not dns_servers:
        raise NoDnsServersError("需要指定至少一个DNS服务器")
    for server in dns_servers:
        validate_server(server)

    protocol = str(config["proto"]).strip().lower()
    if protocol not in PROTOCOLS:
        raise UnknownProtocolError(f"未知的协议: {config['proto']}，可选: {', '.join(PROTOCOLS)}")

    if config["maxlen"] < 1:
        raise InvalidOptionError(f"maxlen 必须大于0: {config['maxlen']}")
    if config["minlen"] < 0:
        raise InvalidOptionError(f"minlen 不能为负数: {config['minlen']}")
    if config["concurrency"] < 1:
        raise InvalidOptionError(f"并发数必须大于0: {config['concurrency']}")
    if config["timeout"] <= 0:
        raise InvalidOptionError(f"超时时间必须大于0: {config['timeout']}")
    if config["backoff"] < 0:
        raise InvalidOptionError(f"退避时间不能为负数: {config['backoff']}")

    retries = config["retries"]
    max_retries = None if retries < 0 else retries

    return Settings(
        prefixes_path=prefixes_path,
        suffixes_path=suffixes_path,
        output_path=output_path,
        single=config["single"],
        itself=config["itself"],
        hyphenate=config["hyphen"],
        hacks=config["hacks"],
        fuse=config["fuse"],
        include_tlds=config["tlds"],
        allow_utf8=config["utf8"],
        public_suffixes=tuple(from_csv(config["ps"])),
        dns_servers=dns_servers,
        protocol=protocol,
        max_length=config["maxlen"],
        min_length=config["minlen"],
        concurrency=config["concurrency"],
        available_only=config["avail"],
        strict=config["strict"],
        timeout=config["timeout"],
        max_retries=max_retries,
        retry_backoff=config["backoff"],
        progress_interval=config["progress"],
    )
