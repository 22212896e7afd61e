#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
errors.py

异常定义与进程退出码。配置、词表、输出等致命错误都继承自
DomaineratorError，并携带命令行应返回的退出码。
"""

from typing import Optional

# 退出码
EXIT_OK = 0
EXIT_UNEXPECTED = 1
EXIT_USAGE = 2
EXIT_CONFIG = 3
EXIT_PREFIXES = 10
EXIT_SUFFIXES = 11
EXIT_EMPTY_WORDLISTS = 12
EXIT_UNKNOWN_SUFFIX = 20
EXIT_NO_DNS = 30
EXIT_UNKNOWN_PROTOCOL = 31
EXIT_INVALID_OPTION = 32
EXIT_OUTPUT_CREATE = 40
EXIT_OUTPUT_WRITE = 41
EXIT_NO_DOMAINS = 50
EXIT_INTERRUPTED = 130


class DomaineratorError(Exception):
    """所有致命错误的基类"""

    exit_code = EXIT_UNEXPECTED

    def __init__(self, message: str, exit_code: Optional[int] = None):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class ConfigError(DomaineratorError):
    exit_code = EXIT_CONFIG


class InvalidOptionError(ConfigError):
    exit_code = EXIT_INVALID_OPTION


class WordListError(DomaineratorError):
    exit_code = EXIT_PREFIXES


class EmptyWordListError(DomaineratorError):
    exit_code = EXIT_EMPTY_WORDLISTS


class UnknownSuffixError(DomaineratorError):
    exit_code = EXIT_UNKNOWN_SUFFIX


class NoDnsServersError(ConfigError):
    exit_code = EXIT_NO_DNS


class UnknownProtocolError(ConfigError):
    exit_code = EXIT_UNKNOWN_PROTOCOL


class OutputError(DomaineratorError):
    exit_code = EXIT_OUTPUT_WRITE


class NoDomainsError(DomaineratorError):
    exit_code = EXIT_NO_DOMAINS


class QueryError(Exception):
    """单次DNS查询失败(网络错误或超时)，由工作线程决定是否重试"""

    retryable = True

    def __init__(self, domain: str, server: Optional[str], cause: object):
        self.domain = domain
        self.server = server
        self.cause = cause
        super().__init__(f"查询 {domain} (DNS {server}) 失败: {cause}")


class InvalidDomainError(QueryError):
    """域名无法编码为DNS报文，重试没有意义"""

    retryable = False
