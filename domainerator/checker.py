#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
checker.py

DNS可用性检测模块，对单个域名发起NS记录查询并返回响应码。
响应码为NXDOMAIN的域名视为可能可以注册。
"""

import random
import logging
from dataclasses import dataclass
from typing import Optional, Sequence

import dns.exception
import dns.inet
import dns.message
import dns.name
import dns.query
import dns.rcode
import dns.rdatatype

from .errors import (InvalidDomainError, InvalidOptionError, NoDnsServersError, QueryError,
                     UnknownProtocolError)

# 配置日志
logger = logging.getLogger("checker")

DEFAULT_DNS_SERVERS = "8.8.8.8,8.8.4.4,1.1.1.1,1.0.0.1,9.9.9.9,149.112.112.112,208.67.222.222,208.67.220.220"
DEFAULT_TIMEOUT = 3.0
DEFAULT_PORT = 53
PROTOCOLS = ("udp", "tcp")

FAILED = "FAILED"


def validate_server(server: str) -> str:
    """
    校验DNS服务器地址

    参数:
        server: IPv4或IPv6地址 (不含端口)

    返回:
        原地址

    异常:
        InvalidOptionError: 不是合法的IP地址
    """
    try:
        dns.inet.af_for_address(server)
    except ValueError as e:
        raise InvalidOptionError(f"无效的DNS服务器地址: {server}，需要IPv4或IPv6地址") from e
    return server


@dataclass(frozen=True)
class QueryResult:
    """一个域名的最终查询结果"""
    domain: str
    rcode: Optional[int]
    error: Optional[str] = None
    attempts: int = 1

    @classmethod
    def failure(cls, domain: str, error: str, attempts: int) -> "QueryResult":
        """重试耗尽或域名无效时的终止结果"""
        return cls(domain=domain, rcode=None, error=error, attempts=attempts)

    @property
    def failed(self) -> bool:
        return self.rcode is None

    @property
    def available(self) -> bool:
        """响应码为NXDOMAIN时域名可能可以注册"""
        return self.rcode == dns.rcode.NXDOMAIN

    @property
    def rcode_name(self) -> str:
        if self.rcode is None:
            return FAILED
        return dns.rcode.to_text(self.rcode)

    def format(self, simple: bool) -> str:
        """
        格式化为输出文件中的一行

        参数:
            simple: True时只输出域名

        返回:
            "domain\\n" 或 "domain\\tRCODE\\t\\"error\\"\\n"
        """
        if simple:
            return f"{self.domain}\n"
        error = (self.error or "").replace("\\", "\\\\").replace('"', '\\"')
        return f'{self.domain}\t{self.rcode_name}\t"{error}"\n'


class DnsChecker:
    """DNS NS查询客户端，每次查询随机选择一个DNS服务器"""

    def __init__(self, servers: Sequence[str], protocol: str = "udp",
                 timeout: float = DEFAULT_TIMEOUT, port: int = DEFAULT_PORT):
        """
        初始化DNS检测器

        参数:
            servers: DNS服务器地址列表
            protocol: 传输协议 udp 或 tcp
            timeout: 单次查询超时时间(秒)
            port: DNS服务器端口
        """
        servers = [server.strip() for server in servers if server.strip()]
        if not servers:
            raise NoDnsServersError("需要指定至少一个DNS服务器")
        if protocol not in PROTOCOLS:
            raise UnknownProtocolError(f"未知的协议: {protocol}，可选: {', '.join(PROTOCOLS)}")
        for server in servers:
            validate_server(server)

        self.servers = servers
        self.protocol = protocol
        self.timeout = timeout
        self.port = port

        logger.info(f"DNS检测器初始化完成，协议: {protocol}，服务器: {', '.join(servers)}")

    def pick_server(self) -> str:
        """随机选择一个DNS服务器，避免长期绑定到故障的解析器"""
        return random.choice(self.servers)

    def query(self, domain: str, server: Optional[str] = None) -> int:
        """
        查询域名的NS记录

        参数:
            domain: 完整域名 (例如: 'example.com')
            server: 指定DNS服务器，默认随机选择

        返回:
            DNS响应码 (dns.rcode.NOERROR, dns.rcode.NXDOMAIN 等)

        异常:
            InvalidDomainError: 域名无法编码为DNS查询
            QueryError: 网络错误或超时
        """
        if server is None:
            server = self.pick_server()

        try:
            qname = dns.name.from_text(domain)
        except dns.exception.DNSException as e:
            raise InvalidDomainError(domain, server, e) from e

        message = dns.message.make_query(qname, dns.rdatatype.NS)

        try:
            if self.protocol == "tcp":
                response = dns.query.tcp(message, server, timeout=self.timeout, port=self.port)
            else:
                response = dns.query.udp(message, server, timeout=self.timeout, port=self.port)
        except (dns.exception.DNSException, OSError) as e:
            raise QueryError(domain, server, e) from e

        rcode = response.rcode()
        logger.debug(f"{domain} @ {server}: {dns.rcode.to_text(rcode)}")
        return rcode
