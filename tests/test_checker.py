# -*- coding: utf-8 -*-

import dns.exception
import dns.flags
import dns.message
import dns.query
import dns.rcode
import dns.rdatatype
import pytest

from domainerator.checker import DnsChecker, QueryResult
from domainerator.errors import (EXIT_INVALID_OPTION, InvalidDomainError, InvalidOptionError,
                                 NoDnsServersError, QueryError, UnknownProtocolError)


class FakeTransport:
    """替代 dns.query.udp / dns.query.tcp，记录请求并返回指定响应码"""

    def __init__(self, rcode=dns.rcode.NOERROR, error=None):
        self.rcode = rcode
        self.error = error
        self.calls = []

    def __call__(self, message, where, timeout=None, port=53, **kwargs):
        self.calls.append((message, where, timeout, port))
        if self.error is not None:
            raise self.error
        response = dns.message.make_response(message)
        response.set_rcode(self.rcode)
        return response


def test_query_returns_rcode_over_udp(monkeypatch):
    transport = FakeTransport(dns.rcode.NXDOMAIN)
    monkeypatch.setattr(dns.query, "udp", transport)
    checker = DnsChecker(["192.0.2.1"], timeout=2.5)

    assert checker.query("example.com") == dns.rcode.NXDOMAIN

    message, where, timeout, port = transport.calls[0]
    question = message.question[0]
    assert question.name.to_text() == "example.com."
    assert question.rdtype == dns.rdatatype.NS
    assert message.flags & dns.flags.RD
    assert (where, timeout, port) == ("192.0.2.1", 2.5, 53)


def test_query_over_tcp(monkeypatch):
    transport = FakeTransport(dns.rcode.SERVFAIL)
    monkeypatch.setattr(dns.query, "tcp", transport)
    checker = DnsChecker(["192.0.2.1"], protocol="tcp")

    assert checker.query("example.com") == dns.rcode.SERVFAIL
    assert len(transport.calls) == 1


def test_explicit_server(monkeypatch):
    transport = FakeTransport()
    monkeypatch.setattr(dns.query, "udp", transport)
    checker = DnsChecker(["192.0.2.1", "192.0.2.2"])

    checker.query("example.com", server="192.0.2.2")
    assert transport.calls[0][1] == "192.0.2.2"


@pytest.mark.parametrize("error", [dns.exception.Timeout(), OSError("network unreachable")])
def test_transport_errors_become_query_errors(monkeypatch, error):
    monkeypatch.setattr(dns.query, "udp", FakeTransport(error=error))
    checker = DnsChecker(["192.0.2.1"])

    with pytest.raises(QueryError) as excinfo:
        checker.query("example.com")
    assert excinfo.value.retryable
    assert excinfo.value.domain == "example.com"
    assert excinfo.value.server == "192.0.2.1"


def test_label_too_long_is_not_retryable(monkeypatch):
    transport = FakeTransport()
    monkeypatch.setattr(dns.query, "udp", transport)
    checker = DnsChecker(["192.0.2.1"])

    with pytest.raises(InvalidDomainError) as excinfo:
        checker.query("a" * 64 + ".com")
    assert not excinfo.value.retryable
    assert transport.calls == []


def test_pick_server_ignores_blank_entries():
    checker = DnsChecker([" 192.0.2.1 ", "", "192.0.2.2"])
    assert checker.servers == ["192.0.2.1", "192.0.2.2"]
    assert checker.pick_server() in checker.servers


def test_no_servers():
    with pytest.raises(NoDnsServersError):
        DnsChecker(["", " "])


def test_unknown_protocol():
    with pytest.raises(UnknownProtocolError):
        DnsChecker(["192.0.2.1"], protocol="icmp")


def test_query_result_properties():
    available = QueryResult("golang.com", dns.rcode.NXDOMAIN)
    registered = QueryResult("google.com", dns.rcode.NOERROR)
    failed = QueryResult.failure("x.com", "timed out", attempts=4)

    assert available.available and not available.failed
    assert available.rcode_name == "NXDOMAIN"
    assert not registered.available
    assert registered.rcode_name == "NOERROR"
    assert failed.failed and not failed.available
    assert failed.rcode_name == "FAILED"
    assert failed.attempts == 4


def test_query_result_format():
    result = QueryResult("golang.com", dns.rcode.SERVFAIL, error='bad "reply"')

    assert result.format(simple=True) == "golang.com\n"
    assert result.format(simple=False) == 'golang.com\tSERVFAIL\t"bad \\"reply\\""\n'
    assert QueryResult("a.com", dns.rcode.NXDOMAIN).format(simple=False) == 'a.com\tNXDOMAIN\t""\n'


@pytest.mark.parametrize("server", ["8.8.8.8:53", "dns.google", "256.1.1.1"])
def test_invalid_server_address_is_rejected(server):
    with pytest.raises(InvalidOptionError) as excinfo:
        DnsChecker(["192.0.2.1", server])
    assert server in str(excinfo.value)
    assert excinfo.value.exit_code == EXIT_INVALID_OPTION


def test_ipv6_server_is_accepted():
    checker = DnsChecker(["2001:4860:4860::8888"])
    assert checker.servers == ["2001:4860:4860::8888"]
