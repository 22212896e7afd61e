# -*- coding: utf-8 -*-

import threading
from collections import Counter

import dns.rcode
import pytest

from domainerator.errors import QueryError


class StubChecker:
    """按预设返回响应码或抛出查询错误的检测器"""

    def __init__(self, rcodes=None, failures=None, default=dns.rcode.NXDOMAIN):
        self.rcodes = dict(rcodes or {})
        # domain -> 剩余失败次数，-1 表示一直失败
        self.failures = dict(failures or {})
        self.default = default
        self.attempts = Counter()
        self._lock = threading.Lock()

    def query(self, domain, server=None):
        with self._lock:
            self.attempts[domain] += 1
            remaining = self.failures.get(domain, 0)
            if remaining:
                if remaining > 0:
                    self.failures[domain] = remaining - 1
                raise QueryError(domain, "stub", "timed out")
        return self.rcodes.get(domain, self.default)


@pytest.fixture
def stub_checker():
    return StubChecker


@pytest.fixture
def wordlist_files(tmp_path):
    """在临时目录中写入前缀/后缀词表，返回 (前缀路径, 后缀路径)"""

    def write(prefixes, suffixes):
        prefixes_path = tmp_path / "prefixes.txt"
        suffixes_path = tmp_path / "suffixes.txt"
        prefixes_path.write_text("\n".join(prefixes) + "\n", encoding="utf-8")
        suffixes_path.write_text("\n".join(suffixes) + "\n", encoding="utf-8")
        return str(prefixes_path), str(suffixes_path)

    return write
