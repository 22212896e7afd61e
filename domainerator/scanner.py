#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
scanner.py

域名扫描协调器，由一个生产者线程、一组工作线程和一个结果收集器组成。
生产者按顺序把候选域名放入待处理队列，工作线程调用DNS检测器，
失败的查询进入重试队列(带指数退避和次数上限)，成功或最终失败的结果
进入结果队列，由收集器写入输出文件。
"""

import time
import queue
import logging
import itertools
import threading
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from .checker import QueryResult
from .collector import ResultCollector
from .errors import QueryError

# 配置日志
logger = logging.getLogger("scanner")

DEFAULT_CONCURRENCY = 50
DEFAULT_MAX_RETRIES = 10
DEFAULT_RETRY_BACKOFF = 0.5
MAX_RETRY_BACKOFF = 30.0
# 2**62 仍可转换为float，更大的指数在无限重试时会溢出
MAX_BACKOFF_EXPONENT = 62
DEFAULT_POLL_INTERVAL = 0.1


@dataclass
class _Job:
    domain: str
    attempts: int = 0
    last_error: Optional[str] = None


class DomainScanner:
    """域名扫描协调器，管理生产者、工作线程池和结果收集"""

    def __init__(self, checker, collector: ResultCollector,
                 concurrency: int = DEFAULT_CONCURRENCY,
                 max_retries: Optional[int] = DEFAULT_MAX_RETRIES,
                 retry_backoff: float = DEFAULT_RETRY_BACKOFF,
                 max_backoff: float = MAX_RETRY_BACKOFF,
                 poll_interval: float = DEFAULT_POLL_INTERVAL):
        """
        初始化域名扫描器

        参数:
            checker: DNS检测器，需提供 query(domain) -> rcode
            collector: 结果收集器
            concurrency: 工作线程数量
            max_retries: 每个域名首次查询失败后的最大重试次数，None表示不限
            retry_backoff: 重试退避的基础时间(秒)，0表示立即重试
            max_backoff: 单次退避的上限(秒)
            poll_interval: 各线程检查停止信号的间隔(秒)
        """
        self.checker = checker
        self.collector = collector
        self.concurrency = max(1, concurrency)
        self.max_retries = max_retries
        self.retry_backoff = retry_backoff
        self.max_backoff = max_backoff
        self.poll_interval = poll_interval

        self.pending: "queue.Queue[str]" = queue.Queue(maxsize=self.concurrency)
        self.retry: "queue.PriorityQueue[Tuple[float, int, _Job]]" = queue.PriorityQueue()
        self.complete: "queue.Queue[QueryResult]" = queue.Queue()
        self.stop_event = threading.Event()

        self._sequence = itertools.count()
        self._threads: List[threading.Thread] = []

    def run(self, domains: Sequence[str]) -> bool:
        """
        扫描全部域名

        参数:
            domains: 有序的候选域名列表，总数必须在开始前确定

        返回:
            是否完成了全部域名 (被中断时返回False)
        """
        total = len(domains)
        logger.info(f"开始检查 {total} 个域名，工作线程: {self.concurrency}")
        self.stop_event.clear()

        producer = threading.Thread(target=self._produce, args=(domains,),
                                    name="producer", daemon=True)
        self._threads = [producer]
        for i in range(self.concurrency):
            self._threads.append(threading.Thread(target=self._work, name=f"worker-{i}", daemon=True))
        for thread in self._threads:
            thread.start()

        completed = False
        try:
            completed = self.collector.collect(self.complete, total, self.stop_event,
                                               poll_interval=self.poll_interval)
        except KeyboardInterrupt:
            logger.warning("用户中断扫描 (Ctrl+C)，等待进行中的查询结束")
        finally:
            self.stop()

        if not completed:
            drained = self.collector.drain(self.complete)
            if drained:
                logger.info(f"已保存中断前完成的 {drained} 个结果")
            logger.warning("扫描已中断")
        else:
            logger.info("扫描完成")

        self.collector.log_summary()
        return completed

    def stop(self) -> None:
        """发出停止信号并等待所有线程退出"""
        self.stop_event.set()
        for thread in self._threads:
            thread.join()
        self._threads = []

    def _produce(self, domains: Sequence[str]) -> None:
        """生产者: 按顺序把域名放入待处理队列"""
        for domain in domains:
            while not self.stop_event.is_set():
                try:
                    self.pending.put(domain, timeout=self.poll_interval)
                    break
                except queue.Full:
                    continue
            else:
                return
        logger.debug("全部域名已进入待处理队列")

    def _work(self) -> None:
        """工作线程: 交替读取重试队列和待处理队列，直到收到停止信号"""
        while not self.stop_event.is_set():
            job = self._next_job()
            if job is None:
                continue

            try:
                self._check(job)
            except Exception as e:
                # 任务不能丢失，否则收集器会一直等待
                logger.error(f"处理 {job.domain} 时出现意外错误: {e}", exc_info=True)
                self.complete.put(QueryResult.failure(job.domain, str(e), job.attempts))

    def _check(self, job: _Job) -> None:
        """对任务发起一次查询，结果进入结果队列或重试队列"""
        job.attempts += 1
        try:
            rcode = self.checker.query(job.domain)
        except QueryError as e:
            if not e.retryable:
                logger.warning(f"无效域名 {job.domain}: {e.cause}")
                self.complete.put(QueryResult.failure(job.domain, str(e.cause), job.attempts))
            else:
                self._retry_or_fail(job, str(e.cause))
            return
        except Exception as e:
            logger.error(f"检查 {job.domain} 时出现意外错误: {e}", exc_info=True)
            self._retry_or_fail(job, str(e))
            return

        self.complete.put(QueryResult(domain=job.domain, rcode=rcode, attempts=job.attempts))

    def _next_job(self) -> Optional[_Job]:
        """
        取下一个任务，已到期的重试任务优先

        返回:
            任务或None (等待超时)
        """
        wait = self.poll_interval
        try:
            ready_at, seq, job = self.retry.get_nowait()
        except queue.Empty:
            pass
        else:
            delay = ready_at - time.monotonic()
            if delay <= 0:
                return job
            self.retry.put((ready_at, seq, job))
            wait = min(delay, self.poll_interval)

        try:
            domain = self.pending.get(timeout=wait)
        except queue.Empty:
            return None
        return _Job(domain)

    def _retry_or_fail(self, job: _Job, error: str) -> None:
        """失败的任务进入重试队列，重试次数耗尽时产生失败结果"""
        job.last_error = error
        if self.max_retries is not None and job.attempts > self.max_retries:
            logger.warning(f"检查 {job.domain} 失败，已尝试 {job.attempts} 次: {error}")
            self.complete.put(QueryResult.failure(job.domain, error, job.attempts))
            return

        delay = self.backoff(job.attempts)
        logger.debug(f"第 {job.attempts} 次检查 {job.domain} 失败 ({error})，{delay:.1f} 秒后重试")
        self.retry.put((time.monotonic() + delay, next(self._sequence), job))

    def backoff(self, attempts: int) -> float:
        """第attempts次失败后的退避时间"""
        if self.retry_backoff <= 0:
            return 0.0
        exponent = min(max(attempts - 1, 0), MAX_BACKOFF_EXPONENT)
        return min(self.retry_backoff * (2 ** exponent), self.max_backoff)
