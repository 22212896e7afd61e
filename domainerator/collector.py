#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
collector.py

结果收集模块，从结果队列中读取查询结果，按配置过滤并写入输出文件，
同时负责进度报告和扫描统计。
"""

import time
import queue
import logging
import threading
from collections import Counter
from datetime import timedelta
from typing import Any, Callable, Dict, TextIO

from .checker import QueryResult
from .errors import OutputError

# 配置日志
logger = logging.getLogger("collector")

DEFAULT_PROGRESS_INTERVAL = 5.0


def format_duration(seconds: float) -> str:
    """将秒数格式化为 H:MM:SS"""
    return str(timedelta(seconds=int(seconds)))


class ResultCollector:
    """结果收集器，是输出文件唯一的写入者"""

    def __init__(self, sink: TextIO, available_only: bool = True,
                 progress_interval: float = DEFAULT_PROGRESS_INTERVAL,
                 clock: Callable[[], float] = time.monotonic):
        """
        初始化结果收集器

        参数:
            sink: 输出文件对象
            available_only: 是否只写入可用(NXDOMAIN)的域名
            progress_interval: 进度报告间隔(秒)
            clock: 计时函数
        """
        self.sink = sink
        self.available_only = available_only
        self.progress_interval = progress_interval
        self.clock = clock
        self.total = 0
        self.stats: Dict[str, Any] = {}
        self._reset_stats()

    def _reset_stats(self) -> None:
        """重置统计信息"""
        self.stats = {
            'processed': 0,
            'written': 0,
            'available': 0,
            'failed': 0,
            'rcodes': Counter(),
            'start_time': self.clock(),
            'end_time': None,
        }

    def collect(self, results: "queue.Queue[QueryResult]", total: int,
                stop_event: threading.Event, poll_interval: float = 0.1) -> bool:
        """
        从结果队列读取结果，直到处理数量达到总数或收到停止信号

        参数:
            results: 结果队列
            total: 本次扫描的域名总数
            stop_event: 停止信号
            poll_interval: 等待结果时检查停止信号的间隔(秒)

        返回:
            是否处理完全部域名
        """
        self.total = total
        self._reset_stats()
        last_progress_time = self.clock()

        while self.stats['processed'] < total:
            if stop_event.is_set():
                break
            try:
                result = results.get(timeout=poll_interval)
            except queue.Empty:
                continue

            self.handle(result)

            now = self.clock()
            if now - last_progress_time >= self.progress_interval:
                self.log_progress()
                last_progress_time = now

        self.flush()
        self.stats['end_time'] = self.clock()
        return self.stats['processed'] >= total

    def drain(self, results: "queue.Queue[QueryResult]") -> int:
        """处理队列中已有的全部结果，用于中断后保存进行中的结果"""
        drained = 0
        while True:
            try:
                result = results.get_nowait()
            except queue.Empty:
                break
            self.handle(result)
            drained += 1
        self.flush()
        return drained

    def handle(self, result: QueryResult) -> None:
        """
        处理单个结果: 更新统计并按需写入输出文件

        异常:
            OutputError: 写入输出文件失败
        """
        self._update_stats(result)

        if self.available_only and not result.available:
            return

        try:
            self.sink.write(result.format(simple=self.available_only))
        except (OSError, ValueError) as e:
            logger.error(f"写入结果失败: {e}")
            raise OutputError(f"无法写入输出文件: {e}") from e
        self.stats['written'] += 1

        if result.available:
            logger.info(f"发现可用域名: {result.domain}")

    def flush(self) -> None:
        try:
            self.sink.flush()
        except (OSError, ValueError) as e:
            raise OutputError(f"无法写入输出文件: {e}") from e

    def _update_stats(self, result: QueryResult) -> None:
        self.stats['processed'] += 1
        self.stats['rcodes'][result.rcode_name] += 1
        if result.available:
            self.stats['available'] += 1
        if result.failed:
            self.stats['failed'] += 1

    def log_progress(self) -> None:
        """记录当前扫描进度到日志"""
        processed = self.stats['processed']
        if processed == 0:
            return

        elapsed = self.clock() - self.stats['start_time']
        eta = elapsed * self.total / processed
        logger.info(f"已检查 {processed} / {self.total} 个域名，"
                    f"耗时 {format_duration(elapsed)}，预计总耗时 {format_duration(eta)}")

    def log_summary(self) -> None:
        """记录扫描统计信息"""
        end_time = self.stats['end_time'] or self.clock()
        duration = end_time - self.stats['start_time']
        rate = self.stats['processed'] / duration if duration > 0 else 0

        logger.info("--- 扫描统计 ---")
        logger.info(f"已检查: {self.stats['processed']} / {self.total} 个域名")
        logger.info(f"可用域名: {self.stats['available']}")
        logger.info(f"查询失败: {self.stats['failed']}")
        logger.info(f"写入行数: {self.stats['written']}")
        for name, count in sorted(self.stats['rcodes'].items()):
            logger.info(f"  {name}: {count}")
        logger.info(f"耗时: {duration:.1f} 秒")
        logger.info(f"速度: {rate:.2f} 个域名/秒")
        logger.info("----------------")
