#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
cli.py

命令行接口模块，负责解析命令行参数、构建配置、设置日志，
并调用生成器与扫描器执行扫描任务，将致命错误转换为退出码。
"""

import os
import sys
import logging
import argparse
from datetime import datetime
from typing import Any, Dict, List, Optional

import daemon
import lockfile
from wcwidth import wcswidth

from . import DESCRIPTION, PROGRAM_NAME, VERSION
from .checker import DnsChecker
from .collector import ResultCollector
from .config_parser import DEFAULT_CONFIG, ConfigParser, Settings, build_settings, merge_config
from .errors import (DomaineratorError, OutputError, WordListError, EXIT_INTERRUPTED, EXIT_OK,
                     EXIT_OUTPUT_CREATE, EXIT_PREFIXES, EXIT_SUFFIXES, EXIT_UNEXPECTED, EXIT_USAGE)
from .generator import DomainGenerator
from .scanner import DomainScanner
from .suffixes import known_suffixes, resolve_public_suffixes
from .wordlist import filter_utf8, load

logger = logging.getLogger("cli")

DAEMON_LOG_FILE = "log.txt"


class ChineseArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        # 简化错误消息的中文替换
        message = message.replace("the following arguments are required:", "缺少以下必需参数:")
        message = message.replace("unrecognized arguments", "无法识别的参数")
        message = message.replace("invalid int value", "无效的整数")
        message = message.replace("invalid float value", "无效的数值")
        self.exit(EXIT_USAGE, f"错误: {message}\n")


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    解析命令行参数

    未显式给出的选项保持为None，以便配置文件中的值生效。

    参数:
        argv: 参数列表，默认为 sys.argv[1:]

    返回:
        解析后的参数对象
    """
    parser = ChineseArgumentParser(
        prog="domainerator",
        description=f"{PROGRAM_NAME} v{VERSION} - {DESCRIPTION}",
    )

    parser.add_argument("prefixes", help="前缀词表文件")
    parser.add_argument("suffixes", help="后缀词表文件")
    parser.add_argument("output", help="输出结果文件")

    combo = parser.add_argument_group("组合选项")
    combo.add_argument("--single", action="store_true", default=None,
                       help="同时检查单个单词")
    combo.add_argument("--itself", action="store_true", default=None,
                       help="允许单词与自身组合")
    combo.add_argument("--hyphen", action="store_true", default=None,
                       help="生成带连字符的组合")
    combo.add_argument("--hacks", action="store_true", default=None,
                       help="生成域名黑客形式 (如 del.icio.us)")
    combo.add_argument("--fuse", action="store_true", default=None,
                       help="融合前缀尾部与后缀头部重叠的字符")
    combo.add_argument("--tlds", action="store_true", default=None,
                       help="追加全部顶级域名到公共后缀列表")
    combo.add_argument("--utf8", action="store_true", default=None,
                       help="允许包含非ASCII字符的域名")
    combo.add_argument("--ps", metavar="CSV",
                       help=f"公共后缀列表 (默认: {DEFAULT_CONFIG['ps']})")
    combo.add_argument("--maxlen", type=int,
                       help=f"域名最大长度 (默认: {DEFAULT_CONFIG['maxlen']})")
    combo.add_argument("--minlen", type=int,
                       help=f"组合主体最小长度 (默认: {DEFAULT_CONFIG['minlen']})")
    combo.add_argument("--strict", action=argparse.BooleanOptionalAction, default=None,
                       help="过滤注册商禁止的域名 (默认: 开启)")

    check = parser.add_argument_group("查询选项")
    check.add_argument("--dns", metavar="CSV",
                       help=f"DNS服务器列表 (默认: {DEFAULT_CONFIG['dns']})")
    check.add_argument("--proto", help="传输协议 udp 或 tcp (默认: udp)")
    check.add_argument("-c", "--concurrency", type=int,
                       help=f"并发工作线程数 (默认: {DEFAULT_CONFIG['concurrency']})")
    check.add_argument("--timeout", type=float,
                       help=f"单次查询超时秒数 (默认: {DEFAULT_CONFIG['timeout']})")
    check.add_argument("--retries", type=int,
                       help=f"每个域名最大重试次数，-1表示不限 (默认: {DEFAULT_CONFIG['retries']})")
    check.add_argument("--backoff", type=float,
                       help=f"重试退避基础秒数 (默认: {DEFAULT_CONFIG['backoff']})")

    out = parser.add_argument_group("输出选项")
    out.add_argument("--avail", action=argparse.BooleanOptionalAction, default=None,
                     help="只输出可用域名 (默认: 开启)")
    out.add_argument("--progress", type=float,
                     help=f"进度报告间隔秒数 (默认: {DEFAULT_CONFIG['progress']})")

    parser.add_argument("--config", help="配置文件 (key = value 格式)")
    parser.add_argument("--log-file", help="同时写入日志文件")
    parser.add_argument("--daemon", action="store_true", help="以守护进程模式在后台运行")
    parser.add_argument("-v", "--verbose", action="store_true", help="详细输出模式")
    parser.add_argument("--version", action="version", version=f"{PROGRAM_NAME} v{VERSION}")

    return parser.parse_args(argv)


def config_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """取出与配置项同名的命令行参数"""
    return {key: getattr(args, key) for key in DEFAULT_CONFIG if hasattr(args, key)}


def print_banner() -> None:
    """打印程序横幅 (按显示宽度对齐中文字符)"""
    inner_width = 46
    left_padding = "   "

    lines = []
    for text in (f"{PROGRAM_NAME}  v{VERSION}", DESCRIPTION):
        width = wcswidth(text)
        if width < 0:
            width = len(text)
        padding = " " * max(0, inner_width - len(left_padding) - width)
        lines.append(f"    │{left_padding}{text}{padding}│")

    border = "─" * inner_width
    blank = f"    │{' ' * inner_width}│"
    banner = "\n".join([f"    ┌{border}┐", blank, *lines, blank, f"    └{border}┘"])
    print(banner)


def setup_logging(verbose: bool = False, log_file: Optional[str] = None) -> None:
    """
    设置日志记录

    参数:
        verbose: 是否启用详细日志
        log_file: 日志文件路径，None表示只输出到控制台
    """
    # 清除现有的日志处理器
    for handler in logging.root.handlers[:]:
        logging.root.removeHandler(handler)

    log_level = logging.DEBUG if verbose else logging.INFO

    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(logging.Formatter('%(asctime)s - %(levelname)s - %(message)s'))
    logging.root.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(filename=log_file, mode="w", encoding="utf-8")
        file_handler.setLevel(log_level)
        file_handler.setFormatter(logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s'))
        logging.root.addHandler(file_handler)

    logging.root.setLevel(log_level)
    logging.debug(f"日志级别: {'DEBUG' if verbose else 'INFO'}")


def log_config_summary(settings: Settings) -> None:
    """记录配置摘要"""
    logger.info("=== 扫描配置 ===")
    logger.info(f"前缀词表: {settings.prefixes_path}")
    logger.info(f"后缀词表: {settings.suffixes_path}")
    logger.info(f"输出文件: {settings.output_path}")
    logger.info(f"公共后缀: {', '.join(settings.public_suffixes)}"
                f"{' (含全部顶级域名)' if settings.include_tlds else ''}")
    logger.info(f"DNS服务器: {', '.join(settings.dns_servers)} ({settings.protocol})")
    logger.info(f"并发数: {settings.concurrency}，超时: {settings.timeout} 秒，"
                f"最大重试: {'不限' if settings.max_retries is None else settings.max_retries}")
    logger.info(f"输出模式: {'仅可用域名' if settings.available_only else '全部结果'}")


def _load_wordlist(path: str, exit_code: int) -> List[str]:
    try:
        return load(path)
    except WordListError as e:
        raise WordListError(str(e), exit_code=exit_code) from e


def run_domainerator(settings: Settings, checker=None) -> int:
    """
    执行一次完整的生成与扫描

    参数:
        settings: 运行配置
        checker: DNS检测器，默认按配置创建 DnsChecker

    返回:
        退出代码

    异常:
        DomaineratorError: 任何致命错误
    """
    logger.info("正在加载词表...")
    prefixes = _load_wordlist(settings.prefixes_path, EXIT_PREFIXES)
    suffixes = _load_wordlist(settings.suffixes_path, EXIT_SUFFIXES)

    psl = resolve_public_suffixes(settings.public_suffixes, known_suffixes(), settings.include_tlds)
    if not settings.allow_utf8:
        psl = filter_utf8(psl)
    logger.info(f"公共后缀 ({len(psl)} 个): {', '.join(psl)}")

    if checker is None:
        checker = DnsChecker(settings.dns_servers, settings.protocol, settings.timeout)

    generator = DomainGenerator(settings.combine_options(), known_suffixes())
    domains = generator.generate(prefixes, suffixes, psl)

    try:
        output_file = open(settings.output_path, "w", encoding="utf-8")
    except OSError as e:
        raise OutputError(f"无法创建输出文件 {settings.output_path}: {e}",
                          exit_code=EXIT_OUTPUT_CREATE) from e

    with output_file:
        collector = ResultCollector(output_file, available_only=settings.available_only,
                                    progress_interval=settings.progress_interval)
        scanner = DomainScanner(checker, collector,
                                concurrency=settings.concurrency,
                                max_retries=settings.max_retries,
                                retry_backoff=settings.retry_backoff)
        completed = scanner.run(domains)

    return EXIT_OK if completed else EXIT_INTERRUPTED


def run_scanner(settings: Settings) -> int:
    """
    运行扫描并把异常转换为退出码

    参数:
        settings: 运行配置

    返回:
        退出代码 (0表示成功，非0表示错误)
    """
    try:
        return run_domainerator(settings)
    except DomaineratorError as e:
        logger.error(f"错误: {e}")
        return e.exit_code
    except KeyboardInterrupt:
        logger.warning("程序被用户中断 (Ctrl+C)")
        return EXIT_INTERRUPTED
    except Exception as e:
        logger.error(f"扫描过程中出现错误: {e}", exc_info=True)
        return EXIT_UNEXPECTED


def daemon_run(settings: Settings, verbose: bool, log_file: str) -> int:
    """
    以守护进程模式运行扫描器

    参数:
        settings: 运行配置
        verbose: 是否详细输出模式
        log_file: 日志文件路径

    返回:
        退出代码
    """
    if not os.path.exists("pid"):
        os.makedirs("pid")

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    pid_file = f"pid/domainerator_{timestamp}.pid"

    print("将在后台运行扫描任务...")
    print(f"PID文件: {pid_file}")
    print(f"日志文件: {log_file}")
    print(f"结果文件: {settings.output_path}")

    context = daemon.DaemonContext(
        working_directory=os.getcwd(),
        umask=0o002,
        pidfile=lockfile.FileLock(pid_file),
        detach_process=True
    )

    with context:
        setup_logging(verbose=verbose, log_file=log_file)
        logging.info(f"守护进程已启动，PID文件: {pid_file}")
        return run_scanner(settings)


def main(argv: Optional[List[str]] = None) -> int:
    """
    主程序入口点

    返回:
        退出代码 (0表示成功，非0表示错误)
    """
    print_banner()

    args = parse_arguments(argv)
    log_file = args.log_file or (DAEMON_LOG_FILE if args.daemon else None)
    setup_logging(verbose=args.verbose, log_file=None if args.daemon else log_file)

    try:
        config = ConfigParser(args.config).parse_config()
        config = merge_config(config, config_overrides(args))
        settings = build_settings(args.prefixes, args.suffixes, args.output, config)
    except DomaineratorError as e:
        logger.error(f"错误: {e}")
        return e.exit_code

    log_config_summary(settings)

    if args.daemon:
        return daemon_run(settings, args.verbose, log_file)
    return run_scanner(settings)


if __name__ == "__main__":
    sys.exit(main())
