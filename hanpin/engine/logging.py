"""
统一日志配置模块

控制台彩色输出、JSON 格式、可选的文件轮转，以及耗时统计装饰器
"""

import os
import sys
import logging
import orjson
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from typing import Optional
from pathlib import Path
from functools import wraps
import time


# 日志目录（仅在开启文件输出时创建）
LOG_DIR = Path(os.getenv("HANPIN_LOG_DIR", "logs"))


class JsonFormatter(logging.Formatter):
    """JSON 格式日志（便于日志分析工具解析）"""

    EXTRA_FIELDS = ('request_id', 'method', 'path', 'status_code', 'client_ip', 'duration_ms')

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'module': record.module,
            'function': record.funcName,
            'line': record.lineno,
        }

        # 通过 extra= 传入的请求字段
        for key in self.EXTRA_FIELDS:
            if hasattr(record, key):
                log_data[key] = getattr(record, key)

        if record.exc_info:
            log_data['exception'] = self.formatException(record.exc_info)

        return orjson.dumps(log_data).decode('utf-8')


class ColorFormatter(logging.Formatter):
    """彩色控制台输出"""

    COLORS = {
        'DEBUG': '\033[36m',     # Cyan
        'INFO': '\033[32m',      # Green
        'WARNING': '\033[33m',   # Yellow
        'ERROR': '\033[31m',     # Red
        'CRITICAL': '\033[35m',  # Magenta
    }
    RESET = '\033[0m'

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname, '')
        levelname = record.levelname
        record.levelname = f"{color}{levelname}{self.RESET}"
        try:
            return super().format(record)
        finally:
            record.levelname = levelname


def resolve_level(level, default: int = logging.INFO) -> int:
    """
    解析日志级别名称，无法识别时回退到 default 并给出警告
    """
    if isinstance(level, int):
        return level
    value = logging.getLevelName(str(level).strip().upper())
    if isinstance(value, int):
        return value
    logging.getLogger('hanpin').warning(
        f"未知的日志级别 {level!r}, 使用 {logging.getLevelName(default)}"
    )
    return default


def env_flag(name: str) -> bool:
    """环境变量开关（1/true/yes/on 为真）"""
    return os.getenv(name, '').strip().lower() in ('1', 'true', 'yes', 'on')


def setup_logging(
    name: str = 'hanpin',
    level: str = 'INFO',
    log_to_file: bool = False,
    log_to_console: bool = True,
    json_format: bool = False,
    max_bytes: int = 10 * 1024 * 1024,  # 10MB
    backup_count: int = 5,
) -> logging.Logger:
    """
    配置日志系统

    Args:
        name: 日志器名称
        level: 日志级别 (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_to_file: 是否写入文件（目录由 HANPIN_LOG_DIR 指定）
        log_to_console: 是否输出到控制台
        json_format: 是否使用 JSON 格式
        max_bytes: 单个日志文件最大大小
        backup_count: 保留的日志文件数量

    Returns:
        配置好的 Logger 实例
    """
    logger = logging.getLogger(name)
    logger.setLevel(resolve_level(level))

    # 清除已有 handlers（避免重复添加）
    logger.handlers.clear()

    detailed_format = '%(asctime)s | %(levelname)-8s | %(name)s:%(funcName)s:%(lineno)d | %(message)s'
    simple_format = '%(asctime)s | %(levelname)-8s | %(message)s'

    if log_to_console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(logging.DEBUG)

        if json_format:
            console_handler.setFormatter(JsonFormatter())
        elif sys.stderr.isatty():
            console_handler.setFormatter(ColorFormatter(simple_format))
        else:
            console_handler.setFormatter(logging.Formatter(simple_format))

        logger.addHandler(console_handler)

    if log_to_file:
        LOG_DIR.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            LOG_DIR / f'{name}.log',
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding='utf-8'
        )
        file_handler.setLevel(logging.DEBUG)
        if json_format:
            file_handler.setFormatter(JsonFormatter())
        else:
            file_handler.setFormatter(logging.Formatter(detailed_format))
        logger.addHandler(file_handler)

        # 错误日志单独文件
        error_handler = RotatingFileHandler(
            LOG_DIR / f'{name}_error.log',
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding='utf-8'
        )
        error_handler.setLevel(logging.ERROR)
        error_handler.setFormatter(logging.Formatter(detailed_format))
        logger.addHandler(error_handler)

    return logger


def get_logger(name: str = 'hanpin') -> logging.Logger:
    """获取已配置的 logger（如果未配置则自动配置）"""
    logger = logging.getLogger(name)
    if not logger.handlers:
        return setup_logging(name)
    return logger


def log_execution_time(logger: Optional[logging.Logger] = None):
    """装饰器：记录函数执行时间"""
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            log = logger or get_logger()
            start = time.perf_counter()
            try:
                result = func(*args, **kwargs)
                elapsed = (time.perf_counter() - start) * 1000
                log.debug(f"{func.__name__} 执行完成, 耗时: {elapsed:.2f}ms")
                return result
            except Exception as e:
                elapsed = (time.perf_counter() - start) * 1000
                log.error(f"{func.__name__} 执行失败, 耗时: {elapsed:.2f}ms, 错误: {e}")
                raise
        return wrapper
    return decorator


# 预配置的日志器
api_logger = None
engine_logger = None


def get_api_logger() -> logging.Logger:
    """获取 API 日志器"""
    global api_logger
    if api_logger is None:
        api_logger = setup_logging(
            'hanpin.api',
            level=os.getenv('HANPIN_LOG_LEVEL', 'INFO'),
            log_to_file=env_flag('HANPIN_LOG_TO_FILE'),
            json_format=env_flag('HANPIN_LOG_JSON'),
        )
    return api_logger


def get_engine_logger() -> logging.Logger:
    """获取引擎日志器"""
    global engine_logger
    if engine_logger is None:
        engine_logger = setup_logging(
            'hanpin.engine',
            level=os.getenv('HANPIN_LOG_LEVEL', 'WARNING'),
            json_format=env_flag('HANPIN_LOG_JSON'),
        )
    return engine_logger
