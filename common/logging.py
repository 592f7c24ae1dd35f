"""
日志模块

支持两种后端，通过 LOG_BACKEND 环境变量或 set_log_backend() 切换：
- simple: 标准 logging（默认，测试环境推荐）
- loguru: Loguru，彩色输出与文件轮转；标准 logging 的记录会被转发到 Loguru

用法：
    from common.logging import get_logger, setup_logging

    setup_logging(level="INFO")
    logger = get_logger(__name__)
    logger.info("hello")
"""

import logging
import os
import sys
from typing import Any, Optional

from loguru import logger as _loguru_logger

SUPPORTED_BACKENDS = ("simple", "loguru")

_SIMPLE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s:%(funcName)s:%(lineno)d - %(message)s"
_LOGURU_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)

_backend: Optional[str] = None


def get_log_backend() -> str:
    """获取当前日志后端（未设置时读取 LOG_BACKEND 环境变量）"""
    global _backend
    if _backend is None:
        _backend = os.getenv("LOG_BACKEND", "simple").strip().lower() or "simple"
    return _backend


def set_log_backend(backend: str) -> None:
    """
    切换日志后端

    Raises:
        ValueError: 不支持的后端
    """
    global _backend
    backend = backend.strip().lower()
    if backend not in SUPPORTED_BACKENDS:
        raise ValueError(
            f"Unsupported log backend '{backend}'. Supported: {', '.join(SUPPORTED_BACKENDS)}"
        )
    _backend = backend


class _InterceptHandler(logging.Handler):
    """将标准 logging 记录转发给 Loguru"""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: Any = _loguru_logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # 跳过 logging 内部栈帧，定位真实调用方
        frame, depth = logging.currentframe(), 2
        while frame is not None and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        _loguru_logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


def setup_logging(
    level: str = "INFO",
    log_file: Optional[str] = None,
    backend: Optional[str] = None,
) -> None:
    """
    配置日志输出

    Args:
        level: 日志级别
        log_file: 可选的日志文件路径
        backend: 日志后端，默认使用当前后端
    """
    if backend is not None:
        set_log_backend(backend)
    level = level.upper()

    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)

    if get_log_backend() == "loguru":
        _loguru_logger.remove()
        _loguru_logger.add(sys.stderr, format=_LOGURU_FORMAT, level=level, colorize=True)
        if log_file:
            os.makedirs(os.path.dirname(log_file) or ".", exist_ok=True)
            _loguru_logger.add(
                log_file,
                level=level,
                rotation="10 MB",
                retention="7 days",
                encoding="utf-8",
            )
        root.addHandler(_InterceptHandler())
        root.setLevel(level)
        return

    formatter = logging.Formatter(_SIMPLE_FORMAT)
    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(formatter)
    root.addHandler(console)
    if log_file:
        os.makedirs(os.path.dirname(log_file) or ".", exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
    root.setLevel(level)


def get_logger(name: str) -> Any:
    """
    获取日志记录器

    simple 后端返回 logging.Logger；loguru 后端返回绑定了 name 的 Loguru logger。
    """
    if get_log_backend() == "loguru":
        return _loguru_logger.bind(name=name)
    return logging.getLogger(name)


__all__ = ["get_logger", "set_log_backend", "get_log_backend", "setup_logging"]
