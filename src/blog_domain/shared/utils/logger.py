"""日志配置 - 基于Loguru

支持：
- 结构化 JSON 日志
- request_id 追踪
- 领域事件记录
- 日志文件轮转
"""

import dataclasses
import re
import sys
import uuid
from contextvars import ContextVar
from pathlib import Path
from typing import Any

from loguru import logger

from ..constants import LOG_DIR_NAME, LOG_FILE_NAME

# 请求 ID 上下文变量
_request_id_var: ContextVar[str | None] = ContextVar("request_id", default=None)


def setup_logger(
    level: str = "INFO",
    log_to_file: bool = False,
    log_dir: Path | None = None,
    json_format: bool = False,
    rotation: str = "10 MB",
    retention: str = "30 days",
) -> None:
    """
    配置日志

    Args:
        level: 日志级别 (DEBUG, INFO, WARNING, ERROR)
        log_to_file: 是否写入文件
        log_dir: 日志目录，默认 ~/.blog_domain/logs
        json_format: 是否使用JSON格式（便于日志收集系统）
        rotation: 日志文件轮转策略 (例如 "10 MB", "1 day")
        retention: 日志保留时间 (例如 "30 days", "5 files")
    """
    # 移除默认处理器
    logger.remove()

    if json_format:
        logger.add(
            sys.stderr,
            level=level,
            format="{message}",
            serialize=True,
        )
    else:
        logger.add(
            sys.stderr,
            level=level,
            format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>",
            colorize=True,
        )

    if log_to_file:
        if log_dir is None:
            log_dir = Path.home() / LOG_DIR_NAME / "logs"
        log_dir.mkdir(parents=True, exist_ok=True)

        logger.add(
            log_dir / LOG_FILE_NAME,
            level="DEBUG",
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
            rotation=rotation,
            retention=retention,
            encoding="utf-8",
            enqueue=True,
        )


def get_logger(name: str = __name__):
    """获取带名称的logger"""
    return logger.bind(name=name)


# -------------------- Request ID 追踪 --------------------

def generate_request_id() -> str:
    """生成新的请求 ID"""
    return str(uuid.uuid4())[:8]


def set_request_id(request_id: str | None = None) -> str:
    """设置当前请求的 request_id"""
    if request_id is None:
        request_id = generate_request_id()
    _request_id_var.set(request_id)
    return request_id


def get_request_id() -> str | None:
    """获取当前请求的 request_id"""
    return _request_id_var.get()


def clear_request_id() -> None:
    """清除当前请求的 request_id"""
    _request_id_var.set(None)


# -------------------- 结构化日志记录 --------------------

def log_event(
    event: str,
    level: str = "INFO",
    **kwargs: Any,
) -> None:
    """
    记录结构化事件

    Args:
        event: 事件名称
        level: 日志级别
        **kwargs: 额外的事件属性

    Examples:
        log_event("post_created", post_id=42, author_id=1)
    """
    request_id = get_request_id()
    if request_id:
        kwargs["request_id"] = request_id

    # 属性放入 extra 而不是作为格式化参数，用户文本中的花括号不会被解析
    logger.bind(event=event, **kwargs).log(
        level.upper(),
        f"[{event}] " + " ".join(f"{k}={v}" for k, v in kwargs.items()),
    )


def _event_name(event: object) -> str:
    """PostTitleUpdated -> post_title_updated"""
    return re.sub(r"(?<!^)(?=[A-Z])", "_", type(event).__name__).lower()


def record_event(event: Any) -> None:
    """
    记录领域事件

    事件为 frozen dataclass，字段原样展开为结构化日志属性。
    目前没有事件总线，日志即事件的唯一去向。
    """
    fields = {f.name: getattr(event, f.name) for f in dataclasses.fields(event)}
    log_event(_event_name(event), **fields)


__all__ = [
    "logger",
    "setup_logger",
    "get_logger",
    "generate_request_id",
    "set_request_id",
    "get_request_id",
    "clear_request_id",
    "log_event",
    "record_event",
]
