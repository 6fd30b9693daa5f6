"""
日志配置模块

支持 text 和 JSON 两种格式。FSM 库本身只通过 logging.getLogger 记录日志，
由调用方决定是否调用 setup_logging。
"""
import json
import logging
import sys
from datetime import datetime, timezone
from typing import Optional

from config.settings import settings


class JSONFormatter(logging.Formatter):
    """JSON 格式日志格式化器"""

    def format(self, record: logging.LogRecord) -> str:
        log_obj = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        # 添加额外字段
        if hasattr(record, "extra_data"):
            log_obj.update(record.extra_data)

        # 添加异常信息
        if record.exc_info:
            log_obj["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_obj, ensure_ascii=False)


class TextFormatter(logging.Formatter):
    """文本格式日志格式化器，转换字段以 key=value 追加在消息后"""

    def __init__(self):
        super().__init__(
            fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    def format(self, record: logging.LogRecord) -> str:
        text = super().format(record)
        extra_data = getattr(record, "extra_data", None)
        if extra_data:
            fields = " ".join(f"{key}={value}" for key, value in extra_data.items())
            text = f"{text} | {fields}"
        return text


def setup_logging(
    level: Optional[str] = None,
    format_type: Optional[str] = None,
    log_file: Optional[str] = None,
) -> None:
    """
    配置日志

    Args:
        level: 日志级别 (DEBUG, INFO, WARNING, ERROR)
        format_type: 日志格式 (text, json)
        log_file: 日志文件路径 (可选)
    """
    log_level = getattr(logging, (level or settings.LOG_LEVEL).upper(), logging.INFO)
    log_format = format_type or settings.LOG_FORMAT

    formatter: logging.Formatter
    if log_format == "json":
        formatter = JSONFormatter()
    else:
        formatter = TextFormatter()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)

    # 只配置 fsm 命名空间，不影响调用方的根日志
    fsm_logger = logging.getLogger("fsm")
    fsm_logger.setLevel(log_level)
    fsm_logger.handlers.clear()
    fsm_logger.addHandler(console_handler)

    file_path = log_file or settings.LOG_FILE
    if file_path:
        file_handler = logging.FileHandler(str(file_path), encoding="utf-8")
        file_handler.setFormatter(formatter)
        fsm_logger.addHandler(file_handler)

