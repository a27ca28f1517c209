"""日志配置模块：终端彩色级别、JSON 结构化输出与请求 ID 注入。

控制台与按天轮转的文件共用同一组过滤器；``LOG_JSON`` 打开时两者都输出 JSON。
"""

import json
import logging
import logging.config
import sys
from contextvars import ContextVar
from datetime import datetime
from typing import Any, Dict, Optional

from .config import get_settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s [%(request_id)s] %(message)s"

# 文件日志保留天数
LOG_BACKUP_DAYS = 14

MANAGED_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access", "backoffice")

_request_id_ctx: ContextVar[Optional[str]] = ContextVar("request_id", default=None)


def set_request_id(request_id: Optional[str]) -> None:
    _request_id_ctx.set(request_id)


class RequestIdFilter(logging.Filter):
    """把上下文中的请求 ID 写入每条日志记录，请求之外记为 ``-``。"""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = _request_id_ctx.get() or "-"
        return True


class _LocalTimeFormatter(logging.Formatter):
    def formatTime(self, record: logging.LogRecord, datefmt: Optional[str] = None) -> str:
        stamp = datetime.fromtimestamp(record.created, get_settings().timezone_info)
        if datefmt:
            return stamp.strftime(datefmt)
        return stamp.isoformat(sep=" ", timespec="milliseconds")


class ColorFormatter(_LocalTimeFormatter):
    """仅为级别名着色，输出不是终端时保持纯文本。"""

    RESET = "\033[0m"
    LEVEL_COLORS = {
        logging.DEBUG: "\033[36m",
        logging.INFO: "\033[32m",
        logging.WARNING: "\033[33m",
        logging.ERROR: "\033[31m",
        logging.CRITICAL: "\033[1;41m",
    }

    def __init__(self, fmt: str = LOG_FORMAT, datefmt: Optional[str] = None, use_colors: Optional[bool] = None) -> None:
        super().__init__(fmt=fmt, datefmt=datefmt)
        self.use_colors = sys.stderr.isatty() if use_colors is None else use_colors

    def format(self, record: logging.LogRecord) -> str:
        color = self.LEVEL_COLORS.get(record.levelno) if self.use_colors else None
        if color is None:
            return super().format(record)
        original = record.levelname
        record.levelname = f"{color}{original}{self.RESET}"
        try:
            return super().format(record)
        finally:
            record.levelname = original


class JsonFormatter(_LocalTimeFormatter):
    """每条记录输出为一行 JSON，便于日志平台采集。"""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "ts": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "location": f"{record.module}:{record.lineno}",
            "request_id": getattr(record, "request_id", None),
            "msg": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def _handler(handler_class: str, formatter: str, level: str, **options: Any) -> Dict[str, Any]:
    return {"class": handler_class, "formatter": formatter, "level": level, "filters": ["request_id"], **options}


def build_logging_config() -> Dict[str, Any]:
    """根据当前配置生成 ``dictConfig`` 字典。"""
    settings = get_settings()
    level = settings.log_level.upper()
    console_formatter = "json" if settings.log_json else "console"
    file_formatter = "json" if settings.log_json else "plain"
    handler_names = ["console", "file"]

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "filters": {"request_id": {"()": RequestIdFilter}},
        "formatters": {
            "console": {"()": ColorFormatter},
            "plain": {"()": _LocalTimeFormatter, "fmt": LOG_FORMAT},
            "json": {"()": JsonFormatter},
        },
        "handlers": {
            "console": _handler("logging.StreamHandler", console_formatter, level),
            "file": _handler(
                "logging.handlers.TimedRotatingFileHandler",
                file_formatter,
                level,
                filename=str(settings.log_file_path),
                when="midnight",
                backupCount=LOG_BACKUP_DAYS,
                encoding="utf-8",
                delay=True,
            ),
        },
        "loggers": {
            name: {"handlers": handler_names, "level": level, "propagate": False} for name in MANAGED_LOGGERS
        },
        "root": {"handlers": handler_names, "level": level},
    }


def setup_logging() -> None:
    get_settings().log_directory.mkdir(parents=True, exist_ok=True)
    logging.config.dictConfig(build_logging_config())


logger = logging.getLogger("backoffice")
