"""日志配置的单元测试。"""

import json
import logging

from backoffice.core.logger import (
    MANAGED_LOGGERS,
    ColorFormatter,
    JsonFormatter,
    RequestIdFilter,
    build_logging_config,
    set_request_id,
)


def _record(message: str = "hello", level: int = logging.INFO) -> logging.LogRecord:
    return logging.LogRecord("backoffice.test", level, __file__, 12, message, None, None)


def test_request_id_filter_uses_context():
    record = _record()
    set_request_id("req-9")
    try:
        assert RequestIdFilter().filter(record)
    finally:
        set_request_id(None)
    assert record.request_id == "req-9"

    outside = _record()
    RequestIdFilter().filter(outside)
    assert outside.request_id == "-"


def test_json_formatter_emits_one_object_per_record():
    record = _record("部门已创建")
    record.request_id = "req-1"
    payload = json.loads(JsonFormatter().format(record))
    assert payload["msg"] == "部门已创建"
    assert payload["level"] == "INFO"
    assert payload["request_id"] == "req-1"
    assert payload["location"].endswith(":12")


def test_color_formatter_only_colors_level_name():
    record = _record()
    record.request_id = "-"
    colored = ColorFormatter(use_colors=True).format(record)
    assert "\033[32mINFO\033[0m" in colored
    assert record.levelname == "INFO"
    assert "\033[" not in ColorFormatter(use_colors=False).format(record)


def test_logging_config_covers_managed_loggers():
    config = build_logging_config()
    assert set(config["loggers"]) == set(MANAGED_LOGGERS)
    assert config["handlers"]["file"]["when"] == "midnight"
    assert all(handler["filters"] == ["request_id"] for handler in config["handlers"].values())
