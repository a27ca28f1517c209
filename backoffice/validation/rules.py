"""验证规则模型：定义封闭的规则集合与日期时间格式枚举。"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Union


class DateTimeFormat(Enum):
    """日期时间格式，每个成员携带一个 strftime 风格的模式串。"""

    TIME = "%H:%M"
    DATE_TIME = "%Y-%m-%d %H:%M:%S"
    COMPACT_DATE_TIME = "%Y%m%d%H%M%S"
    DATE = "%Y-%m-%d"
    COMPACT_DATE = "%Y%m%d"
    TIME_COMPACT = "%H%M%S"

    @property
    def pattern(self) -> str:
        return self.value

    def matches(self, value: str) -> bool:
        """判断 ``value`` 能否按当前格式解析（闰年、非法月份由 ``strptime`` 判定）。"""
        try:
            datetime.strptime(value, self.value)
        except ValueError:
            return False
        return True

    @classmethod
    def parse(cls, raw: Union["DateTimeFormat", str]) -> "DateTimeFormat":
        """接受枚举成员或其名称（``Date`` / ``DATE`` / ``CompactDate`` 均可）。"""
        if isinstance(raw, cls):
            return raw
        token = str(raw).strip()
        if token in cls.__members__:
            return cls[token]
        normalized = token.replace("_", "").lower()
        for member in cls:
            if member.name.replace("_", "").lower() == normalized:
                return member
        raise ValueError(f"未知的日期时间格式: {raw}")


def pattern(fmt: DateTimeFormat) -> str:
    """返回格式对应的模式串。"""
    return fmt.pattern


class Rule(str, Enum):
    """编译后的字段规则，取值的边界与格式统一保存在字段描述符上。"""

    NOT_EMPTY = "not_empty"
    LENGTH = "length"
    OPTIONAL_LENGTH = "optional_length"
    DATE_FORMAT = "date_format"
    NUMBER_MIN = "number_min"
    NUMBER_MAX = "number_max"
    NESTED = "nested"


class ValidateRule(str, Enum):
    """字段注解中可用的规则词汇，编译时映射为 :class:`Rule`。"""

    NOT_EMPTY = "not_empty"
    LENGTH = "length"
    OPTIONAL_LENGTH = "optional_length"
    DATE = "date"
    TIME = "time"
    DATE_TIME = "date_time"
    NUMBER_MIN = "number_min"
    NUMBER_MAX = "number_max"
    NESTED = "nested"


# 注解中的日期类规则在未显式指定 date_format 时使用的默认格式
DEFAULT_FORMATS = {
    ValidateRule.DATE: DateTimeFormat.DATE,
    ValidateRule.TIME: DateTimeFormat.TIME,
    ValidateRule.DATE_TIME: DateTimeFormat.DATE_TIME,
}

# 编译后的规则按该顺序执行
CANONICAL_ORDER = (
    Rule.NOT_EMPTY,
    Rule.LENGTH,
    Rule.OPTIONAL_LENGTH,
    Rule.DATE_FORMAT,
    Rule.NUMBER_MIN,
    Rule.NUMBER_MAX,
)
