"""参数验证器：按字段描述符对单个取值执行规则，返回首个失败。"""

from __future__ import annotations

import re
from typing import Any, Optional

from backoffice.validation.descriptor import INT64_MAX, INT64_MIN, FieldDescriptor
from backoffice.validation.errors import Format, Length, NotEmpty, NumberMax, NumberMin, ValidationError
from backoffice.validation.rules import Rule

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


def parse_int64(value: str) -> Optional[int]:
    """按有符号 64 位整数解析，失败（含溢出）时返回 ``None``。"""
    if not _INTEGER_PATTERN.fullmatch(value):
        return None
    number = int(value)
    if not INT64_MIN <= number <= INT64_MAX:
        return None
    return number


class ParameterValidator:
    """无状态的验证器，所有方法均为纯函数，可在任意并发环境中调用。"""

    @classmethod
    def validate_value(cls, value: Any, descriptor: FieldDescriptor) -> Optional[ValidationError]:
        """校验 ``value``，通过返回 ``None``，否则返回第一个 :class:`ValidationError`。

        带 ``NESTED`` 规则的字段完全委托给取值自身的 ``validate()``，
        其余规则忽略；其它字段的取值必须是文本。
        """
        if descriptor.is_nested:
            return cls.validate_nested(value)

        for rule in descriptor.rules:
            if rule is Rule.NOT_EMPTY:
                error = cls.validate_not_empty(value, descriptor)
            elif rule is Rule.LENGTH:
                error = cls.validate_length(value, descriptor)
            elif rule is Rule.OPTIONAL_LENGTH:
                error = cls.validate_optional_length(value, descriptor)
            elif rule is Rule.DATE_FORMAT:
                error = cls.validate_date_format(value, descriptor)
            elif rule is Rule.NUMBER_MIN:
                error = cls.validate_number_min(value, descriptor)
            elif rule is Rule.NUMBER_MAX:
                error = cls.validate_number_max(value, descriptor)
            else:
                error = None
            if error is not None:
                return error
        return None

    @staticmethod
    def validate_not_empty(value: str, descriptor: FieldDescriptor) -> Optional[ValidationError]:
        if len(value) == 0:
            return NotEmpty(descriptor.label)
        return None

    @staticmethod
    def validate_length(value: str, descriptor: FieldDescriptor) -> Optional[ValidationError]:
        min_len, max_len = descriptor.length
        if not min_len <= len(value) <= max_len:
            return Length.between(descriptor.label, min_len, max_len)
        return None

    @classmethod
    def validate_optional_length(cls, value: str, descriptor: FieldDescriptor) -> Optional[ValidationError]:
        if not value:
            return None
        return cls.validate_length(value, descriptor)

    @staticmethod
    def validate_date_format(value: str, descriptor: FieldDescriptor) -> Optional[ValidationError]:
        if value and not descriptor.date_format.matches(value):
            return Format(descriptor.label)
        return None

    @staticmethod
    def validate_number_min(value: str, descriptor: FieldDescriptor) -> Optional[ValidationError]:
        # 非整数文本直接放行，与既有行为保持一致
        number = parse_int64(value)
        if number is not None and number < descriptor.number_min:
            return NumberMin(descriptor.label, descriptor.number_min)
        return None

    @staticmethod
    def validate_number_max(value: str, descriptor: FieldDescriptor) -> Optional[ValidationError]:
        number = parse_int64(value)
        if number is not None and number > descriptor.number_max:
            return NumberMax(descriptor.label, descriptor.number_max)
        return None

    @staticmethod
    def validate_nested(value: Any) -> Optional[ValidationError]:
        """委托子对象校验：``None`` 跳过，列表按顺序逐项校验。"""
        if value is None:
            return None
        items = value if isinstance(value, (list, tuple)) else (value,)
        for item in items:
            if item is None:
                continue
            error = item.validate()
            if error is not None:
                return error
        return None


validate_value = ParameterValidator.validate_value
