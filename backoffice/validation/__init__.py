"""字段校验子系统：规则模型、字段描述符、注解编译与运行时验证器。"""

from backoffice.validation.descriptor import DescriptorBuilder, FieldDescriptor
from backoffice.validation.errors import (
    DescriptorError,
    Format,
    Length,
    NotEmpty,
    NumberMax,
    NumberMin,
    ValidationError,
)
from backoffice.validation.rules import DateTimeFormat, Rule, ValidateRule, pattern
from backoffice.validation.validatable import Check, Validatable, as_text
from backoffice.validation.validator import ParameterValidator, parse_int64, validate_value

__all__ = [
    "Check",
    "DateTimeFormat",
    "DescriptorBuilder",
    "DescriptorError",
    "FieldDescriptor",
    "Format",
    "Length",
    "NotEmpty",
    "NumberMax",
    "NumberMin",
    "ParameterValidator",
    "Rule",
    "Validatable",
    "ValidateRule",
    "ValidationError",
    "as_text",
    "parse_int64",
    "pattern",
    "validate_value",
]
