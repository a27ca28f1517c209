"""声明式字段校验：通过 ``Annotated[..., Check(...)]`` 为记录类型描述校验规则。

示例::

    class UserParam(Validatable, BaseModel):
        name: Annotated[str, Check(ValidateRule.NOT_EMPTY, ValidateRule.LENGTH, label="用户名", length="3~20")]
        age: Annotated[int, Check("NumberMin", "NumberMax", number_min=1, number_max=150)] = 0

类型创建时即把注解编译为有序的 :class:`FieldDescriptor` 表并登记，
配置错误会立刻以 :class:`DescriptorError` 暴露；``validate()`` 按声明顺序
逐个字段校验，遇到首个失败立即返回。
"""

from __future__ import annotations

from datetime import date, datetime, time
from enum import Enum
from typing import (
    Annotated,
    Any,
    Dict,
    Iterable,
    Optional,
    Set,
    Tuple,
    Union,
    get_args,
    get_origin,
    get_type_hints,
)

from pydantic import BaseModel

from backoffice.validation.descriptor import FieldDescriptor
from backoffice.validation.errors import DescriptorError, ValidationError
from backoffice.validation.rules import (
    CANONICAL_ORDER,
    DEFAULT_FORMATS,
    DateTimeFormat,
    Rule,
    ValidateRule,
)
from backoffice.validation.validator import ParameterValidator

LengthSpec = Union[str, Tuple[int, int]]


def _parse_rule(raw: Union[ValidateRule, str]) -> ValidateRule:
    if isinstance(raw, ValidateRule):
        return raw
    token = str(raw).replace("_", "").lower()
    for member in ValidateRule:
        if member.name.replace("_", "").lower() == token:
            return member
    raise DescriptorError(f"未知的校验规则: {raw}")


def _parse_length(raw: LengthSpec) -> Tuple[int, int]:
    if isinstance(raw, str):
        parts = raw.split("~")
        if len(parts) != 2:
            raise DescriptorError(f"长度区间设置错误: {raw}")
        try:
            return int(parts[0]), int(parts[1])
        except ValueError as exc:
            raise DescriptorError(f"长度区间设置错误: {raw}") from exc
    min_len, max_len = raw
    return int(min_len), int(max_len)


class Check:
    """字段校验注解，``rules`` 为无序集合，编译后按固定顺序执行。

    仅给出 ``length`` / ``date_format`` / ``number_min`` / ``number_max``
    时也会启用对应规则。
    """

    __slots__ = ("rules", "label", "length", "date_format", "number_min", "number_max")

    def __init__(
        self,
        *rules: Union[ValidateRule, str],
        label: Optional[str] = None,
        length: Optional[LengthSpec] = None,
        date_format: Union[DateTimeFormat, str, None] = None,
        number_min: Optional[int] = None,
        number_max: Optional[int] = None,
    ) -> None:
        self.rules = frozenset(_parse_rule(rule) for rule in rules)
        self.label = label
        self.length = _parse_length(length) if length is not None else None
        try:
            self.date_format = DateTimeFormat.parse(date_format) if date_format is not None else None
        except ValueError as exc:
            raise DescriptorError(str(exc)) from exc
        self.number_min = number_min
        self.number_max = number_max

    def __repr__(self) -> str:
        names = ", ".join(sorted(rule.name for rule in self.rules))
        return f"Check({names}, label={self.label!r})"

    def compile(self, field_name: str) -> FieldDescriptor:
        """把注解编译为字段描述符。"""
        label = self.label or field_name
        if ValidateRule.NESTED in self.rules:
            return FieldDescriptor(label=label, rules=(Rule.NESTED,))

        enabled: Set[Rule] = set()
        for kind in (ValidateRule.NOT_EMPTY, ValidateRule.LENGTH, ValidateRule.OPTIONAL_LENGTH):
            if kind in self.rules:
                enabled.add(Rule(kind.value))
        if self.length is not None and Rule.OPTIONAL_LENGTH not in enabled:
            enabled.add(Rule.LENGTH)

        date_format = self.date_format
        for kind in (ValidateRule.DATE, ValidateRule.TIME, ValidateRule.DATE_TIME):
            if kind in self.rules:
                date_format = date_format or DEFAULT_FORMATS[kind]
        if date_format is not None:
            enabled.add(Rule.DATE_FORMAT)

        if ValidateRule.NUMBER_MIN in self.rules or self.number_min is not None:
            enabled.add(Rule.NUMBER_MIN)
        if ValidateRule.NUMBER_MAX in self.rules or self.number_max is not None:
            enabled.add(Rule.NUMBER_MAX)

        return FieldDescriptor(
            label=label,
            rules=tuple(rule for rule in CANONICAL_ORDER if rule in enabled),
            length=self.length,
            date_format=date_format,
            number_min=self.number_min,
            number_max=self.number_max,
        )


def as_text(value: Any, date_format: Optional[DateTimeFormat] = None) -> str:
    """把字段取值转换为参与校验的文本表示。

    给出 ``date_format`` 时日期时间对象按该格式渲染，否则使用 ISO 格式。
    """
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return as_text(value.value, date_format)
    if isinstance(value, (datetime, date, time)):
        if date_format is not None:
            return value.strftime(date_format.pattern)
        return value.isoformat()
    return str(value)


def _find_check(metadata: Iterable[Any]) -> Optional[Check]:
    for item in metadata:
        if isinstance(item, Check):
            return item
    return None


def _plain_class_checks(cls: type) -> Iterable[Tuple[str, Check]]:
    hints = get_type_hints(cls, include_extras=True)
    for name, hint in hints.items():
        if get_origin(hint) is Annotated:
            check = _find_check(get_args(hint)[1:])
            if check is not None:
                yield name, check


def _model_checks(cls: type) -> Iterable[Tuple[str, Check]]:
    for name, info in cls.model_fields.items():
        check = _find_check(info.metadata)
        if check is not None:
            yield name, check


FieldTable = Tuple[Tuple[str, FieldDescriptor], ...]

_REGISTRY: Dict[type, FieldTable] = {}


def register(cls: type) -> FieldTable:
    """编译并登记 ``cls`` 的字段描述符表（字段按声明顺序，父类字段在前）。"""
    source = _model_checks(cls) if issubclass(cls, BaseModel) else _plain_class_checks(cls)
    table = tuple((name, check.compile(name)) for name, check in source)
    _REGISTRY[cls] = table
    return table


class Validatable:
    """可校验记录的混入类，pydantic 模型需把它放在 ``BaseModel`` 之前。"""

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        # pydantic 模型的字段要等模型构建完成后才可用
        if not issubclass(cls, BaseModel):
            register(cls)

    @classmethod
    def __pydantic_init_subclass__(cls, **kwargs: Any) -> None:
        super().__pydantic_init_subclass__(**kwargs)
        register(cls)

    @classmethod
    def field_descriptors(cls) -> FieldTable:
        table = _REGISTRY.get(cls)
        if table is None:
            table = register(cls)
        return table

    def validate(self) -> Optional[ValidationError]:
        """逐字段校验，全部通过返回 ``None``，否则返回首个错误。"""
        for name, descriptor in self.field_descriptors():
            raw = getattr(self, name, None)
            value = raw if descriptor.is_nested else as_text(raw, descriptor.date_format)
            error = ParameterValidator.validate_value(value, descriptor)
            if error is not None:
                return error
        return None

    def is_valid(self) -> bool:
        return self.validate() is None
