"""字段描述符：汇总单个字段的标签、规则与边界配置。"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from backoffice.validation.errors import DescriptorError
from backoffice.validation.rules import DateTimeFormat, Rule

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


@dataclass(frozen=True)
class FieldDescriptor:
    """编译完成的字段校验配置，构建后不可变，可被任意线程复用。

    ``length`` 由 ``LENGTH`` 与 ``OPTIONAL_LENGTH`` 共享，``number_min`` /
    ``number_max`` 分别供对应的数值规则使用。缺失必需边界时在构造阶段抛出
    :class:`DescriptorError`。
    """

    label: str
    rules: Tuple[Rule, ...] = ()
    length: Optional[Tuple[int, int]] = None
    date_format: Optional[DateTimeFormat] = None
    number_min: Optional[int] = None
    number_max: Optional[int] = None

    def __post_init__(self) -> None:
        if not self.label:
            raise DescriptorError("字段标签不能为空")
        if self.length is not None:
            _check_length(*self.length)
        for bound in (self.number_min, self.number_max):
            if bound is not None and not INT64_MIN <= bound <= INT64_MAX:
                raise DescriptorError(f"{self.label}: 数值边界超出 64 位整数范围")
        if (
            self.number_min is not None
            and self.number_max is not None
            and self.number_min > self.number_max
        ):
            raise DescriptorError(f"{self.label}: 数值区间设置错误 {self.number_min}~{self.number_max}")

        for rule in self.rules:
            if rule in (Rule.LENGTH, Rule.OPTIONAL_LENGTH) and self.length is None:
                raise DescriptorError(f"{self.label}: 长度规则缺少长度区间")
            if rule is Rule.DATE_FORMAT and self.date_format is None:
                raise DescriptorError(f"{self.label}: 日期规则缺少日期格式")
            if rule is Rule.NUMBER_MIN and self.number_min is None:
                raise DescriptorError(f"{self.label}: 最小值规则缺少下限")
            if rule is Rule.NUMBER_MAX and self.number_max is None:
                raise DescriptorError(f"{self.label}: 最大值规则缺少上限")

    @property
    def is_nested(self) -> bool:
        return Rule.NESTED in self.rules

    @classmethod
    def new(cls, label: str) -> "DescriptorBuilder":
        return DescriptorBuilder(label)


def _check_length(min_len: int, max_len: int) -> None:
    if min_len < 0:
        raise DescriptorError(f"长度区间设置错误: 最小长度 {min_len} 不能为负数")
    if min_len > max_len:
        raise DescriptorError(f"长度区间设置错误: {min_len}~{max_len}")


class DescriptorBuilder:
    """链式构建 :class:`FieldDescriptor`，``rule`` 的追加顺序即执行顺序。"""

    def __init__(self, label: str) -> None:
        self.label = label
        self._rules: List[Rule] = []
        self._length: Optional[Tuple[int, int]] = None
        self._date_format: Optional[DateTimeFormat] = None
        self._number_min: Optional[int] = None
        self._number_max: Optional[int] = None

    def rule(self, rule: Rule) -> "DescriptorBuilder":
        self._rules.append(Rule(rule))
        return self

    def length(self, min_len: int, max_len: int) -> "DescriptorBuilder":
        _check_length(min_len, max_len)
        self._length = (min_len, max_len)
        return self

    def date_format(self, fmt: DateTimeFormat) -> "DescriptorBuilder":
        self._date_format = DateTimeFormat.parse(fmt)
        return self

    def number_range(
        self, min_value: Optional[int] = None, max_value: Optional[int] = None
    ) -> "DescriptorBuilder":
        self._number_min = min_value
        self._number_max = max_value
        return self

    def build(self) -> FieldDescriptor:
        return FieldDescriptor(
            label=self.label,
            rules=tuple(self._rules),
            length=self._length,
            date_format=self._date_format,
            number_min=self._number_min,
            number_max=self._number_max,
        )
