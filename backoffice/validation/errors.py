"""验证错误：以不可变值对象表示单个字段的校验失败。

错误按结构相等比较，渲染后的文案沿用系统原有的中文模板，
因为这些文案会直接展示给前端用户。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar


class DescriptorError(ValueError):
    """字段描述符配置错误（属于编程错误，应在声明阶段暴露）。"""


@dataclass(frozen=True)
class ValidationError:
    """所有验证错误的公共基类。"""

    label: str

    template: ClassVar[str] = "{label} 校验失败"

    @property
    def message(self) -> str:
        return self.template.format(**self.__dict__)

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class NotEmpty(ValidationError):
    template: ClassVar[str] = "{label} 不能为空"


@dataclass(frozen=True)
class Length(ValidationError):
    bounds: str

    template: ClassVar[str] = "{label} 长度不符合要求: {bounds}"

    @classmethod
    def between(cls, label: str, min_len: int, max_len: int) -> "Length":
        return cls(label, f"length must be in {min_len}~{max_len}")


@dataclass(frozen=True)
class Format(ValidationError):
    template: ClassVar[str] = "{label} 格式不正确"


@dataclass(frozen=True)
class NumberMin(ValidationError):
    n: int

    template: ClassVar[str] = "{label} 值不能小于 {n}"


@dataclass(frozen=True)
class NumberMax(ValidationError):
    n: int

    template: ClassVar[str] = "{label} 值不能大于 {n}"
