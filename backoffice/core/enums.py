"""枚举定义：约束状态、性别与菜单类型的可选值。"""

from enum import Enum, IntEnum
from typing import Optional


class StatusEnum(IntEnum):
    ENABLE = 1
    DISABLE = 0

    @property
    def desc(self) -> str:
        return "启用" if self is StatusEnum.ENABLE else "禁用"

    @classmethod
    def from_code(cls, code: Optional[int]) -> Optional["StatusEnum"]:
        """不在枚举范围内的状态码返回 ``None``。"""
        if code is None:
            return None
        try:
            return cls(int(code))
        except ValueError:
            return None


class GenderEnum(IntEnum):
    UNKNOWN = 0
    MALE = 1
    FEMALE = 2

    @property
    def label(self) -> str:
        return _GENDER_LABELS[self]

    @classmethod
    def from_code(cls, code: Optional[int]) -> "GenderEnum":
        """未知取值统一视为未说明性别。"""
        try:
            return cls(int(code))
        except (TypeError, ValueError):
            return cls.UNKNOWN


_GENDER_LABELS = {
    GenderEnum.UNKNOWN: "未说明性别",
    GenderEnum.MALE: "男",
    GenderEnum.FEMALE: "女",
}


class MenuTypeEnum(str, Enum):
    """菜单类型：目录、菜单、按钮。"""

    DIRECTORY = "D"
    MENU = "M"
    BUTTON = "B"
