"""响应码定义：统一响应结构中 ``code`` 字段的取值范围。"""

from enum import IntEnum


class WrapperCode(IntEnum):
    """响应码，``code == 1`` 是唯一的成功状态。"""

    SUCCESS = 1
    FAIL = -1
    UNKNOWN_ERROR = -2

    @property
    def message(self) -> str:
        return _DEFAULT_MESSAGES[self]

    @classmethod
    def from_code(cls, code: int) -> "WrapperCode":
        """未知的响应码统一视为 ``UNKNOWN_ERROR``。"""
        try:
            return cls(code)
        except ValueError:
            return cls.UNKNOWN_ERROR


_DEFAULT_MESSAGES = {
    WrapperCode.SUCCESS: "Success",
    WrapperCode.FAIL: "Fail",
    WrapperCode.UNKNOWN_ERROR: "Unknown Error",
}
