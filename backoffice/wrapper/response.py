"""统一响应包装：单对象、列表与分页三种响应结构。

所有包装器共享扁平的 ``code`` / ``message`` 头部，序列化后与负载字段
处于同一层级::

    {"code": 1, "message": "Success", "data": [...], "total_count": 42, ...}

状态切换规则：``set_success`` 写入负载；``set_fail`` / ``set_unknown_error``
清空负载，分页计数复位为 ``(0, 0, 1, 0)``。
"""

from __future__ import annotations

from typing import Callable, Generic, List, Optional, TypeVar

from pydantic import BaseModel

from backoffice.wrapper.codes import WrapperCode

T = TypeVar("T")
U = TypeVar("U")


class ResponseWrapper(BaseModel):
    """响应头部，同时也是不携带负载的响应。"""

    code: int = WrapperCode.SUCCESS.value
    message: str = WrapperCode.SUCCESS.message

    @classmethod
    def success_default(cls):
        return cls()

    @classmethod
    def fail_default(cls):
        wrapper = cls()
        wrapper.set_fail(WrapperCode.FAIL.message)
        return wrapper

    @classmethod
    def unknown_error_default(cls):
        wrapper = cls()
        wrapper.set_unknown_error(WrapperCode.UNKNOWN_ERROR.message)
        return wrapper

    @classmethod
    def fail(cls, message: str):
        wrapper = cls()
        wrapper.set_fail(message)
        return wrapper

    @classmethod
    def unknown_error(cls, message: str):
        wrapper = cls()
        wrapper.set_unknown_error(message)
        return wrapper

    def is_success(self) -> bool:
        return self.code == WrapperCode.SUCCESS

    @property
    def status(self) -> WrapperCode:
        return WrapperCode.from_code(self.code)

    def _set_header(self, code: WrapperCode, message: str) -> None:
        self.code = code.value
        self.message = message

    def _clear_payload(self) -> None:
        """子类在失败时清空各自的负载字段。"""

    def set_fail(self, message: str) -> None:
        self._set_header(WrapperCode.FAIL, message)
        self._clear_payload()

    def set_unknown_error(self, message: str) -> None:
        self._set_header(WrapperCode.UNKNOWN_ERROR, message)
        self._clear_payload()


class SingleWrapper(ResponseWrapper, Generic[T]):
    """携带单个对象的响应。"""

    data: Optional[T] = None

    @classmethod
    def ok(cls, data: T) -> "SingleWrapper[T]":
        wrapper = cls()
        wrapper.set_success(data)
        return wrapper

    def set_success(self, data: T) -> None:
        self._set_header(WrapperCode.SUCCESS, WrapperCode.SUCCESS.message)
        self.data = data

    def _clear_payload(self) -> None:
        self.data = None


class ListWrapper(ResponseWrapper, Generic[T]):
    """携带对象列表的响应。"""

    data: Optional[List[T]] = None

    @classmethod
    def ok(cls, data: List[T]) -> "ListWrapper[T]":
        wrapper = cls()
        wrapper.set_success(data)
        return wrapper

    def set_success(self, data: List[T]) -> None:
        self._set_header(WrapperCode.SUCCESS, WrapperCode.SUCCESS.message)
        self.data = list(data)

    def _clear_payload(self) -> None:
        self.data = None

    def map(self, func: Callable[[T], U]) -> "ListWrapper[U]":
        """逐项转换负载并保留响应头部，失败响应原样透传。"""
        mapped = None if self.data is None else [func(item) for item in self.data]
        return ListWrapper(code=self.code, message=self.message, data=mapped)


class PageWrapper(ResponseWrapper, Generic[T]):
    """携带分页数据的响应。"""

    data: Optional[List[T]] = None
    total_count: int = 0
    total_pages: int = 0
    current_page_num: int = 1
    page_size: int = 0

    @classmethod
    def ok(
        cls,
        data: List[T],
        total_count: int,
        current_page_num: int,
        page_size: int,
        total_pages: Optional[int] = None,
    ) -> "PageWrapper[T]":
        wrapper = cls()
        wrapper.set_success(data, total_count, current_page_num, page_size, total_pages)
        return wrapper

    def set_success(
        self,
        data: List[T],
        total_count: int,
        current_page_num: int,
        page_size: int,
        total_pages: Optional[int] = None,
    ) -> None:
        """写入分页结果，``total_pages`` 缺省时按 ``ceil(total_count / page_size)`` 计算。"""
        if total_pages is None:
            total_pages = -(-total_count // page_size) if page_size > 0 else 0
        self._set_header(WrapperCode.SUCCESS, WrapperCode.SUCCESS.message)
        self.data = list(data)
        self.total_count = total_count
        self.total_pages = total_pages
        self.current_page_num = current_page_num
        self.page_size = page_size

    def _clear_payload(self) -> None:
        self.data = None
        self.total_count = 0
        self.total_pages = 0
        self.current_page_num = 1
        self.page_size = 0
