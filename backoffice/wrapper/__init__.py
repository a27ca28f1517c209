"""统一响应包装与分页参数。"""

from backoffice.wrapper.codes import WrapperCode
from backoffice.wrapper.page_info import PageInfo
from backoffice.wrapper.response import ListWrapper, PageWrapper, ResponseWrapper, SingleWrapper

__all__ = [
    "ListWrapper",
    "PageInfo",
    "PageWrapper",
    "ResponseWrapper",
    "SingleWrapper",
    "WrapperCode",
]
