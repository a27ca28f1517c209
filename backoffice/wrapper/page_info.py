"""分页参数：把请求中的页码与页大小规整为存储层可用的偏移量。"""

from __future__ import annotations

from typing import ClassVar, Optional

from pydantic import BaseModel, Field


class PageInfo(BaseModel):
    """分页请求参数，可作为分页查询请求体的混入基类。

    页码或页大小缺失、为 0 时使用默认值，页大小上限为 ``MAX_PAGE_SIZE``。
    """

    DEFAULT_CURRENT_PAGE: ClassVar[int] = 1
    DEFAULT_PAGE_SIZE: ClassVar[int] = 20
    MAX_PAGE_SIZE: ClassVar[int] = 1000

    current_page_num: Optional[int] = Field(default=None, ge=0, description="当前页码，从 1 开始")
    page_size: Optional[int] = Field(default=None, ge=0, description="每页条数")

    @classmethod
    def new(cls, current_page_num: Optional[int] = None, page_size: Optional[int] = None) -> "PageInfo":
        return cls(current_page_num=current_page_num, page_size=page_size)

    def effective_page(self) -> int:
        if self.current_page_num:
            return self.current_page_num
        return self.DEFAULT_CURRENT_PAGE

    def effective_page_size(self) -> int:
        size = self.page_size or self.DEFAULT_PAGE_SIZE
        return max(1, min(size, self.MAX_PAGE_SIZE))

    def offset(self) -> int:
        """计算 ``(page - 1) * size``，页码至少为 1 因此不会出现负数。"""
        return (self.effective_page() - 1) * self.effective_page_size()

    def page_info(self) -> "PageInfo":
        """从混入了分页字段的请求体中提取纯分页参数。"""
        return PageInfo(current_page_num=self.current_page_num, page_size=self.page_size)
