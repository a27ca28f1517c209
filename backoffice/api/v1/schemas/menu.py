"""菜单管理相关的请求与响应模型。"""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from backoffice.api.v1.schemas.common import CamelModel
from backoffice.validation import Check, Validatable, ValidateRule
from backoffice.wrapper import PageInfo


class MenuQuery(PageInfo):
    name: Optional[str] = Field(default=None, description="菜单名称模糊匹配")
    status: Optional[int] = Field(default=None, description="菜单状态")


class MenuParam(Validatable, BaseModel):
    """新增菜单的请求体。"""

    name: Annotated[
        Optional[str], Check(ValidateRule.NOT_EMPTY, ValidateRule.LENGTH, label="菜单名称", length="1~30")
    ] = None
    parent_id: Optional[str] = None
    seq_no: Annotated[Optional[int], Check(label="显示顺序", number_min=0, number_max=9999)] = None
    menu_type: Annotated[
        Optional[str], Check(ValidateRule.NOT_EMPTY, ValidateRule.LENGTH, label="菜单类型", length="1~1")
    ] = None
    url: Annotated[Optional[str], Check(ValidateRule.OPTIONAL_LENGTH, label="路由地址", length="1~200")] = None
    perms: Annotated[Optional[str], Check(ValidateRule.OPTIONAL_LENGTH, label="权限标识", length="1~100")] = None
    status: Annotated[Optional[int], Check(label="菜单状态", number_min=0, number_max=1)] = None
    hidden: Optional[int] = None
    always_show: Optional[int] = None
    redirect: Annotated[Optional[str], Check(ValidateRule.OPTIONAL_LENGTH, label="重定向地址", length="1~200")] = None
    component: Annotated[Optional[str], Check(ValidateRule.OPTIONAL_LENGTH, label="组件路径", length="1~200")] = None
    href: Annotated[Optional[str], Check(ValidateRule.OPTIONAL_LENGTH, label="外部链接", length="1~200")] = None
    icon: Annotated[Optional[str], Check(ValidateRule.OPTIONAL_LENGTH, label="菜单图标", length="1~200")] = None
    no_cache: Optional[int] = None
    affix: Optional[int] = None
    breadcrumb: Optional[int] = None
    active_menu: Annotated[
        Optional[str], Check(ValidateRule.OPTIONAL_LENGTH, label="高亮菜单", length="1~200")
    ] = None
    remark: Annotated[Optional[str], Check(ValidateRule.OPTIONAL_LENGTH, label="备注", length="1~200")] = None


class MenuEditParam(MenuParam):
    id: Annotated[Optional[str], Check(ValidateRule.NOT_EMPTY, label="菜单ID")] = None


class MenuView(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    parent_id: Optional[str] = None
    seq_no: int = 0
    menu_type: str
    url: Optional[str] = None
    perms: Optional[str] = None
    status: int
    hidden: int = 0
    always_show: int = 0
    redirect: Optional[str] = None
    component: Optional[str] = None
    href: Optional[str] = None
    icon: Optional[str] = None
    no_cache: int = 0
    affix: int = 0
    breadcrumb: int = 1
    active_menu: Optional[str] = None
    create_by: Optional[str] = None
    create_time: Optional[datetime] = None
    update_by: Optional[str] = None
    update_time: Optional[datetime] = None
    remark: Optional[str] = None


class MenuTree(CamelModel):
    id: str
    parent_id: Optional[str] = None
    name: str
    seq_no: int = 0
    menu_type: str
    perms: Optional[str] = None
    status: int
    children: List["MenuTree"] = Field(default_factory=list)


class RouterMeta(CamelModel):
    """前端路由元信息。"""

    title: str
    icon: Optional[str] = None
    no_cache: bool = False
    link: Optional[str] = None
    affix: bool = False
    breadcrumb: bool = True
    active_menu: Optional[str] = None


class RouterVO(CamelModel):
    """前端动态路由节点。"""

    name: str
    path: Optional[str] = None
    hidden: bool = False
    redirect: Optional[str] = None
    component: Optional[str] = None
    always_show: bool = False
    meta: RouterMeta
    children: List["RouterVO"] = Field(default_factory=list)


MenuTree.model_rebuild()
RouterVO.model_rebuild()
