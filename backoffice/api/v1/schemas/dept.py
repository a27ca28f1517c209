"""部门管理相关的请求与响应模型。"""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, List, Optional

from pydantic import BaseModel, Field

from backoffice.api.v1.schemas.common import CamelModel
from backoffice.validation import Check, Validatable, ValidateRule


class DeptQuery(BaseModel):
    """部门列表筛选条件。"""

    name: Optional[str] = Field(default=None, description="部门名称模糊匹配")
    status: Optional[int] = Field(default=None, description="部门状态")


class DeptParam(Validatable, BaseModel):
    """新增部门的请求体。"""

    parent_id: Optional[str] = Field(default=None, description="父部门 ID，为空表示顶级部门")
    name: Annotated[
        Optional[str], Check(ValidateRule.NOT_EMPTY, ValidateRule.LENGTH, label="部门名称", length="1~30")
    ] = None
    email: Annotated[Optional[str], Check(ValidateRule.OPTIONAL_LENGTH, label="邮箱", length="1~50")] = None
    telephone: Annotated[
        Optional[str], Check(ValidateRule.OPTIONAL_LENGTH, label="联系电话", length="1~11")
    ] = None
    address: Annotated[Optional[str], Check(ValidateRule.OPTIONAL_LENGTH, label="地址", length="1~200")] = None
    logo: Annotated[Optional[str], Check(ValidateRule.OPTIONAL_LENGTH, label="logo地址", length="1~100")] = None
    seq_no: Annotated[Optional[int], Check(label="显示顺序", number_min=0, number_max=9999)] = None
    status: Optional[int] = Field(default=None, description="部门状态")
    remark: Annotated[Optional[str], Check(ValidateRule.OPTIONAL_LENGTH, label="备注", length="1~200")] = None


class DeptEditParam(DeptParam):
    """编辑部门的请求体。"""

    id: Annotated[Optional[str], Check(ValidateRule.NOT_EMPTY, label="部门ID")] = None


class DeptVO(CamelModel):
    """部门详情视图，附带状态描述与父部门名称。"""

    id: str
    parent_id: Optional[str] = None
    name: str
    email: Optional[str] = None
    telephone: Optional[str] = None
    address: Optional[str] = None
    logo: Optional[str] = None
    seq_no: int = 0
    status: int
    status_desc: Optional[str] = None
    parent_name: Optional[str] = None
    create_by: Optional[str] = None
    create_time: Optional[datetime] = None
    update_by: Optional[str] = None
    update_time: Optional[datetime] = None
    remark: Optional[str] = None


class DeptTree(CamelModel):
    id: str
    parent_id: Optional[str] = None
    name: str
    children: List["DeptTree"] = Field(default_factory=list)


DeptTree.model_rebuild()
