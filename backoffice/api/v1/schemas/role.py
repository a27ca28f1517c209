"""角色管理相关的请求与响应模型。"""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict

from backoffice.validation import Check, Validatable, ValidateRule


class RoleParam(Validatable, BaseModel):
    """新增或更新角色的请求体。"""

    name: Annotated[
        Optional[str], Check(ValidateRule.NOT_EMPTY, ValidateRule.LENGTH, label="角色名称", length="1~30")
    ] = None
    role_key: Annotated[
        Optional[str], Check(ValidateRule.NOT_EMPTY, ValidateRule.LENGTH, label="权限字符", length="1~100")
    ] = None
    seq_no: Annotated[Optional[int], Check(label="显示顺序", number_min=0, number_max=9999)] = None
    status: Annotated[Optional[int], Check(label="角色状态", number_min=0, number_max=1)] = None
    remark: Annotated[Optional[str], Check(ValidateRule.OPTIONAL_LENGTH, label="备注", length="1~200")] = None


class RoleView(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    role_key: str
    seq_no: int = 0
    status: int
    status_desc: Optional[str] = None
    create_by: Optional[str] = None
    create_time: Optional[datetime] = None
    update_by: Optional[str] = None
    update_time: Optional[datetime] = None
    remark: Optional[str] = None
