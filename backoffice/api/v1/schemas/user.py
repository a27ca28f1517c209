"""用户管理相关的请求与响应模型。"""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, Field

from backoffice.validation import Check, Validatable, ValidateRule
from backoffice.wrapper import PageInfo


class UserCreateParam(Validatable, BaseModel):
    """新增用户的请求体。"""

    name: Annotated[
        Optional[str], Check(ValidateRule.NOT_EMPTY, ValidateRule.LENGTH, label="用户名", length="2~30")
    ] = None
    password: Annotated[
        Optional[str], Check(ValidateRule.NOT_EMPTY, ValidateRule.LENGTH, label="密码", length="6~32")
    ] = None
    dept_id: Optional[str] = Field(default=None, description="所属部门 ID")
    email: Annotated[Optional[str], Check(ValidateRule.OPTIONAL_LENGTH, label="邮箱", length="1~50")] = None
    phone_number: Annotated[
        Optional[str], Check(ValidateRule.OPTIONAL_LENGTH, label="手机号码", length="11~11")
    ] = None
    sex: Annotated[Optional[int], Check(label="性别", number_min=0, number_max=2)] = None
    avatar: Annotated[Optional[str], Check(ValidateRule.OPTIONAL_LENGTH, label="头像", length="1~100")] = None
    status: Annotated[Optional[int], Check(label="用户状态", number_min=0, number_max=1)] = None
    remark: Annotated[Optional[str], Check(ValidateRule.OPTIONAL_LENGTH, label="备注", length="1~200")] = None


class UserUpdateParam(Validatable, BaseModel):
    """更新用户的请求体，未提供或为空白的字段保持不变。"""

    name: Annotated[Optional[str], Check(ValidateRule.OPTIONAL_LENGTH, label="用户名", length="2~30")] = None
    password: Annotated[Optional[str], Check(ValidateRule.OPTIONAL_LENGTH, label="密码", length="6~32")] = None
    dept_id: Optional[str] = None
    email: Annotated[Optional[str], Check(ValidateRule.OPTIONAL_LENGTH, label="邮箱", length="1~50")] = None
    phone_number: Annotated[
        Optional[str], Check(ValidateRule.OPTIONAL_LENGTH, label="手机号码", length="11~11")
    ] = None
    sex: Annotated[Optional[int], Check(label="性别", number_min=0, number_max=2)] = None
    avatar: Annotated[Optional[str], Check(ValidateRule.OPTIONAL_LENGTH, label="头像", length="1~100")] = None
    status: Annotated[Optional[int], Check(label="用户状态", number_min=0, number_max=1)] = None
    remark: Annotated[Optional[str], Check(ValidateRule.OPTIONAL_LENGTH, label="备注", length="1~200")] = None


class UserQuery(Validatable, PageInfo):
    """用户分页查询条件，创建日期区间为闭区间。"""

    name: Optional[str] = None
    phone_number: Optional[str] = None
    status: Optional[int] = None
    dept_id: Optional[str] = None
    start_date: Annotated[Optional[str], Check(ValidateRule.DATE, label="开始日期")] = None
    end_date: Annotated[Optional[str], Check(ValidateRule.DATE, label="结束日期")] = None


class UserView(BaseModel):
    """用户视图，不包含密码。"""

    model_config = ConfigDict(from_attributes=True)

    id: str
    dept_id: Optional[str] = None
    dept_name: Optional[str] = None
    name: str
    email: Optional[str] = None
    phone_number: Optional[str] = None
    sex: int = 0
    sex_desc: Optional[str] = None
    avatar: Optional[str] = None
    status: int
    status_desc: Optional[str] = None
    login_ip: Optional[str] = None
    login_time: Optional[datetime] = None
    create_by: Optional[str] = None
    create_time: Optional[datetime] = None
    update_by: Optional[str] = None
    update_time: Optional[datetime] = None
    remark: Optional[str] = None
