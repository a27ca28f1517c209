"""通用请求与响应模型。"""

from __future__ import annotations

from typing import Annotated, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from backoffice.validation import Check, Validatable, ValidateRule


class CamelModel(BaseModel):
    """以驼峰命名对外输出字段的视图基类，同时接受下划线命名输入。"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class IdListParam(BaseModel):
    """整体替换关联关系时提交的主键集合。"""

    ids: List[str] = Field(default_factory=list, description="关联对象 ID 集合")


class StatusParam(Validatable, BaseModel):
    """按请求体修改状态。"""

    id: Annotated[Optional[str], Check(ValidateRule.NOT_EMPTY, label="ID")] = None
    status: Annotated[
        Optional[int],
        Check(ValidateRule.NOT_EMPTY, label="状态", number_min=0, number_max=1),
    ] = None
