"""模型基类：统一声明式基类、审计字段与多对多关联表。

- Base：SQLAlchemy 声明式基类，带统一命名约定；
- AuditMixin：``create_by`` / ``create_time`` / ``update_by`` / ``update_time``；
- RemarkMixin：``remark`` 备注；
- 两张关联表 ``sys_user_role`` 与 ``sys_role_menu``。
"""

import uuid
from datetime import datetime
from typing import Optional

from sqlalchemy import Column, DateTime, ForeignKey, MetaData, String, Table, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}

metadata_obj = MetaData(naming_convention=convention)

ID_LENGTH = 32


def generate_id() -> str:
    """32 位无连字符的 UUID 字符串主键。"""
    return uuid.uuid4().hex


class Base(DeclarativeBase):
    """全局声明式基类，附带一致的命名约定。"""

    metadata = metadata_obj


class IdMixin:
    id: Mapped[str] = mapped_column(String(ID_LENGTH), primary_key=True, default=generate_id)


class AuditMixin:
    """审计字段：记录创建人、更新人及对应时间。"""

    create_by: Mapped[Optional[str]] = mapped_column(String(30), nullable=True)
    create_time: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )
    update_by: Mapped[Optional[str]] = mapped_column(String(30), nullable=True)
    update_time: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True),
        onupdate=func.now(),
        nullable=True,
    )


class RemarkMixin:
    remark: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)


sys_user_role = Table(
    "sys_user_role",
    Base.metadata,
    Column("user_id", String(ID_LENGTH), ForeignKey("sys_user.id", ondelete="CASCADE"), primary_key=True),
    Column("role_id", String(ID_LENGTH), ForeignKey("sys_role.id", ondelete="CASCADE"), primary_key=True),
)

sys_role_menu = Table(
    "sys_role_menu",
    Base.metadata,
    Column("role_id", String(ID_LENGTH), ForeignKey("sys_role.id", ondelete="CASCADE"), primary_key=True),
    Column("menu_id", String(ID_LENGTH), ForeignKey("sys_menu.id", ondelete="CASCADE"), primary_key=True),
)
