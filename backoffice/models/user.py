"""用户模型：账号信息、所属部门及角色关联。"""

from datetime import datetime
from typing import List, Optional

from sqlalchemy import DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from backoffice.core.enums import GenderEnum, StatusEnum
from backoffice.models.base import ID_LENGTH, AuditMixin, Base, IdMixin, RemarkMixin, sys_user_role


class User(IdMixin, AuditMixin, RemarkMixin, Base):
    __tablename__ = "sys_user"

    dept_id: Mapped[Optional[str]] = mapped_column(String(ID_LENGTH), nullable=True, index=True)
    name: Mapped[str] = mapped_column(String(30), unique=True, index=True)
    email: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    phone_number: Mapped[Optional[str]] = mapped_column(String(11), nullable=True)
    sex: Mapped[int] = mapped_column(Integer, default=GenderEnum.UNKNOWN.value, nullable=False)
    password: Mapped[str] = mapped_column(String(100))
    avatar: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    status: Mapped[int] = mapped_column(Integer, default=StatusEnum.ENABLE.value, nullable=False)
    login_ip: Mapped[Optional[str]] = mapped_column(String(128), nullable=True)
    login_time: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)

    roles: Mapped[List["Role"]] = relationship(  # noqa: F821
        "Role",
        secondary=sys_user_role,
        back_populates="users",
    )
