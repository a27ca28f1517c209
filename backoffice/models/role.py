"""角色模型：关联用户与菜单权限。"""

from typing import List

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from backoffice.core.enums import StatusEnum
from backoffice.models.base import AuditMixin, Base, IdMixin, RemarkMixin, sys_role_menu, sys_user_role


class Role(IdMixin, AuditMixin, RemarkMixin, Base):
    """角色实体，名称与权限字符均全局唯一。"""

    __tablename__ = "sys_role"

    name: Mapped[str] = mapped_column(String(30), unique=True, index=True)
    role_key: Mapped[str] = mapped_column(String(100), unique=True, index=True)
    seq_no: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    status: Mapped[int] = mapped_column(Integer, default=StatusEnum.ENABLE.value, nullable=False)

    users: Mapped[List["User"]] = relationship(  # noqa: F821
        "User",
        secondary=sys_user_role,
        back_populates="roles",
    )
    menus: Mapped[List["Menu"]] = relationship(  # noqa: F821
        "Menu",
        secondary=sys_role_menu,
        back_populates="roles",
    )
