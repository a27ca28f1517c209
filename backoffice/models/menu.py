"""菜单模型：目录、菜单与按钮三类节点组成的权限树，同时承载前端路由配置。"""

from typing import List, Optional

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from backoffice.core.enums import MenuTypeEnum, StatusEnum
from backoffice.models.base import ID_LENGTH, AuditMixin, Base, IdMixin, RemarkMixin, sys_role_menu


class Menu(IdMixin, AuditMixin, RemarkMixin, Base):
    __tablename__ = "sys_menu"

    name: Mapped[str] = mapped_column(String(30), index=True)
    parent_id: Mapped[Optional[str]] = mapped_column(String(ID_LENGTH), nullable=True, index=True)
    seq_no: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    menu_type: Mapped[str] = mapped_column(String(1), default=MenuTypeEnum.MENU.value, nullable=False)
    url: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)
    perms: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    status: Mapped[int] = mapped_column(Integer, default=StatusEnum.ENABLE.value, nullable=False)

    # 以下为前端路由元信息，布尔含义的字段以 0/1 存储
    hidden: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    always_show: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    redirect: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)
    component: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)
    href: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)
    icon: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)
    no_cache: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    affix: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    breadcrumb: Mapped[int] = mapped_column(Integer, default=1, nullable=False)
    active_menu: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)

    roles: Mapped[List["Role"]] = relationship(  # noqa: F821
        "Role",
        secondary=sys_role_menu,
        back_populates="menus",
    )
