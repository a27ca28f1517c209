"""部门模型：以 ``parent_id`` 邻接表表达组织树。"""

from typing import Optional

from sqlalchemy import Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from backoffice.core.enums import StatusEnum
from backoffice.models.base import ID_LENGTH, AuditMixin, Base, IdMixin, RemarkMixin


class Dept(IdMixin, AuditMixin, RemarkMixin, Base):
    """部门实体，同一父节点下名称唯一。"""

    __tablename__ = "sys_dept"
    __table_args__ = (UniqueConstraint("parent_id", "name", name="uq_sys_dept_parent_name"),)

    name: Mapped[str] = mapped_column(String(30), index=True)
    email: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    telephone: Mapped[Optional[str]] = mapped_column(String(11), nullable=True)
    address: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)
    logo: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    parent_id: Mapped[Optional[str]] = mapped_column(String(ID_LENGTH), nullable=True, index=True)
    seq_no: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    status: Mapped[int] = mapped_column(Integer, default=StatusEnum.ENABLE.value, nullable=False)
