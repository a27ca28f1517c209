"""部门 CRUD：树形查询与同级唯一性检查。"""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy.orm import Session

from backoffice.crud.base import CRUDBase
from backoffice.models.dept import Dept


class CRUDDept(CRUDBase[Dept]):
    def list_with_filters(
        self,
        db: Session,
        *,
        name: Optional[str] = None,
        status: Optional[int] = None,
    ) -> List[Dept]:
        query = self.query(db)
        if name:
            query = query.filter(Dept.name.ilike(f"%{name.strip()}%"))
        if status is not None:
            query = query.filter(Dept.status == status)
        return query.order_by(Dept.seq_no.asc(), Dept.create_time.asc()).all()

    def list_all_ordered(self, db: Session) -> List[Dept]:
        return self.query(db).order_by(Dept.seq_no.asc(), Dept.create_time.asc()).all()

    def get_sibling_by_name(
        self,
        db: Session,
        *,
        parent_id: Optional[str],
        name: str,
        exclude_id: Optional[str] = None,
    ) -> Optional[Dept]:
        """在同一父节点下按名称查找部门，``exclude_id`` 用于编辑时排除自身。"""
        query = self.query(db).filter(Dept.name == name)
        if parent_id is None:
            query = query.filter(Dept.parent_id.is_(None))
        else:
            query = query.filter(Dept.parent_id == parent_id)
        if exclude_id is not None:
            query = query.filter(Dept.id != exclude_id)
        return query.first()

    def count_children(self, db: Session, parent_id: str) -> int:
        return self.query(db).filter(Dept.parent_id == parent_id).count()


dept_crud = CRUDDept(Dept)
