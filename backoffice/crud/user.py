"""用户 CRUD：按名称查询与组合条件分页。"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional, Tuple

from sqlalchemy.orm import Session

from backoffice.crud.base import CRUDBase
from backoffice.models.user import User


class CRUDUser(CRUDBase[User]):
    def get_by_name(self, db: Session, name: str) -> Optional[User]:
        return self.query(db).filter(User.name == name).first()

    def list_all(self, db: Session) -> List[User]:
        return self.query(db).order_by(User.create_time.asc(), User.id.asc()).all()

    def list_with_filters(
        self,
        db: Session,
        *,
        name: Optional[str] = None,
        phone_number: Optional[str] = None,
        status: Optional[int] = None,
        dept_id: Optional[str] = None,
        created_from: Optional[datetime] = None,
        created_before: Optional[datetime] = None,
        skip: int = 0,
        limit: int = 20,
    ) -> Tuple[List[User], int]:
        """组合查询用户并返回 ``(当前页, 总数)``，创建时间区间左闭右开。"""
        query = self.query(db)
        if name:
            query = query.filter(User.name.ilike(f"%{name.strip()}%"))
        if phone_number:
            query = query.filter(User.phone_number.ilike(f"%{phone_number.strip()}%"))
        if status is not None:
            query = query.filter(User.status == status)
        if dept_id:
            query = query.filter(User.dept_id == dept_id)
        if created_from is not None:
            query = query.filter(User.create_time >= created_from)
        if created_before is not None:
            query = query.filter(User.create_time < created_before)

        total = query.count()
        items = (
            query.order_by(User.create_time.asc(), User.id.asc())
            .offset(max(skip, 0))
            .limit(max(limit, 1))
            .all()
        )
        return items, total


user_crud = CRUDUser(User)
