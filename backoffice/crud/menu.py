"""菜单 CRUD：分页、树形与前端路由查询。"""

from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

from sqlalchemy.orm import Session

from backoffice.core.enums import StatusEnum
from backoffice.crud.base import CRUDBase
from backoffice.models.menu import Menu


class CRUDMenu(CRUDBase[Menu]):
    def list_with_filters(
        self,
        db: Session,
        *,
        name: Optional[str] = None,
        status: Optional[int] = None,
        skip: int = 0,
        limit: int = 20,
    ) -> Tuple[List[Menu], int]:
        query = self.query(db)
        if name:
            query = query.filter(Menu.name.ilike(f"%{name.strip()}%"))
        if status is not None:
            query = query.filter(Menu.status == status)

        total = query.count()
        items = (
            query.order_by(Menu.seq_no.asc(), Menu.id.asc())
            .offset(max(skip, 0))
            .limit(max(limit, 1))
            .all()
        )
        return items, total

    def list_all_ordered(self, db: Session) -> List[Menu]:
        return self.query(db).order_by(Menu.seq_no.asc(), Menu.id.asc()).all()

    def list_enabled_by_types(self, db: Session, menu_types: Iterable[str]) -> List[Menu]:
        """查询指定类型的启用菜单，按 ``seq_no`` 排序。"""
        return (
            self.query(db)
            .filter(Menu.menu_type.in_(list(menu_types)), Menu.status == StatusEnum.ENABLE.value)
            .order_by(Menu.seq_no.asc(), Menu.id.asc())
            .all()
        )

    def count_children(self, db: Session, parent_id: str) -> int:
        return self.query(db).filter(Menu.parent_id == parent_id).count()


menu_crud = CRUDMenu(Menu)
