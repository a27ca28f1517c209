"""角色 CRUD：管理角色实体的常用查询。"""

from __future__ import annotations

from typing import List, Optional, Tuple

from sqlalchemy.orm import Session

from backoffice.crud.base import CRUDBase
from backoffice.models.role import Role


class CRUDRole(CRUDBase[Role]):
    def get_by_name(self, db: Session, name: str) -> Optional[Role]:
        return self.query(db).filter(Role.name == name).first()

    def get_by_key(self, db: Session, role_key: str) -> Optional[Role]:
        return self.query(db).filter(Role.role_key == role_key).first()

    def list_all(self, db: Session) -> List[Role]:
        return self.query(db).order_by(Role.seq_no.asc(), Role.id.asc()).all()

    def list_page(self, db: Session, *, skip: int = 0, limit: int = 20) -> Tuple[List[Role], int]:
        query = self.query(db)
        total = query.count()
        items = (
            query.order_by(Role.seq_no.asc(), Role.id.asc())
            .offset(max(skip, 0))
            .limit(max(limit, 1))
            .all()
        )
        return items, total


role_crud = CRUDRole(Role)
