"""CRUD 基类：为各实体提供通用的数据访问方法。"""

from typing import Any, Dict, Generic, Iterable, List, Optional, Type, TypeVar

from sqlalchemy.orm import Query, Session

from backoffice.core.config import get_settings
from backoffice.models.base import Base

ModelType = TypeVar("ModelType", bound=Base)


class CRUDBase(Generic[ModelType]):
    """封装常见的查询、创建、保存与删除逻辑。"""

    def __init__(self, model: Type[ModelType]):
        self.model = model

    def query(self, db: Session) -> Query:
        return db.query(self.model)

    def get(self, db: Session, id: Any) -> Optional[ModelType]:
        return self.query(db).filter(self.model.id == id).first()

    def list_by_ids(self, db: Session, ids: Iterable[str]) -> List[ModelType]:
        id_set = {item for item in ids if item}
        if not id_set:
            return []
        return self.query(db).filter(self.model.id.in_(id_set)).all()

    def create(
        self,
        db: Session,
        obj_in: Dict[str, Any],
        *,
        operator: Optional[str] = None,
        auto_commit: bool = True,
    ) -> ModelType:
        """新建记录，未显式给出时 ``create_by`` 取当前操作人。"""
        payload = dict(obj_in)
        if hasattr(self.model, "create_by") and payload.get("create_by") is None:
            payload["create_by"] = operator or get_settings().default_operator
        db_obj = self.model(**payload)
        db.add(db_obj)
        if auto_commit:
            db.commit()
            db.refresh(db_obj)
        return db_obj

    def update(
        self,
        db: Session,
        db_obj: ModelType,
        obj_in: Dict[str, Any],
        *,
        operator: Optional[str] = None,
        auto_commit: bool = True,
    ) -> ModelType:
        for key, value in obj_in.items():
            setattr(db_obj, key, value)
        if hasattr(db_obj, "update_by"):
            db_obj.update_by = operator or get_settings().default_operator
        return self.save(db, db_obj, auto_commit=auto_commit)

    def save(self, db: Session, db_obj: ModelType, *, auto_commit: bool = True) -> ModelType:
        db.add(db_obj)
        if auto_commit:
            db.commit()
            db.refresh(db_obj)
        return db_obj

    def delete(self, db: Session, db_obj: ModelType, *, auto_commit: bool = True) -> None:
        """物理删除记录。"""
        db.delete(db_obj)
        if auto_commit:
            try:
                db.commit()
            except Exception:
                db.rollback()
                raise
