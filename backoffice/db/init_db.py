"""数据库初始化：建表并写入基础角色与根部门。"""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from backoffice.core.config import get_settings
from backoffice.core.constants import DEFAULT_ROLES, ROOT_DEPT_NAME
from backoffice.core.enums import StatusEnum
from backoffice.db import session as db_session
from backoffice.models.base import Base
from backoffice.models.dept import Dept
from backoffice.models.role import Role

# 确保所有模型在 create_all 之前完成注册
import backoffice.models  # noqa: F401

logger = logging.getLogger(__name__)


def init_db() -> None:
    """创建缺失的数据表并写入基础数据，可重复执行。"""
    Base.metadata.create_all(bind=db_session.engine)

    session = db_session.SessionLocal()
    try:
        _seed_roles(session)
        _seed_root_dept(session)
        session.commit()
    except Exception:
        session.rollback()
        logger.exception("Failed to seed default data during database initialization")
        raise
    finally:
        session.close()


def _seed_roles(db: Session) -> None:
    operator = get_settings().default_operator
    for definition in DEFAULT_ROLES:
        existing = db.query(Role).filter(Role.role_key == definition["role_key"]).first()
        if existing is not None:
            continue
        db.add(Role(status=StatusEnum.ENABLE.value, create_by=operator, **definition))
        logger.info("Seeded role %s", definition["role_key"])
    db.flush()


def _seed_root_dept(db: Session) -> None:
    existing = (
        db.query(Dept)
        .filter(Dept.parent_id.is_(None), Dept.name == ROOT_DEPT_NAME)
        .first()
    )
    if existing is None:
        db.add(
            Dept(
                name=ROOT_DEPT_NAME,
                seq_no=0,
                status=StatusEnum.ENABLE.value,
                create_by=get_settings().default_operator,
            )
        )
        db.flush()
