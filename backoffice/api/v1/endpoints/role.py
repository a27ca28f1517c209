"""角色管理相关的路由定义。"""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from backoffice.api.v1.schemas.common import IdListParam
from backoffice.api.v1.schemas.menu import MenuView
from backoffice.api.v1.schemas.role import RoleParam, RoleView
from backoffice.core.dependencies import get_db
from backoffice.services.role_service import role_service
from backoffice.wrapper import ListWrapper, PageInfo, PageWrapper, ResponseWrapper, SingleWrapper

router = APIRouter(prefix="/role", tags=["role"])


@router.get("/list", response_model=ListWrapper[RoleView])
def list_roles(db: Session = Depends(get_db)) -> ListWrapper[RoleView]:
    return role_service.list_roles(db)


@router.get("/page", response_model=PageWrapper[RoleView])
def page_roles(
    page_num: Optional[int] = Query(None, ge=0, description="页码，从 1 开始"),
    page_size: Optional[int] = Query(None, ge=0, description="每页数量"),
    db: Session = Depends(get_db),
) -> PageWrapper[RoleView]:
    return role_service.page_roles(db, PageInfo.new(page_num, page_size))


@router.get("/{role_id}", response_model=SingleWrapper[RoleView])
def get_role(role_id: str, db: Session = Depends(get_db)) -> SingleWrapper[RoleView]:
    return role_service.get_role(db, role_id)


@router.post("", response_model=SingleWrapper[RoleView])
def add_role(params: RoleParam, db: Session = Depends(get_db)) -> SingleWrapper[RoleView]:
    return role_service.add_role(db, params)


@router.put("/{role_id}", response_model=SingleWrapper[RoleView])
def edit_role(role_id: str, params: RoleParam, db: Session = Depends(get_db)) -> SingleWrapper[RoleView]:
    return role_service.edit_role(db, role_id, params)


@router.delete("/{role_id}", response_model=ResponseWrapper)
def delete_role(role_id: str, db: Session = Depends(get_db)) -> ResponseWrapper:
    return role_service.delete_role(db, role_id)


@router.put("/{role_id}/status/{status}", response_model=ResponseWrapper)
def edit_role_status(role_id: str, status: int, db: Session = Depends(get_db)) -> ResponseWrapper:
    return role_service.edit_role_status(db, role_id, status)


@router.get("/{role_id}/menus", response_model=ListWrapper[MenuView])
def get_role_menus(role_id: str, db: Session = Depends(get_db)) -> ListWrapper[MenuView]:
    return role_service.get_role_menus(db, role_id)


@router.put("/{role_id}/menus", response_model=ResponseWrapper)
def set_role_menus(role_id: str, params: IdListParam, db: Session = Depends(get_db)) -> ResponseWrapper:
    return role_service.set_role_menus(db, role_id, params.ids)
