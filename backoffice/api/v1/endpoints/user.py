"""用户管理相关的路由定义。"""

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from backoffice.api.v1.schemas.common import IdListParam
from backoffice.api.v1.schemas.role import RoleView
from backoffice.api.v1.schemas.user import UserCreateParam, UserQuery, UserUpdateParam, UserView
from backoffice.core.dependencies import get_db
from backoffice.services.user_service import user_service
from backoffice.wrapper import ListWrapper, PageWrapper, ResponseWrapper, SingleWrapper

router = APIRouter(prefix="/user", tags=["user"])


# 固定路径需在 /{user_id} 之前注册
@router.get("/list", response_model=ListWrapper[UserView])
def list_users(db: Session = Depends(get_db)) -> ListWrapper[UserView]:
    return user_service.list_users(db)


@router.post("/query", response_model=PageWrapper[UserView])
def query_users(query: UserQuery, db: Session = Depends(get_db)) -> PageWrapper[UserView]:
    return user_service.query_users(db, query)


@router.get("/{user_id}", response_model=SingleWrapper[UserView])
def get_user(user_id: str, db: Session = Depends(get_db)) -> SingleWrapper[UserView]:
    return user_service.get_user(db, user_id)


@router.post("", response_model=SingleWrapper[UserView])
def add_user(params: UserCreateParam, db: Session = Depends(get_db)) -> SingleWrapper[UserView]:
    return user_service.add_user(db, params)


@router.put("/{user_id}", response_model=SingleWrapper[UserView])
def edit_user(user_id: str, params: UserUpdateParam, db: Session = Depends(get_db)) -> SingleWrapper[UserView]:
    return user_service.edit_user(db, user_id, params)


@router.delete("/{user_id}", response_model=ResponseWrapper)
def delete_user(user_id: str, db: Session = Depends(get_db)) -> ResponseWrapper:
    return user_service.delete_user(db, user_id)


@router.put("/{user_id}/status/{status}", response_model=ResponseWrapper)
def edit_user_status(user_id: str, status: int, db: Session = Depends(get_db)) -> ResponseWrapper:
    return user_service.edit_user_status(db, user_id, status)


@router.get("/{user_id}/roles", response_model=ListWrapper[RoleView])
def get_user_roles(user_id: str, db: Session = Depends(get_db)) -> ListWrapper[RoleView]:
    return user_service.get_user_roles(db, user_id)


@router.put("/{user_id}/roles", response_model=ResponseWrapper)
def set_user_roles(user_id: str, params: IdListParam, db: Session = Depends(get_db)) -> ResponseWrapper:
    return user_service.set_user_roles(db, user_id, params.ids)
