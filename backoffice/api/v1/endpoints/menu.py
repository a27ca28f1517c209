"""菜单管理相关的路由定义。"""

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from backoffice.api.v1.schemas.common import StatusParam
from backoffice.api.v1.schemas.menu import MenuEditParam, MenuParam, MenuQuery, MenuTree, MenuView, RouterVO
from backoffice.core.dependencies import get_db
from backoffice.services.menu_service import menu_service
from backoffice.wrapper import ListWrapper, PageWrapper, ResponseWrapper

router = APIRouter(prefix="/menu", tags=["menu"])


@router.post("/list", response_model=PageWrapper[MenuView])
def list_menus(query: MenuQuery, db: Session = Depends(get_db)) -> PageWrapper[MenuView]:
    return menu_service.list_menus(db, query)


@router.get("/tree", response_model=ListWrapper[MenuTree])
def menu_tree(db: Session = Depends(get_db)) -> ListWrapper[MenuTree]:
    return menu_service.menu_tree(db)


@router.get("/routers", response_model=ListWrapper[RouterVO])
def routers(db: Session = Depends(get_db)) -> ListWrapper[RouterVO]:
    return menu_service.routers(db)


@router.post("", response_model=ResponseWrapper)
def add_menu(params: MenuParam, db: Session = Depends(get_db)) -> ResponseWrapper:
    return menu_service.add_menu(db, params)


@router.put("", response_model=ResponseWrapper)
def edit_menu(params: MenuEditParam, db: Session = Depends(get_db)) -> ResponseWrapper:
    return menu_service.edit_menu(db, params)


@router.put("/status", response_model=ResponseWrapper)
def edit_menu_status(params: StatusParam, db: Session = Depends(get_db)) -> ResponseWrapper:
    return menu_service.edit_menu_status(db, params)


@router.delete("/{menu_id}", response_model=ResponseWrapper)
def delete_menu(menu_id: str, db: Session = Depends(get_db)) -> ResponseWrapper:
    return menu_service.delete_menu(db, menu_id)
