"""菜单管理服务：分页列表、菜单树、前端路由与增删改。"""

from __future__ import annotations

from collections import defaultdict
from typing import Callable, Dict, List, Optional, TypeVar

from sqlalchemy.orm import Session

from backoffice.api.v1.schemas.common import StatusParam
from backoffice.api.v1.schemas.menu import (
    MenuEditParam,
    MenuParam,
    MenuQuery,
    MenuTree,
    MenuView,
    RouterMeta,
    RouterVO,
)
from backoffice.core.enums import MenuTypeEnum, StatusEnum
from backoffice.core.exceptions import AppException, ensure_valid
from backoffice.core.logger import logger
from backoffice.crud.menu import menu_crud
from backoffice.models.menu import Menu
from backoffice.wrapper import ListWrapper, PageWrapper, ResponseWrapper

NodeT = TypeVar("NodeT")

# 参与前端路由的菜单类型，按钮仅用于权限标识
ROUTER_MENU_TYPES = (MenuTypeEnum.DIRECTORY.value, MenuTypeEnum.MENU.value)


def build_tree(
    menus: List[Menu],
    convert: Callable[[Menu, List[NodeT]], NodeT],
    *,
    orphans_as_roots: bool = True,
) -> List[NodeT]:
    """按 ``parent_id`` 组装森林并保留输入顺序。

    父节点不在集合中的菜单默认视为根节点；``orphans_as_roots=False`` 时
    连同其子树一起丢弃（例如父目录已停用）。
    """
    known_ids = {menu.id for menu in menus}
    children_map: Dict[Optional[str], List[Menu]] = defaultdict(list)
    for menu in menus:
        if menu.parent_id is None or menu.parent_id in known_ids:
            children_map[menu.parent_id].append(menu)
        elif orphans_as_roots:
            children_map[None].append(menu)

    def build(node: Menu) -> NodeT:
        return convert(node, [build(child) for child in children_map.get(node.id, [])])

    return [build(root) for root in children_map.get(None, [])]


class MenuService:
    """聚合菜单管理相关的业务能力。"""

    def list_menus(self, db: Session, query: MenuQuery) -> PageWrapper[MenuView]:
        items, total = menu_crud.list_with_filters(
            db,
            name=query.name,
            status=query.status,
            skip=query.offset(),
            limit=query.effective_page_size(),
        )
        return PageWrapper[MenuView].ok(
            [MenuView.model_validate(item) for item in items],
            total_count=total,
            current_page_num=query.effective_page(),
            page_size=query.effective_page_size(),
        )

    def menu_tree(self, db: Session) -> ListWrapper[MenuTree]:
        def convert(menu: Menu, children: List[MenuTree]) -> MenuTree:
            return MenuTree(
                id=menu.id,
                parent_id=menu.parent_id,
                name=menu.name,
                seq_no=menu.seq_no,
                menu_type=menu.menu_type,
                perms=menu.perms,
                status=menu.status,
                children=children,
            )

        return ListWrapper[MenuTree].ok(build_tree(menu_crud.list_all_ordered(db), convert))

    def routers(self, db: Session) -> ListWrapper[RouterVO]:
        """生成前端动态路由，仅包含启用的目录与菜单。"""
        menus = menu_crud.list_enabled_by_types(db, ROUTER_MENU_TYPES)
        return ListWrapper[RouterVO].ok(build_tree(menus, self._to_router, orphans_as_roots=False))

    def add_menu(self, db: Session, params: MenuParam) -> ResponseWrapper:
        ensure_valid(params)
        self._validate_menu_type(params.menu_type)
        if params.parent_id:
            self._require_menu(db, params.parent_id, message="上级菜单不存在!")

        payload = params.model_dump(exclude_none=True)
        payload.setdefault("status", StatusEnum.ENABLE.value)
        menu = menu_crud.create(db, payload)
        logger.info("Created menu %s (%s)", menu.name, menu.id)
        return ResponseWrapper.success_default()

    def edit_menu(self, db: Session, params: MenuEditParam) -> ResponseWrapper:
        ensure_valid(params)
        menu = self._require_menu(db, params.id)
        self._validate_menu_type(params.menu_type)
        if params.parent_id:
            if params.parent_id == menu.id:
                raise AppException("上级菜单不能选择自己!")
            self._require_menu(db, params.parent_id, message="上级菜单不存在!")

        payload = params.model_dump(exclude={"id"}, exclude_none=True)
        payload["parent_id"] = params.parent_id or None
        menu_crud.update(db, menu, payload)
        return ResponseWrapper.success_default()

    def edit_menu_status(self, db: Session, params: StatusParam) -> ResponseWrapper:
        ensure_valid(params)
        member = StatusEnum.from_code(params.status)
        if member is None:
            raise AppException("传入的菜单状态错误!")
        menu = self._require_menu(db, params.id)
        menu_crud.update(db, menu, {"status": member.value})
        return ResponseWrapper.success_default()

    def delete_menu(self, db: Session, menu_id: str) -> ResponseWrapper:
        menu = self._require_menu(db, menu_id)
        if menu_crud.count_children(db, menu.id) > 0:
            raise AppException("存在子菜单，无法删除!")
        menu.roles.clear()
        menu_crud.delete(db, menu)
        logger.info("Deleted menu %s", menu_id)
        return ResponseWrapper.success_default()

    @staticmethod
    def _validate_menu_type(menu_type: str) -> None:
        if menu_type not in {member.value for member in MenuTypeEnum}:
            raise AppException("菜单类型错误，仅支持 D(目录)/M(菜单)/B(按钮)!")

    @staticmethod
    def _require_menu(db: Session, menu_id: Optional[str], *, message: str = "菜单不存在!") -> Menu:
        if not menu_id or not menu_id.strip():
            raise AppException("菜单ID不能为空!")
        menu = menu_crud.get(db, menu_id.strip())
        if menu is None:
            raise AppException(message)
        return menu

    @staticmethod
    def _to_router(menu: Menu, children: List[RouterVO]) -> RouterVO:
        path = menu.url
        if menu.parent_id is None and path and not path.startswith("/"):
            path = f"/{path}"
        return RouterVO(
            name=menu.name,
            path=path,
            hidden=bool(menu.hidden),
            redirect=menu.redirect,
            component=menu.component,
            always_show=bool(menu.always_show),
            meta=RouterMeta(
                title=menu.name,
                icon=menu.icon,
                no_cache=bool(menu.no_cache),
                link=menu.href,
                affix=bool(menu.affix),
                breadcrumb=bool(menu.breadcrumb),
                active_menu=menu.active_menu,
            ),
            children=children,
        )


menu_service = MenuService()
