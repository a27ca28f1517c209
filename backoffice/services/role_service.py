"""角色管理服务：增删改查、分页与菜单权限分配。"""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy.orm import Session

from backoffice.api.v1.schemas.menu import MenuView
from backoffice.api.v1.schemas.role import RoleParam, RoleView
from backoffice.core.enums import StatusEnum
from backoffice.core.exceptions import AppException, ensure_valid
from backoffice.core.logger import logger
from backoffice.crud.menu import menu_crud
from backoffice.crud.role import role_crud
from backoffice.models.role import Role
from backoffice.wrapper import ListWrapper, PageInfo, PageWrapper, ResponseWrapper, SingleWrapper


class RoleService:
    """聚合角色管理相关的业务能力。"""

    def get_role(self, db: Session, role_id: str) -> SingleWrapper[RoleView]:
        return SingleWrapper[RoleView].ok(self.to_view(self._require_role(db, role_id)))

    def list_roles(self, db: Session) -> ListWrapper[RoleView]:
        return ListWrapper[RoleView].ok([self.to_view(role) for role in role_crud.list_all(db)])

    def page_roles(self, db: Session, page_info: PageInfo) -> PageWrapper[RoleView]:
        items, total = role_crud.list_page(
            db, skip=page_info.offset(), limit=page_info.effective_page_size()
        )
        return PageWrapper[RoleView].ok(
            [self.to_view(item) for item in items],
            total_count=total,
            current_page_num=page_info.effective_page(),
            page_size=page_info.effective_page_size(),
        )

    def add_role(self, db: Session, params: RoleParam) -> SingleWrapper[RoleView]:
        ensure_valid(params)
        self._validate_unique(db, name=params.name, role_key=params.role_key)
        payload = params.model_dump()
        payload["seq_no"] = params.seq_no or 0
        payload["status"] = StatusEnum.ENABLE.value if params.status is None else params.status
        role = role_crud.create(db, payload)
        logger.info("Created role %s (%s)", role.role_key, role.id)
        return SingleWrapper[RoleView].ok(self.to_view(role))

    def edit_role(self, db: Session, role_id: str, params: RoleParam) -> SingleWrapper[RoleView]:
        ensure_valid(params)
        role = self._require_role(db, role_id)
        self._validate_unique(db, name=params.name, role_key=params.role_key, exclude_id=role.id)
        role_crud.update(db, role, params.model_dump(exclude_none=True))
        return SingleWrapper[RoleView].ok(self.to_view(role))

    def delete_role(self, db: Session, role_id: str) -> ResponseWrapper:
        role = self._require_role(db, role_id)
        if role.users:
            raise AppException("该角色已分配给用户，无法删除!")
        role.menus.clear()
        role_crud.delete(db, role)
        logger.info("Deleted role %s", role_id)
        return ResponseWrapper.success_default()

    def edit_role_status(self, db: Session, role_id: str, status: int) -> ResponseWrapper:
        member = StatusEnum.from_code(status)
        if member is None:
            raise AppException("传入的角色状态错误!")
        role = self._require_role(db, role_id)
        role_crud.update(db, role, {"status": member.value})
        return ResponseWrapper.success_default()

    def get_role_menus(self, db: Session, role_id: str) -> ListWrapper[MenuView]:
        role = self._require_role(db, role_id)
        menus = sorted(role.menus, key=lambda menu: (menu.seq_no, menu.id))
        return ListWrapper[MenuView].ok([MenuView.model_validate(menu) for menu in menus])

    def set_role_menus(self, db: Session, role_id: str, menu_ids: List[str]) -> ResponseWrapper:
        """整体替换角色的菜单集合。"""
        role = self._require_role(db, role_id)
        unique_ids = list(dict.fromkeys(menu_id for menu_id in menu_ids if menu_id))
        menus = menu_crud.list_by_ids(db, unique_ids)
        if len(menus) != len(unique_ids):
            raise AppException("部分菜单不存在!")
        role.menus = menus
        role_crud.update(db, role, {})
        logger.info("Assigned %d menus to role %s", len(menus), role_id)
        return ResponseWrapper.success_default()

    @staticmethod
    def to_view(role: Role) -> RoleView:
        view = RoleView.model_validate(role)
        status = StatusEnum.from_code(role.status)
        view.status_desc = status.desc if status is not None else None
        return view

    @staticmethod
    def _require_role(db: Session, role_id: Optional[str]) -> Role:
        if not role_id or not role_id.strip():
            raise AppException("角色ID不能为空!")
        role = role_crud.get(db, role_id.strip())
        if role is None:
            raise AppException("角色不存在!")
        return role

    @staticmethod
    def _validate_unique(db: Session, *, name: str, role_key: str, exclude_id: Optional[str] = None) -> None:
        by_name = role_crud.get_by_name(db, name)
        if by_name is not None and by_name.id != exclude_id:
            raise AppException("角色名称已存在!")
        by_key = role_crud.get_by_key(db, role_key)
        if by_key is not None and by_key.id != exclude_id:
            raise AppException("权限字符已存在!")


role_service = RoleService()
