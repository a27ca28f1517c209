"""用户管理服务：分页查询、增删改与角色分配。"""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import List, Optional

from sqlalchemy.orm import Session

from backoffice.api.v1.schemas.role import RoleView
from backoffice.api.v1.schemas.user import UserCreateParam, UserQuery, UserUpdateParam, UserView
from backoffice.core.enums import GenderEnum, StatusEnum
from backoffice.core.exceptions import AppException, ensure_valid
from backoffice.core.logger import logger
from backoffice.core.security import get_password_hash
from backoffice.crud.dept import dept_crud
from backoffice.crud.role import role_crud
from backoffice.crud.user import user_crud
from backoffice.models.user import User
from backoffice.services.role_service import role_service
from backoffice.validation import DateTimeFormat
from backoffice.wrapper import ListWrapper, PageWrapper, ResponseWrapper, SingleWrapper


class UserService:
    """聚合用户管理相关的业务能力，响应中从不包含密码。"""

    def get_user(self, db: Session, user_id: str) -> SingleWrapper[UserView]:
        return SingleWrapper[UserView].ok(self._to_view(db, self._require_user(db, user_id)))

    def list_users(self, db: Session) -> ListWrapper[UserView]:
        return ListWrapper[UserView].ok([self._to_view(db, user) for user in user_crud.list_all(db)])

    def query_users(self, db: Session, query: UserQuery) -> PageWrapper[UserView]:
        ensure_valid(query)
        page_info = query.page_info()
        items, total = user_crud.list_with_filters(
            db,
            name=query.name,
            phone_number=query.phone_number,
            status=query.status,
            dept_id=query.dept_id,
            created_from=self._parse_date(query.start_date),
            created_before=self._parse_end_date(query.end_date),
            skip=page_info.offset(),
            limit=page_info.effective_page_size(),
        )
        return PageWrapper[UserView].ok(
            [self._to_view(db, item) for item in items],
            total_count=total,
            current_page_num=page_info.effective_page(),
            page_size=page_info.effective_page_size(),
        )

    def add_user(self, db: Session, params: UserCreateParam) -> SingleWrapper[UserView]:
        ensure_valid(params)
        if user_crud.get_by_name(db, params.name) is not None:
            raise AppException("用户名已存在!")
        self._validate_dept(db, params.dept_id)

        payload = params.model_dump(exclude={"password", "sex", "status"})
        payload["password"] = get_password_hash(params.password)
        payload["sex"] = GenderEnum.from_code(params.sex).value
        payload["status"] = StatusEnum.ENABLE.value if params.status is None else params.status
        user = user_crud.create(db, payload)
        logger.info("Created user %s (%s)", user.name, user.id)
        return SingleWrapper[UserView].ok(self._to_view(db, user))

    def edit_user(self, db: Session, user_id: str, params: UserUpdateParam) -> SingleWrapper[UserView]:
        ensure_valid(params)
        user = self._require_user(db, user_id)
        if params.name and params.name != user.name:
            if user_crud.get_by_name(db, params.name) is not None:
                raise AppException("用户名已存在!")
        if params.dept_id:
            self._validate_dept(db, params.dept_id)

        # 空白字符串视为未提供，不覆盖原值
        payload = {
            key: value
            for key, value in params.model_dump(exclude={"password"}, exclude_none=True).items()
            if not (isinstance(value, str) and not value.strip())
        }
        if params.password:
            payload["password"] = get_password_hash(params.password)
        user_crud.update(db, user, payload)
        return SingleWrapper[UserView].ok(self._to_view(db, user))

    def delete_user(self, db: Session, user_id: str) -> ResponseWrapper:
        user = self._require_user(db, user_id)
        user.roles.clear()
        user_crud.delete(db, user)
        logger.info("Deleted user %s", user_id)
        return ResponseWrapper.success_default()

    def edit_user_status(self, db: Session, user_id: str, status: int) -> ResponseWrapper:
        member = StatusEnum.from_code(status)
        if member is None:
            raise AppException("传入的用户状态错误!")
        user = self._require_user(db, user_id)
        user_crud.update(db, user, {"status": member.value})
        return ResponseWrapper.success_default()

    def get_user_roles(self, db: Session, user_id: str) -> ListWrapper[RoleView]:
        user = self._require_user(db, user_id)
        roles = sorted(user.roles, key=lambda role: (role.seq_no, role.id))
        return ListWrapper[RoleView].ok([role_service.to_view(role) for role in roles])

    def set_user_roles(self, db: Session, user_id: str, role_ids: List[str]) -> ResponseWrapper:
        """整体替换用户的角色集合。"""
        user = self._require_user(db, user_id)
        unique_ids = list(dict.fromkeys(role_id for role_id in role_ids if role_id))
        roles = role_crud.list_by_ids(db, unique_ids)
        if len(roles) != len(unique_ids):
            raise AppException("部分角色不存在!")
        user.roles = roles
        user_crud.update(db, user, {})
        logger.info("Assigned %d roles to user %s", len(roles), user_id)
        return ResponseWrapper.success_default()

    @staticmethod
    def _require_user(db: Session, user_id: Optional[str]) -> User:
        if not user_id or not user_id.strip():
            raise AppException("用户ID不能为空!")
        user = user_crud.get(db, user_id.strip())
        if user is None:
            raise AppException("用户不存在!")
        return user

    @staticmethod
    def _validate_dept(db: Session, dept_id: Optional[str]) -> None:
        if dept_id and dept_crud.get(db, dept_id) is None:
            raise AppException("所属部门不存在!")

    @staticmethod
    def _parse_date(raw: Optional[str]) -> Optional[datetime]:
        if not raw:
            return None
        return datetime.strptime(raw, DateTimeFormat.DATE.pattern)

    @classmethod
    def _parse_end_date(cls, raw: Optional[str]) -> Optional[datetime]:
        # 结束日期包含当天
        parsed = cls._parse_date(raw)
        return parsed + timedelta(days=1) if parsed is not None else None

    @staticmethod
    def _to_view(db: Session, user: User) -> UserView:
        view = UserView.model_validate(user)
        status = StatusEnum.from_code(user.status)
        view.status_desc = status.desc if status is not None else None
        view.sex_desc = GenderEnum.from_code(user.sex).label
        if user.dept_id:
            dept = dept_crud.get(db, user.dept_id)
            view.dept_name = dept.name if dept is not None else None
        return view


user_service = UserService()
