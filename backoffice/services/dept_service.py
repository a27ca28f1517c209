"""部门管理服务：列表、树形结构以及带业务校验的增删改。"""

from __future__ import annotations

from collections import defaultdict
from typing import Dict, List, Optional

from sqlalchemy.orm import Session

from backoffice.api.v1.schemas.dept import DeptEditParam, DeptParam, DeptQuery, DeptTree, DeptVO
from backoffice.core.enums import StatusEnum
from backoffice.core.exceptions import AppException, ensure_valid
from backoffice.core.logger import logger
from backoffice.crud.dept import dept_crud
from backoffice.models.dept import Dept
from backoffice.wrapper import ListWrapper, ResponseWrapper, SingleWrapper


class DeptService:
    """聚合部门管理相关的业务能力。"""

    def list_depts(self, db: Session, query: DeptQuery) -> ListWrapper[DeptVO]:
        items = dept_crud.list_with_filters(db, name=query.name, status=query.status)
        # 父部门可能不在筛选结果中，名称需从全量数据中查找
        names = {dept.id: dept.name for dept in dept_crud.list_all_ordered(db)}
        return ListWrapper[DeptVO].ok([self._to_vo(item, names) for item in items])

    def get_dept(self, db: Session, dept_id: str) -> SingleWrapper[DeptVO]:
        dept = self._require_dept(db, dept_id)
        names: Dict[str, str] = {}
        if dept.parent_id:
            parent = dept_crud.get(db, dept.parent_id)
            if parent is not None:
                names[parent.id] = parent.name
        return SingleWrapper[DeptVO].ok(self._to_vo(dept, names))

    def dept_tree(self, db: Session) -> ListWrapper[DeptTree]:
        """组装部门树，父节点缺失的部门作为根节点返回。"""
        items = dept_crud.list_all_ordered(db)
        known_ids = {item.id for item in items}
        children_map: Dict[Optional[str], List[Dept]] = defaultdict(list)
        for item in items:
            parent_id = item.parent_id if item.parent_id in known_ids else None
            children_map[parent_id].append(item)

        def build(node: Dept) -> DeptTree:
            return DeptTree(
                id=node.id,
                parent_id=node.parent_id,
                name=node.name,
                children=[build(child) for child in children_map.get(node.id, [])],
            )

        return ListWrapper[DeptTree].ok([build(root) for root in children_map.get(None, [])])

    def add_dept(self, db: Session, params: DeptParam) -> ResponseWrapper:
        ensure_valid(params)
        status = self._validate_status(params.status)
        parent_id = self._normalize_id(params.parent_id)
        if parent_id is not None:
            self._validate_parent(db, parent_id)
        self._validate_name_unique(db, parent_id=parent_id, name=params.name)

        payload = params.model_dump(exclude={"parent_id", "status"})
        payload["seq_no"] = payload.get("seq_no") or 0
        dept = dept_crud.create(db, {**payload, "parent_id": parent_id, "status": status})
        logger.info("Created department %s (%s)", dept.name, dept.id)
        return ResponseWrapper.success_default()

    def edit_dept(self, db: Session, params: DeptEditParam) -> ResponseWrapper:
        ensure_valid(params)
        dept = self._require_dept(db, params.id)
        parent_id = self._normalize_id(params.parent_id)
        if parent_id is not None:
            if parent_id == dept.id:
                raise AppException("上级部门不能选择自己!")
            self._validate_parent(db, parent_id)
        status = self._validate_status(params.status)
        self._validate_name_unique(db, parent_id=parent_id, name=params.name, exclude_id=dept.id)

        payload = params.model_dump(exclude={"id", "parent_id", "status"}, exclude_none=True)
        dept_crud.update(db, dept, {**payload, "parent_id": parent_id, "status": status})
        logger.info("Updated department %s", dept.id)
        return ResponseWrapper.success_default()

    def edit_dept_status(self, db: Session, dept_id: str, status: int) -> ResponseWrapper:
        status = self._validate_status(status)
        dept = self._require_dept(db, dept_id)
        dept_crud.update(db, dept, {"status": status})
        return ResponseWrapper.success_default()

    def delete_dept(self, db: Session, dept_id: str) -> ResponseWrapper:
        dept = self._require_dept(db, dept_id)
        if dept_crud.count_children(db, dept.id) > 0:
            raise AppException("该部门下存在子部门，无法删除!")
        dept_crud.delete(db, dept)
        logger.info("Deleted department %s", dept_id)
        return ResponseWrapper.success_default()

    @staticmethod
    def _normalize_id(raw: Optional[str]) -> Optional[str]:
        if raw is None:
            return None
        trimmed = raw.strip()
        return trimmed or None

    def _require_dept(self, db: Session, dept_id: Optional[str]) -> Dept:
        trimmed = self._normalize_id(dept_id)
        if trimmed is None:
            raise AppException("部门ID不能为空!")
        dept = dept_crud.get(db, trimmed)
        if dept is None:
            raise AppException("传入的部门信息不存在!")
        return dept

    @staticmethod
    def _validate_status(status: Optional[int]) -> int:
        if status is None:
            raise AppException("部门状态不能为空!")
        member = StatusEnum.from_code(status)
        if member is None:
            raise AppException("传入的部门状态错误!")
        return member.value

    @staticmethod
    def _validate_parent(db: Session, parent_id: str) -> Dept:
        parent = dept_crud.get(db, parent_id)
        if parent is None:
            raise AppException("传入的父级部门信息不存在!")
        if parent.status == StatusEnum.DISABLE:
            raise AppException("传入的父级部门已停用!")
        return parent

    @staticmethod
    def _validate_name_unique(
        db: Session, *, parent_id: Optional[str], name: str, exclude_id: Optional[str] = None
    ) -> None:
        existing = dept_crud.get_sibling_by_name(db, parent_id=parent_id, name=name, exclude_id=exclude_id)
        if existing is not None:
            raise AppException("已存在相同部门名称!")

    @staticmethod
    def _to_vo(dept: Dept, names: Dict[str, str]) -> DeptVO:
        vo = DeptVO.model_validate(dept)
        member = StatusEnum.from_code(dept.status)
        vo.status_desc = member.desc if member is not None else None
        vo.parent_name = names.get(dept.parent_id) if dept.parent_id else None
        return vo


dept_service = DeptService()
