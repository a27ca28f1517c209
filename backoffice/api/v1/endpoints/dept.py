"""部门管理相关的路由定义。"""

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from backoffice.api.v1.schemas.dept import DeptEditParam, DeptParam, DeptQuery, DeptTree, DeptVO
from backoffice.core.dependencies import get_db
from backoffice.services.dept_service import dept_service
from backoffice.wrapper import ListWrapper, ResponseWrapper, SingleWrapper

router = APIRouter(prefix="/dept", tags=["dept"])


@router.post("/list", response_model=ListWrapper[DeptVO])
def list_depts(query: DeptQuery, db: Session = Depends(get_db)) -> ListWrapper[DeptVO]:
    return dept_service.list_depts(db, query)


@router.get("/tree", response_model=ListWrapper[DeptTree])
def dept_tree(db: Session = Depends(get_db)) -> ListWrapper[DeptTree]:
    return dept_service.dept_tree(db)


@router.get("/{dept_id}", response_model=SingleWrapper[DeptVO])
def get_dept(dept_id: str, db: Session = Depends(get_db)) -> SingleWrapper[DeptVO]:
    return dept_service.get_dept(db, dept_id)


@router.post("", response_model=ResponseWrapper)
def add_dept(params: DeptParam, db: Session = Depends(get_db)) -> ResponseWrapper:
    return dept_service.add_dept(db, params)


@router.put("", response_model=ResponseWrapper)
def edit_dept(params: DeptEditParam, db: Session = Depends(get_db)) -> ResponseWrapper:
    return dept_service.edit_dept(db, params)


@router.put("/{dept_id}/status/{status}", response_model=ResponseWrapper)
def edit_dept_status(dept_id: str, status: int, db: Session = Depends(get_db)) -> ResponseWrapper:
    return dept_service.edit_dept_status(db, dept_id, status)


@router.delete("/{dept_id}", response_model=ResponseWrapper)
def delete_dept(dept_id: str, db: Session = Depends(get_db)) -> ResponseWrapper:
    return dept_service.delete_dept(db, dept_id)
