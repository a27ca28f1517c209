"""API v1 汇总路由：统一挂载所有业务子路由。"""

from fastapi import APIRouter

from backoffice.api.v1.endpoints import dept, index, menu, role, user

api_router = APIRouter()
api_router.include_router(index.router)
api_router.include_router(dept.router)
api_router.include_router(user.router)
api_router.include_router(role.router)
api_router.include_router(menu.router)
