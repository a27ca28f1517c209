"""应用入口：负责创建 FastAPI 实例并绑定生命周期事件。"""

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from backoffice.api.v1 import api_router
from backoffice.core import exceptions
from backoffice.core.config import get_settings
from backoffice.core.exceptions import AppException
from backoffice.core.logger import logger, setup_logging
from backoffice.db.init_db import init_db
from backoffice.middleware.request_id import RequestIdMiddleware
from backoffice.wrapper import SingleWrapper

setup_logging()
settings = get_settings()

app = FastAPI(title=settings.project_name, debug=settings.debug)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["X-Request-ID"],
)
app.add_middleware(RequestIdMiddleware)


@app.on_event("startup")
async def startup_event() -> None:
    """初始化数据库状态，确认服务可用后输出成功日志。"""
    init_db()
    logger.info("SUCCESS - Application running at http://127.0.0.1:%s", settings.app_port)


@app.exception_handler(AppException)
async def custom_app_exception_handler(request, exc):
    return await exceptions.app_exception_handler(request, exc)


@app.exception_handler(StarletteHTTPException)
async def custom_http_exception_handler(request, exc):
    """将路由未命中等 ``HTTPException`` 转换为统一的响应结构。"""
    return await exceptions.http_exception_handler(request, exc)


@app.exception_handler(RequestValidationError)
async def custom_validation_exception_handler(request, exc):
    return await exceptions.validation_exception_handler(request, exc)


@app.exception_handler(Exception)
async def custom_generic_exception_handler(request, exc):
    """捕获未预料异常并包装为标准错误响应。"""
    return await exceptions.generic_exception_handler(request, exc)


@app.get("/health", response_model=SingleWrapper[dict])
def health_check() -> SingleWrapper[dict]:
    """提供健康检查接口，便于编排器与监控系统探活。"""
    return SingleWrapper[dict].ok({"status": "healthy"})


app.include_router(api_router, prefix=settings.api_prefix)
