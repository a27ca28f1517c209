"""异常处理模块：定义业务异常，并把各类异常统一转换为响应包装。

接口始终返回 HTTP 200，调用方以响应体中的 ``code`` 判断结果。
"""

from typing import Any, Optional

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from backoffice.core.logger import logger
from backoffice.validation import Validatable
from backoffice.wrapper import ResponseWrapper, WrapperCode


class AppException(Exception):
    """可预期的业务失败，由全局处理器转换为失败响应。"""

    def __init__(self, msg: str, code: WrapperCode = WrapperCode.FAIL) -> None:
        super().__init__(msg)
        self.msg = msg
        self.code = WrapperCode.from_code(code)


def ensure_valid(params: Validatable) -> None:
    """执行声明式校验，失败时抛出携带渲染后文案的 :class:`AppException`。"""
    error = params.validate()
    if error is not None:
        raise AppException(error.message)


def _envelope(code: WrapperCode, message: str) -> JSONResponse:
    wrapper = ResponseWrapper.success_default()
    if code is WrapperCode.UNKNOWN_ERROR:
        wrapper.set_unknown_error(message)
    else:
        wrapper.set_fail(message)
    # 失败响应的负载字段统一为空
    content = {**wrapper.model_dump(), "data": None}
    return JSONResponse(status_code=status.HTTP_200_OK, content=content)


def _first_error_message(errors: Any) -> str:
    if not errors:
        return "请求参数验证失败"
    first = errors[0]
    location = ".".join(str(item) for item in first.get("loc", ()) if item != "body")
    message: Optional[str] = first.get("msg")
    if location:
        return f"{location}: {message}"
    return message or "请求参数验证失败"


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    logger.info("Business failure on %s %s: %s", request.method, request.url.path, exc.msg)
    return _envelope(exc.code, exc.msg)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """请求体解析失败时只返回第一条错误。"""
    message = _first_error_message(exc.errors())
    logger.info("Request validation failed on %s %s: %s", request.method, request.url.path, message)
    return _envelope(WrapperCode.FAIL, message)


async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    return _envelope(WrapperCode.FAIL, str(exc.detail))


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """兜底处理：记录完整堆栈并返回未知错误响应。"""
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return _envelope(WrapperCode.UNKNOWN_ERROR, str(exc) or WrapperCode.UNKNOWN_ERROR.message)
