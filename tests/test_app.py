"""应用级接口与全局异常处理的集成测试。"""

import asyncio
import json

import pytest
from fastapi.testclient import TestClient
from starlette.requests import Request

from backoffice.api.v1.schemas.common import StatusParam
from backoffice.core.exceptions import AppException, ensure_valid, generic_exception_handler
from backoffice.wrapper import WrapperCode


def test_health_check(client: TestClient):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"code": 1, "message": "Success", "data": {"status": "healthy"}}


def test_index_greeting(client: TestClient):
    payload = client.get("/api/").json()
    assert payload["code"] == 1
    assert payload["data"].startswith("Welcome to ")


def test_request_id_is_echoed(client: TestClient):
    response = client.get("/health", headers={"X-Request-ID": "req-123"})
    assert response.headers["x-request-id"] == "req-123"
    assert client.get("/health").headers["x-request-id"]


def test_unknown_route_returns_fail_envelope(client: TestClient):
    response = client.get("/api/not-exists")
    assert response.status_code == 200
    payload = response.json()
    assert payload["code"] == -1
    assert payload["data"] is None


def test_request_body_errors_return_fail_envelope(client: TestClient):
    response = client.put("/api/menu/status", json={"id": "x", "status": "abc"})
    assert response.status_code == 200
    payload = response.json()
    assert payload["code"] == -1
    assert payload["message"].startswith("status")


def test_declarative_validation_error_message(client: TestClient):
    payload = client.put("/api/menu/status", json={"id": "", "status": 1}).json()
    assert payload == {"code": -1, "message": "ID 不能为空", "data": None}

    payload = client.put("/api/menu/status", json={"id": "x", "status": 3}).json()
    assert payload["message"] == "状态 值不能大于 1"


def test_ensure_valid_raises_app_exception():
    with pytest.raises(AppException) as exc_info:
        ensure_valid(StatusParam(id="abc"))
    assert exc_info.value.msg == "状态 不能为空"
    assert exc_info.value.code is WrapperCode.FAIL
    ensure_valid(StatusParam(id="abc", status=0))


def test_generic_handler_returns_unknown_error():
    request = Request({"type": "http", "method": "GET", "path": "/boom", "headers": [], "query_string": b""})
    response = asyncio.run(generic_exception_handler(request, RuntimeError("boom")))
    assert response.status_code == 200
    assert json.loads(response.body) == {"code": -2, "message": "boom", "data": None}
