"""用户管理接口的集成测试。"""

import uuid

from fastapi.testclient import TestClient

from backoffice.core.constants import ADMIN_ROLE_KEY, ROOT_DEPT_NAME
from backoffice.core.security import verify_password
from backoffice.models.user import User


def _unique(prefix: str) -> str:
    return f"{prefix}_{uuid.uuid4().hex[:8]}"


def _root_dept_id(client: TestClient) -> str:
    items = client.post("/api/dept/list", json={"name": ROOT_DEPT_NAME}).json()["data"]
    return next(item["id"] for item in items if item["name"] == ROOT_DEPT_NAME)


def _create_user(client: TestClient, name: str, **extra) -> dict:
    payload = {"name": name, "password": "secret123", "dept_id": _root_dept_id(client), **extra}
    response = client.post("/api/user", json=payload)
    assert response.status_code == 200
    body = response.json()
    assert body["code"] == 1, body
    return body["data"]


def test_user_crud_flow(client: TestClient, db_session_fixture):
    name = _unique("alice")
    user = _create_user(client, name, phone_number="13800138000", sex=2)
    assert "password" not in user
    assert user["dept_name"] == ROOT_DEPT_NAME
    assert user["sex_desc"] == "女"
    assert user["status"] == 1
    assert user["status_desc"] == "启用"

    stored = db_session_fixture.query(User).filter(User.name == name).one()
    assert stored.password != "secret123"
    assert verify_password("secret123", stored.password)

    detail = client.get(f"/api/user/{user['id']}").json()
    assert detail["data"]["name"] == name

    updated = client.put(f"/api/user/{user['id']}", json={"email": "alice@example.com"}).json()
    assert updated["code"] == 1
    assert updated["data"]["email"] == "alice@example.com"
    assert updated["data"]["phone_number"] == "13800138000"

    disabled = client.put(f"/api/user/{user['id']}/status/0").json()
    assert disabled["code"] == 1
    assert client.get(f"/api/user/{user['id']}").json()["data"]["status_desc"] == "禁用"

    bad_status = client.put(f"/api/user/{user['id']}/status/7").json()
    assert bad_status["message"] == "传入的用户状态错误!"

    listed = client.get("/api/user/list").json()
    assert any(item["id"] == user["id"] for item in listed["data"])

    assert client.delete(f"/api/user/{user['id']}").json()["code"] == 1
    assert client.get(f"/api/user/{user['id']}").json() == {"code": -1, "message": "用户不存在!", "data": None}


def test_user_create_checks(client: TestClient):
    name = _unique("bob")
    _create_user(client, name)

    duplicate = client.post("/api/user", json={"name": name, "password": "secret123"}).json()
    assert duplicate["message"] == "用户名已存在!"

    short_password = client.post("/api/user", json={"name": _unique("carl"), "password": "123"}).json()
    assert short_password["message"] == "密码 长度不符合要求: length must be in 6~32"

    no_name = client.post("/api/user", json={"password": "secret123"}).json()
    assert no_name["message"] == "用户名 不能为空"

    bad_phone = client.post(
        "/api/user", json={"name": _unique("dave"), "password": "secret123", "phone_number": "123"}
    ).json()
    assert bad_phone["message"] == "手机号码 长度不符合要求: length must be in 11~11"

    missing_dept = client.post(
        "/api/user", json={"name": _unique("erin"), "password": "secret123", "dept_id": "missing"}
    ).json()
    assert missing_dept["message"] == "所属部门不存在!"


def test_user_query_paging_and_dates(client: TestClient):
    prefix = _unique("page")
    for index in range(3):
        _create_user(client, f"{prefix}_{index}")

    first_page = client.post(
        "/api/user/query", json={"name": prefix, "current_page_num": 1, "page_size": 2}
    ).json()
    assert first_page["code"] == 1
    assert first_page["total_count"] == 3
    assert first_page["total_pages"] == 2
    assert first_page["page_size"] == 2
    assert len(first_page["data"]) == 2

    second_page = client.post(
        "/api/user/query", json={"name": prefix, "current_page_num": 2, "page_size": 2}
    ).json()
    assert second_page["current_page_num"] == 2
    assert len(second_page["data"]) == 1

    in_range = client.post(
        "/api/user/query", json={"name": prefix, "start_date": "2000-01-01", "end_date": "2999-12-31"}
    ).json()
    assert in_range["total_count"] == 3
    assert in_range["page_size"] == 20

    future = client.post("/api/user/query", json={"name": prefix, "start_date": "2999-01-01"}).json()
    assert future["total_count"] == 0
    assert future["data"] == []

    bad_date = client.post("/api/user/query", json={"name": prefix, "start_date": "2024/01/01"}).json()
    assert bad_date["code"] == -1
    assert bad_date["message"] == "开始日期 格式不正确"


def test_user_role_assignment(client: TestClient):
    user = _create_user(client, _unique("frank"))
    roles = client.get("/api/role/list").json()["data"]
    admin = next(role for role in roles if role["role_key"] == ADMIN_ROLE_KEY)

    assigned = client.put(f"/api/user/{user['id']}/roles", json={"ids": [admin["id"], admin["id"]]}).json()
    assert assigned["code"] == 1
    user_roles = client.get(f"/api/user/{user['id']}/roles").json()["data"]
    assert [role["role_key"] for role in user_roles] == [ADMIN_ROLE_KEY]

    missing = client.put(f"/api/user/{user['id']}/roles", json={"ids": ["missing"]}).json()
    assert missing["message"] == "部分角色不存在!"

    cleared = client.put(f"/api/user/{user['id']}/roles", json={"ids": []}).json()
    assert cleared["code"] == 1
    assert client.get(f"/api/user/{user['id']}/roles").json()["data"] == []


def test_blank_fields_do_not_overwrite_user(client: TestClient):
    name = _unique("henry")
    user = _create_user(client, name, email="henry@example.com")

    updated = client.put(f"/api/user/{user['id']}", json={"name": "", "dept_id": "", "email": "  "}).json()
    assert updated["code"] == 1
    assert updated["data"]["name"] == name
    assert updated["data"]["dept_id"] == user["dept_id"]
    assert updated["data"]["email"] == "henry@example.com"

    stored = client.get(f"/api/user/{user['id']}").json()["data"]
    assert stored["name"] == name
    assert stored["dept_name"] == user["dept_name"]
