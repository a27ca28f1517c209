"""角色管理接口的集成测试。"""

import uuid

from fastapi.testclient import TestClient

from backoffice.core.constants import ADMIN_ROLE_KEY, COMMON_ROLE_KEY


def _unique(prefix: str) -> str:
    return f"{prefix}-{uuid.uuid4().hex[:6]}"


def _create_role(client: TestClient, name: str, role_key: str, **extra) -> dict:
    body = client.post("/api/role", json={"name": name, "role_key": role_key, **extra}).json()
    assert body["code"] == 1, body
    return body["data"]


def _create_menu(client: TestClient, name: str) -> str:
    assert client.post("/api/menu", json={"name": name, "menu_type": "M"}).json()["code"] == 1
    items = client.post("/api/menu/list", json={"name": name}).json()["data"]
    return next(item["id"] for item in items if item["name"] == name)


def test_seeded_roles(client: TestClient):
    roles = client.get("/api/role/list").json()["data"]
    keys = [role["role_key"] for role in roles]
    assert ADMIN_ROLE_KEY in keys
    assert COMMON_ROLE_KEY in keys
    assert keys.index(ADMIN_ROLE_KEY) < keys.index(COMMON_ROLE_KEY)


def test_role_crud_flow(client: TestClient):
    name = _unique("审计员")
    key = _unique("auditor")
    role = _create_role(client, name, key, seq_no=10, remark="只读")
    assert role["status"] == 1
    assert role["status_desc"] == "启用"

    assert client.get(f"/api/role/{role['id']}").json()["data"]["role_key"] == key

    dup_name = client.post("/api/role", json={"name": name, "role_key": _unique("other")}).json()
    assert dup_name["message"] == "角色名称已存在!"
    dup_key = client.post("/api/role", json={"name": _unique("其他"), "role_key": key}).json()
    assert dup_key["message"] == "权限字符已存在!"

    renamed = _unique("审计")
    edited = client.put(f"/api/role/{role['id']}", json={"name": renamed, "role_key": key}).json()
    assert edited["code"] == 1
    assert edited["data"]["name"] == renamed
    assert edited["data"]["seq_no"] == 10

    assert client.put(f"/api/role/{role['id']}/status/0").json()["code"] == 1
    assert client.get(f"/api/role/{role['id']}").json()["data"]["status_desc"] == "禁用"
    assert client.put(f"/api/role/{role['id']}/status/9").json()["message"] == "传入的角色状态错误!"

    assert client.delete(f"/api/role/{role['id']}").json()["code"] == 1
    assert client.get(f"/api/role/{role['id']}").json()["message"] == "角色不存在!"


def test_role_param_validation(client: TestClient):
    no_key = client.post("/api/role", json={"name": _unique("角色")}).json()
    assert no_key == {"code": -1, "message": "权限字符 不能为空", "data": None}

    bad_status = client.post("/api/role", json={"name": _unique("角色"), "role_key": _unique("k"), "status": 2}).json()
    assert bad_status["message"] == "角色状态 值不能大于 1"


def test_role_paging(client: TestClient):
    _create_role(client, _unique("分页"), _unique("paging"))
    page = client.get("/api/role/page", params={"page_num": 1, "page_size": 1}).json()
    assert page["code"] == 1
    assert page["page_size"] == 1
    assert len(page["data"]) == 1
    assert page["total_count"] >= 3
    assert page["total_pages"] == page["total_count"]

    defaults = client.get("/api/role/page").json()
    assert defaults["current_page_num"] == 1
    assert defaults["page_size"] == 20

    negative = client.get("/api/role/page", params={"page_num": -1}).json()
    assert negative["code"] == -1


def test_role_menu_assignment_and_delete_guard(client: TestClient):
    role = _create_role(client, _unique("运营"), _unique("ops"))
    menu_a = _create_menu(client, _unique("菜单A"))
    menu_b = _create_menu(client, _unique("菜单B"))

    assigned = client.put(f"/api/role/{role['id']}/menus", json={"ids": [menu_a, menu_b]}).json()
    assert assigned["code"] == 1
    menus = client.get(f"/api/role/{role['id']}/menus").json()["data"]
    assert {menu["id"] for menu in menus} == {menu_a, menu_b}

    replaced = client.put(f"/api/role/{role['id']}/menus", json={"ids": [menu_b]}).json()
    assert replaced["code"] == 1
    assert [menu["id"] for menu in client.get(f"/api/role/{role['id']}/menus").json()["data"]] == [menu_b]

    missing = client.put(f"/api/role/{role['id']}/menus", json={"ids": ["missing"]}).json()
    assert missing["message"] == "部分菜单不存在!"

    user = client.post("/api/user", json={"name": _unique("grace"), "password": "secret123"}).json()["data"]
    client.put(f"/api/user/{user['id']}/roles", json={"ids": [role["id"]]})
    guarded = client.delete(f"/api/role/{role['id']}").json()
    assert guarded["message"] == "该角色已分配给用户，无法删除!"

    client.delete(f"/api/user/{user['id']}")
    assert client.delete(f"/api/role/{role['id']}").json()["code"] == 1
