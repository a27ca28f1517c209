"""菜单管理接口的集成测试。"""

import uuid
from typing import Optional

from fastapi.testclient import TestClient


def _unique(prefix: str) -> str:
    return f"{prefix}-{uuid.uuid4().hex[:6]}"


def _create_menu(client: TestClient, name: str, menu_type: str, parent_id: Optional[str] = None, **extra) -> str:
    payload = {"name": name, "menu_type": menu_type, "parent_id": parent_id, **extra}
    body = client.post("/api/menu", json=payload).json()
    assert body["code"] == 1, body
    items = client.post("/api/menu/list", json={"name": name}).json()["data"]
    return next(item["id"] for item in items if item["name"] == name)


def _find_node(nodes, node_id):
    for node in nodes:
        if node["id"] == node_id:
            return node
        found = _find_node(node["children"], node_id)
        if found is not None:
            return found
    return None


def test_menu_crud_flow(client: TestClient):
    name = _unique("系统管理")
    menu_id = _create_menu(client, name, "D", url="system", icon="system", seq_no=1)

    listed = client.post("/api/menu/list", json={"name": name}).json()
    assert listed["code"] == 1
    assert listed["total_count"] == 1
    menu = listed["data"][0]
    assert menu["menu_type"] == "D"
    assert menu["status"] == 1
    assert menu["breadcrumb"] == 1

    renamed = _unique("系统设置")
    edited = client.put(
        "/api/menu", json={"id": menu_id, "name": renamed, "menu_type": "D", "perms": "system:view"}
    ).json()
    assert edited["code"] == 1
    menu = client.post("/api/menu/list", json={"name": renamed}).json()["data"][0]
    assert menu["perms"] == "system:view"
    assert menu["url"] == "system"

    status = client.put("/api/menu/status", json={"id": menu_id, "status": 0}).json()
    assert status["code"] == 1
    assert client.post("/api/menu/list", json={"name": renamed, "status": 0}).json()["total_count"] == 1

    assert client.delete(f"/api/menu/{menu_id}").json()["code"] == 1
    assert client.delete(f"/api/menu/{menu_id}").json() == {"code": -1, "message": "菜单不存在!", "data": None}


def test_menu_checks(client: TestClient):
    bad_type = client.post("/api/menu", json={"name": _unique("菜单"), "menu_type": "X"}).json()
    assert bad_type["message"] == "菜单类型错误，仅支持 D(目录)/M(菜单)/B(按钮)!"

    long_type = client.post("/api/menu", json={"name": _unique("菜单"), "menu_type": "DM"}).json()
    assert long_type["message"] == "菜单类型 长度不符合要求: length must be in 1~1"

    no_name = client.post("/api/menu", json={"menu_type": "M"}).json()
    assert no_name["message"] == "菜单名称 不能为空"

    missing_parent = client.post(
        "/api/menu", json={"name": _unique("菜单"), "menu_type": "M", "parent_id": "missing"}
    ).json()
    assert missing_parent["message"] == "上级菜单不存在!"

    menu_id = _create_menu(client, _unique("菜单"), "M")
    self_parent = client.put(
        "/api/menu", json={"id": menu_id, "name": _unique("菜单"), "menu_type": "M", "parent_id": menu_id}
    ).json()
    assert self_parent["message"] == "上级菜单不能选择自己!"

    no_id = client.put("/api/menu", json={"name": _unique("菜单"), "menu_type": "M"}).json()
    assert no_id["message"] == "菜单ID 不能为空"


def test_menu_paging(client: TestClient):
    prefix = _unique("分页菜单")
    for index in range(3):
        _create_menu(client, f"{prefix}{index}", "M", seq_no=index)

    page = client.post("/api/menu/list", json={"name": prefix, "current_page_num": 2, "page_size": 2}).json()
    assert page["total_count"] == 3
    assert page["total_pages"] == 2
    assert page["current_page_num"] == 2
    assert [item["name"] for item in page["data"]] == [f"{prefix}2"]


def test_menu_tree_and_delete_guard(client: TestClient):
    root_id = _create_menu(client, _unique("目录"), "D", url="tree")
    child_id = _create_menu(client, _unique("菜单"), "M", parent_id=root_id, url="child")
    button_id = _create_menu(client, _unique("按钮"), "B", parent_id=child_id, perms="tree:add")

    tree = client.get("/api/menu/tree").json()
    assert tree["code"] == 1
    root = _find_node(tree["data"], root_id)
    assert root is not None
    assert root["parentId"] is None
    child = _find_node(root["children"], child_id)
    assert child["menuType"] == "M"
    assert [node["id"] for node in child["children"]] == [button_id]

    guarded = client.delete(f"/api/menu/{root_id}").json()
    assert guarded["message"] == "存在子菜单，无法删除!"

    for menu_id in (button_id, child_id, root_id):
        assert client.delete(f"/api/menu/{menu_id}").json()["code"] == 1


def test_routers_only_include_enabled_directories_and_menus(client: TestClient):
    dir_name = _unique("路由目录")
    dir_id = _create_menu(client, dir_name, "D", url="router", seq_no=1, always_show=1)
    page_name = _unique("路由页面")
    page_id = _create_menu(
        client, page_name, "M", parent_id=dir_id, url="page", component="router/page/index", no_cache=1
    )
    _create_menu(client, _unique("路由按钮"), "B", parent_id=page_id, perms="router:add")

    hidden_dir = _unique("停用目录")
    hidden_dir_id = _create_menu(client, hidden_dir, "D", url="hidden", status=0)
    _create_menu(client, _unique("孤儿页面"), "M", parent_id=hidden_dir_id, url="orphan")

    routers = client.get("/api/menu/routers").json()
    assert routers["code"] == 1
    directory = next(node for node in routers["data"] if node["name"] == dir_name)
    assert directory["path"] == "/router"
    assert directory["alwaysShow"] is True
    assert directory["meta"]["title"] == dir_name
    assert [node["name"] for node in directory["children"]] == [page_name]

    page = directory["children"][0]
    assert page["path"] == "page"
    assert page["component"] == "router/page/index"
    assert page["meta"]["noCache"] is True
    assert page["children"] == []

    names = [node["name"] for node in routers["data"]]
    assert hidden_dir not in names
    assert not any(node["path"] == "orphan" for node in routers["data"])
