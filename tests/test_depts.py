"""部门管理接口的集成测试。"""

import uuid

from fastapi.testclient import TestClient

from backoffice.core.constants import ROOT_DEPT_NAME


def _unique(prefix: str) -> str:
    return f"{prefix}-{uuid.uuid4().hex[:6]}"


def _find_dept(client: TestClient, name: str) -> dict:
    payload = client.post("/api/dept/list", json={"name": name}).json()
    assert payload["code"] == 1
    matches = [item for item in payload["data"] if item["name"] == name]
    assert len(matches) == 1
    return matches[0]


def _root_id(client: TestClient) -> str:
    return _find_dept(client, ROOT_DEPT_NAME)["id"]


def test_root_department_is_seeded(client: TestClient):
    root = _find_dept(client, ROOT_DEPT_NAME)
    assert root["parentId"] is None
    assert root["statusDesc"] == "启用"


def test_dept_crud_flow(client: TestClient):
    root_id = _root_id(client)
    name = _unique("研发部")

    create_resp = client.post(
        "/api/dept",
        json={"parent_id": root_id, "name": name, "seq_no": 1, "status": 1, "telephone": "01012345678"},
    )
    assert create_resp.status_code == 200
    assert create_resp.json() == {"code": 1, "message": "Success"}

    dept = _find_dept(client, name)
    assert dept["parentName"] == ROOT_DEPT_NAME
    assert dept["createBy"] == "admin"

    detail = client.get(f"/api/dept/{dept['id']}").json()
    assert detail["code"] == 1
    assert detail["data"]["name"] == name

    # 同级重名
    duplicate = client.post("/api/dept", json={"parent_id": root_id, "name": name, "status": 1}).json()
    assert duplicate["code"] == -1
    assert duplicate["message"] == "已存在相同部门名称!"

    new_name = _unique("平台部")
    edit = client.put(
        "/api/dept",
        json={"id": dept["id"], "parent_id": root_id, "name": new_name, "seq_no": 2, "status": 1},
    ).json()
    assert edit["code"] == 1
    edited = client.get(f"/api/dept/{dept['id']}").json()["data"]
    assert edited["name"] == new_name
    assert edited["seqNo"] == 2
    assert edited["telephone"] == "01012345678"
    assert edited["updateBy"] == "admin"

    disable = client.put(f"/api/dept/{dept['id']}/status/0").json()
    assert disable["code"] == 1
    assert client.get(f"/api/dept/{dept['id']}").json()["data"]["statusDesc"] == "禁用"

    delete = client.delete(f"/api/dept/{dept['id']}").json()
    assert delete["code"] == 1
    missing = client.get(f"/api/dept/{dept['id']}").json()
    assert missing == {"code": -1, "message": "传入的部门信息不存在!", "data": None}


def test_dept_business_checks(client: TestClient):
    root_id = _root_id(client)

    empty_name = client.post("/api/dept", json={"parent_id": root_id, "name": "", "status": 1}).json()
    assert empty_name["message"] == "部门名称 不能为空"

    long_name = client.post("/api/dept", json={"parent_id": root_id, "name": "部" * 31, "status": 1}).json()
    assert long_name["message"] == "部门名称 长度不符合要求: length must be in 1~30"

    bad_seq = client.post("/api/dept", json={"name": _unique("部门"), "seq_no": -1, "status": 1}).json()
    assert bad_seq["message"] == "显示顺序 值不能小于 0"

    no_status = client.post("/api/dept", json={"parent_id": root_id, "name": _unique("部门")}).json()
    assert no_status["message"] == "部门状态不能为空!"

    bad_status = client.post("/api/dept", json={"parent_id": root_id, "name": _unique("部门"), "status": 5}).json()
    assert bad_status["message"] == "传入的部门状态错误!"

    missing_parent = client.post(
        "/api/dept", json={"parent_id": "missing", "name": _unique("部门"), "status": 1}
    ).json()
    assert missing_parent["message"] == "传入的父级部门信息不存在!"

    disabled_name = _unique("停用部")
    client.post("/api/dept", json={"parent_id": root_id, "name": disabled_name, "status": 0})
    disabled_id = _find_dept(client, disabled_name)["id"]
    under_disabled = client.post(
        "/api/dept", json={"parent_id": disabled_id, "name": _unique("子部门"), "status": 1}
    ).json()
    assert under_disabled["message"] == "传入的父级部门已停用!"

    self_parent = client.put(
        "/api/dept", json={"id": disabled_id, "parent_id": disabled_id, "name": disabled_name, "status": 0}
    ).json()
    assert self_parent["message"] == "上级部门不能选择自己!"

    no_id = client.put("/api/dept", json={"name": disabled_name, "status": 0}).json()
    assert no_id["message"] == "部门ID 不能为空"


def test_dept_tree_and_delete_guard(client: TestClient):
    root_id = _root_id(client)
    parent_name = _unique("销售部")
    child_name = _unique("华南区")
    client.post("/api/dept", json={"parent_id": root_id, "name": parent_name, "seq_no": 5, "status": 1})
    parent_id = _find_dept(client, parent_name)["id"]
    client.post("/api/dept", json={"parent_id": parent_id, "name": child_name, "status": 1})

    tree = client.get("/api/dept/tree").json()
    assert tree["code"] == 1
    root = next(node for node in tree["data"] if node["id"] == root_id)
    parent = next(node for node in root["children"] if node["id"] == parent_id)
    assert [child["name"] for child in parent["children"]] == [child_name]
    assert parent["parentId"] == root_id

    guarded = client.delete(f"/api/dept/{parent_id}").json()
    assert guarded == {"code": -1, "message": "该部门下存在子部门，无法删除!", "data": None}

    child_id = _find_dept(client, child_name)["id"]
    assert client.delete(f"/api/dept/{child_id}").json()["code"] == 1
    assert client.delete(f"/api/dept/{parent_id}").json()["code"] == 1
