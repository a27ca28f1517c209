"""常量定义：种子数据与通用约定。"""

ADMIN_ROLE_KEY = "admin"
COMMON_ROLE_KEY = "common"

# 初始化时写入的角色
DEFAULT_ROLES = (
    {"name": "超级管理员", "role_key": ADMIN_ROLE_KEY, "seq_no": 1, "remark": "超级管理员"},
    {"name": "普通角色", "role_key": COMMON_ROLE_KEY, "seq_no": 2, "remark": "普通角色"},
)

ROOT_DEPT_NAME = "总公司"
