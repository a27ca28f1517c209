"""模型包初始化，便于统一导入 ORM 实体并触发模型注册。"""

from backoffice.models.dept import Dept
from backoffice.models.menu import Menu
from backoffice.models.role import Role
from backoffice.models.user import User

__all__ = ["Dept", "Menu", "Role", "User"]
