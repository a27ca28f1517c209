"""首页路由。"""

from fastapi import APIRouter

from backoffice.core.config import get_settings
from backoffice.wrapper import SingleWrapper

router = APIRouter(tags=["index"])


@router.get("/", response_model=SingleWrapper[str])
def index() -> SingleWrapper[str]:
    return SingleWrapper[str].ok(f"Welcome to {get_settings().project_name}")
