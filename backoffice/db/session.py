"""数据库引擎与会话工厂。"""

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from backoffice.core.config import get_settings

settings = get_settings()

# SQLite 连接默认禁止跨线程使用，FastAPI 的同步路由运行在线程池中
_connect_args = {"check_same_thread": False} if settings.is_sqlite else {}

engine = create_engine(
    settings.database_url,
    pool_pre_ping=True,
    echo=settings.database_echo,
    connect_args=_connect_args,
)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
