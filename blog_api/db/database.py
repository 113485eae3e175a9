from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base
from typing import Optional
from functools import lru_cache
from blog_api.core.config import get_settings

# 数据库配置
SQLITE_DEV_DB = "sqlite:///./dev.db"
SQLITE_TEST_DB = "sqlite:///./test.db"
SQLITE_PROD_DB = "sqlite:///./prod.db"

Base = declarative_base()

def get_database_url() -> str:
    settings = get_settings()
    if settings.app_env == "test":
        return SQLITE_TEST_DB
    if settings.app_env == "production":
        return settings.database_url or SQLITE_PROD_DB
    return settings.database_url or SQLITE_DEV_DB

@lru_cache()
def get_engine():
    """获取数据库引擎"""
    database_url = get_database_url()
    connect_args = {"check_same_thread": False} if database_url.startswith("sqlite") else {}
    return create_engine(database_url, connect_args=connect_args)

def get_session_maker():
    """获取会话工厂"""
    return sessionmaker(autocommit=False, autoflush=False, bind=get_engine())

def get_session():
    """获取数据库会话"""
    SessionLocal = get_session_maker()
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()

def create_tables(db_engine: Optional[object] = None):
    """创建所有表

    Args:
        db_engine: 可选的数据库引擎，如果不提供则使用默认引擎
    """
    # register every mapped table on Base.metadata
    from blog_api.models import comment, post, post_tag, tag  # noqa: F401

    engine = db_engine or get_engine()
    Base.metadata.create_all(bind=engine)

