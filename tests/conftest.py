import os

# 设置测试环境（必须在导入应用之前）
os.environ["APP_ENV"] = "test"
os.environ.pop("REDIS_URL", None)

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from blog_api.main import app
from blog_api.api.deps import get_cache
from blog_api.core.cache import InMemoryCache
from blog_api.db.database import Base, get_session, SQLITE_TEST_DB

# 测试数据库配置
test_engine = create_engine(SQLITE_TEST_DB, connect_args={"check_same_thread": False})
TestSessionLocal = sessionmaker(bind=test_engine)


@pytest.fixture(autouse=True)
def clean_db():
    """清理并重建测试数据库"""
    Base.metadata.drop_all(bind=test_engine)
    Base.metadata.create_all(bind=test_engine)
    yield
    Base.metadata.drop_all(bind=test_engine)

@pytest.fixture
def db(clean_db):
    """用于准备测试数据的会话"""
    session = TestSessionLocal()
    yield session
    session.close()

@pytest.fixture
def cache():
    return InMemoryCache()

@pytest.fixture
def client(clean_db, cache):
    """创建测试客户端"""
    test_session = TestSessionLocal()

    def override_get_session():
        try:
            yield test_session
        finally:
            test_session.close()

    app.dependency_overrides[get_session] = override_get_session
    app.dependency_overrides[get_cache] = lambda: cache

    client = TestClient(app, follow_redirects=False)
    yield client

    test_session.close()
    app.dependency_overrides.clear()

class StatementCounter:
    """统计发往数据库的 SQL 语句数"""

    def __init__(self):
        self.count = 0

    def __call__(self, conn, cursor, statement, parameters, context, executemany):
        self.count += 1

    def reset(self):
        self.count = 0

@pytest.fixture
def statements():
    counter = StatementCounter()
    event.listen(test_engine, "before_cursor_execute", counter)
    yield counter
    event.remove(test_engine, "before_cursor_execute", counter)

