"""
Pytest 配置和共享 fixtures
"""
import os

# 应用模块在导入时按配置建库，必须先指向内存库
os.environ["DATABASE_URL"] = "sqlite:///:memory:"

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from fastapi.testclient import TestClient

from hotel_api.database import Base, get_db
from hotel_api.models import entities  # noqa: F401
from hotel_api.models.entities import (
    User, UserRole, Room, RoomType, RoomStatus, InventoryItem, StockStatus
)
from hotel_api.security.passwords import get_password_hash
from hotel_api.main import app


@pytest.fixture(scope="function")
def db_engine():
    """创建内存数据库引擎"""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def db_session(db_engine):
    """创建数据库会话"""
    SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=db_engine)
    session = SessionLocal()
    yield session
    session.close()


@pytest.fixture(scope="function")
def foreign_keys_on(db_engine):
    """打开 SQLite 外键检查，模拟强制外键的数据库"""
    with db_engine.connect() as conn:
        conn.exec_driver_sql("PRAGMA foreign_keys=ON")
        assert conn.exec_driver_sql("PRAGMA foreign_keys").scalar() == 1
    return db_engine


@pytest.fixture(scope="function")
def client(db_session):
    """创建测试客户端"""
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


# ============== 实体相关 Fixtures ==============

def _make_room(db, number="101", room_type=RoomType.STANDARD, base_price=1500.0,
               status=RoomStatus.AVAILABLE):
    room = Room(
        room_number=number,
        type=room_type,
        base_price=base_price,
        weekend_price=base_price + 300,
        holiday_price=base_price + 500,
        status=status,
    )
    db.add(room)
    db.commit()
    db.refresh(room)
    return room


def _make_user(db, username, role=UserRole.GUEST, full_name=None, password="secret123"):
    user = User(
        username=username,
        email=f"{username}@example.com",
        password_hash=get_password_hash(password),
        role=role,
        full_name=full_name,
        phone="9876543210",
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture
def sample_room(db_session):
    """创建测试房间 101"""
    return _make_room(db_session)


@pytest.fixture
def sample_suite(db_session):
    """创建套房 301"""
    return _make_room(db_session, number="301", room_type=RoomType.SUITE, base_price=5000.0)


@pytest.fixture
def sample_guest(db_session):
    """创建测试客人"""
    return _make_user(db_session, "guest1", full_name="Asha Rao")


@pytest.fixture
def sample_staff(db_session):
    """创建测试前台"""
    return _make_user(db_session, "front1", role=UserRole.RECEPTIONIST, full_name="Front Desk")


@pytest.fixture
def sample_item(db_session):
    """创建测试库存物品"""
    item = InventoryItem(
        name="Towels",
        stock=100,
        low_threshold=50,
        critical_threshold=10,
        status=StockStatus.SUFFICIENT,
    )
    db_session.add(item)
    db_session.commit()
    db_session.refresh(item)
    return item
