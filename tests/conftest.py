"""Shared test fixtures and configuration."""
import base64
from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.pool import StaticPool

from tableorder.core.config import Settings
from tableorder.db.models import Base, MenuItem, Order
from tableorder.main import create_app


# Service tests: in-memory SQLite
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

ADMIN_USER = "manager"
ADMIN_PASS = "s3cret-pass"


def basic_auth(username: str, password: str) -> dict:
    """Build an Authorization header for HTTP Basic."""
    token = base64.b64encode(f"{username}:{password}".encode()).decode()
    return {"Authorization": f"Basic {token}"}


@pytest.fixture
def test_settings(tmp_path):
    """Settings for an application backed by a SQLite file in tmp_path."""
    return Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'tableorder.db'}",
        admin_user=ADMIN_USER,
        admin_pass=ADMIN_PASS,
        seed_file=str(tmp_path / "menu.json"),
    )


@pytest.fixture
def test_client(test_settings):
    """Create FastAPI test client; the lifespan connects and creates tables."""
    with TestClient(create_app(test_settings)) as client:
        yield client


@pytest.fixture
def public_orders_client(test_settings):
    """Client whose order listing is public."""
    settings = test_settings.model_copy(update={"orders_require_admin": False})
    with TestClient(create_app(settings)) as client:
        yield client


@pytest.fixture
def admin_headers():
    """Valid admin credentials."""
    return basic_auth(ADMIN_USER, ADMIN_PASS)


@pytest.fixture
def sample_menu():
    """Menu descriptors as an admin would send them."""
    return [
        {"name": "Soup", "price": 5, "category": "Starters"},
        {"name": "Burger", "price": "11.50", "category": "Mains"},
        {"name": "Apple Pie", "price": 6, "category": "Desserts", "isAvailable": False},
        {"name": "Bread", "price": 2},
        {"name": "Bruschetta", "price": 4.5, "category": "Starters"},
    ]


@pytest.fixture
async def test_db_engine():
    """Create test database engine."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    # Create all tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    # Drop all tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
def test_sessionmaker(test_db_engine):
    """Session factory bound to the test engine."""
    return async_sessionmaker(
        test_db_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_sessionmaker):
    """Create test database session."""
    async with test_sessionmaker() as session:
        yield session


@pytest.fixture
def make_order(test_db):
    """Insert an order directly with a given age."""
    async def _make_order(table="1", status="pending", minutes_ago=0):
        created = datetime.now(timezone.utc) - timedelta(minutes=minutes_ago)
        order = Order(
            table_label=table,
            items=[{"name": "Soup", "price": 5.0, "qty": 1}],
            customer_note="",
            status=status,
            created_at=created,
            updated_at=created,
        )
        test_db.add(order)
        await test_db.commit()
        return order
    return _make_order


@pytest.fixture
def make_menu_item(test_db):
    """Insert a menu item directly."""
    async def _make_menu_item(name="Soup", price=5.0, category="General", is_available=True):
        item = MenuItem(name=name, price=price, category=category, is_available=is_available)
        test_db.add(item)
        await test_db.commit()
        return item
    return _make_menu_item
