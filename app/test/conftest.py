import os
import tempfile
from typing import Any, Optional
from collections.abc import AsyncIterator, Awaitable, Callable

_db_dir = tempfile.mkdtemp(prefix="roomhy-test-")
os.environ["DB_URL"] = f"sqlite+aiosqlite:///{_db_dir}/roomhy.db"
os.environ["DB_CREATE_ALL"] = "true"
os.environ["JWT_SECRET"] = "roomhy-test-secret"
os.environ["SEED_DEMO_DATA"] = "false"

import pytest
from passlib.hash import bcrypt
from litestar import Litestar
from litestar.testing import AsyncTestClient

from app import app
from configs.sqlalchemy import sqlalchemy_config
from database.models import BaseModel
from database.models.user import AccountStatus, User, UserRole
from database.models.visit_report import VisitReport, VisitStatus
from security.oauth2 import create_user_token
from helpers import insert

app.debug = True


@pytest.fixture(autouse=True)
async def reset_database() -> AsyncIterator[None]:
    engine = sqlalchemy_config.get_engine()
    async with engine.begin() as connection:
        await connection.run_sync(BaseModel.metadata.drop_all)
        await connection.run_sync(BaseModel.metadata.create_all)
    yield


@pytest.fixture(scope="function")
async def test_client() -> AsyncIterator[AsyncTestClient[Litestar]]:
    async with AsyncTestClient(app=app) as client:
        yield client


@pytest.fixture
def make_user() -> Callable[..., Awaitable[User]]:
    async def _make_user(
        role: UserRole = UserRole.ADMIN,
        login_id: Optional[str] = None,
        password: str = "secret123",
        location_code: Optional[str] = None,
        status: AccountStatus = AccountStatus.ACTIVE,
    ) -> User:
        user = User(
            name=f"{role.value} user",
            password=bcrypt.hash(password),
            role=role,
            login_id=login_id or f"{role.value}-{os.urandom(3).hex()}",
            location_code=location_code,
            status=status,
        )
        await insert(user)
        return user

    return _make_user


@pytest.fixture
def auth_headers() -> Callable[[User], dict[str, str]]:
    def _auth_headers(user: User) -> dict[str, str]:
        return {"Authorization": f"Bearer {create_user_token(user)}"}

    return _auth_headers


@pytest.fixture
def make_visit() -> Callable[..., Awaitable[VisitReport]]:
    async def _make_visit(
        status: VisitStatus = VisitStatus.SUBMITTED,
        area_manager: Optional[User] = None,
        **property_info: Any,
    ) -> VisitReport:
        visit = VisitReport(
            property_info=property_info,
            status=status,
            area_manager_id=area_manager.id if area_manager else None,
        )
        await insert(visit)
        return visit

    return _make_visit
