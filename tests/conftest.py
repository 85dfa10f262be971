"""
Shared fixtures: a throwaway SQLite database per test, per-request style units of
work for the domain services, and an HTTP client bound to the same database.
"""

import os

os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("LOG_FORMAT", "text")
os.environ.setdefault("DEBUG", "false")

from contextlib import asynccontextmanager
from types import SimpleNamespace

import pytest
from httpx import ASGITransport, AsyncClient

from app.main import create_application
from app.modules.user_management.domain.services.subscription_service import SubscriptionService
from app.modules.user_management.domain.services.user_service import UserService
from app.modules.user_management.infrastructure.database import models  # noqa: F401
from app.modules.user_management.infrastructure.database.subscription_repository_impl import (
    SubscriptionRepositoryImpl,
)
from app.modules.user_management.infrastructure.database.user_repository_impl import UserRepositoryImpl
from app.shared.config.database import DatabaseBase
from app.shared.config.settings import Settings
from app.shared.infrastructure.database.connection import create_database_engine
from app.shared.infrastructure.database.session import DatabaseSessionManager, get_db_session


@pytest.fixture
def test_settings(tmp_path) -> Settings:
    return Settings(
        ENVIRONMENT="test",
        DATABASE_URL=f"sqlite+aiosqlite:///{tmp_path / 'user_subscriptions.db'}",
    )


@pytest.fixture
async def engine(test_settings):
    engine = create_database_engine(test_settings)
    async with engine.begin() as conn:
        await conn.run_sync(DatabaseBase.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_manager(engine) -> DatabaseSessionManager:
    manager = DatabaseSessionManager()
    manager.initialize(engine)
    return manager


@pytest.fixture
def unit_of_work(session_manager):
    """
    Open one transactional session wired to both services, the same way a
    request does: commit on success, roll back when the block raises.
    """

    @asynccontextmanager
    async def _unit_of_work():
        async with session_manager.get_session() as session:
            user_repository = UserRepositoryImpl(session)
            subscription_repository = SubscriptionRepositoryImpl(session)
            user_service = UserService(user_repository, subscription_repository)
            yield SimpleNamespace(
                session=session,
                users=user_service,
                subscriptions=SubscriptionService(subscription_repository, user_service),
            )

    return _unit_of_work


def build_app(session_manager, settings=None):
    app = create_application(settings)

    async def override_db_session():
        async with session_manager.get_session() as session:
            yield session

    app.dependency_overrides[get_db_session] = override_db_session
    return app


@pytest.fixture
def app(session_manager):
    return build_app(session_manager)


@pytest.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def api_prefix() -> str:
    return "/user-subscriptions/v1"
