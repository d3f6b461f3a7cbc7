"""
Shared fixtures: an in-memory SQLite store, a fake model client and a
TestClient pointed at the API prefix.
"""
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.config import Settings
from app.core.db import Base
from app.main import create_app
from app.models.project import Project  # noqa: F401  (registers the table)
from app.models.template import Template  # noqa: F401
from app.models.user import ROLE_ADMIN, ROLE_USER

from tests.fixtures.studio_fixtures import ADMIN_EMAIL, MEMBER_EMAIL, login, make_user


@pytest.fixture
def settings():
    return Settings(
        ENV="local",
        DATABASE_URL="sqlite://",
        AUTH_SECRET="test-secret",
        OPENAI_API_KEY="sk-test",
        LLM_MODEL="gpt-test",
    )


@pytest.fixture
def session_factory():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield sessionmaker(bind=engine, autoflush=False, autocommit=False)
    engine.dispose()


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def llm_client():
    client = MagicMock()
    client.responses.create.return_value = SimpleNamespace(
        output_text="# Draft\n\nGenerated body.",
        usage=SimpleNamespace(input_tokens=120, output_tokens=40),
    )
    return client


@pytest.fixture
def app(settings, session_factory, llm_client):
    return create_app(settings, session_factory=session_factory, llm_client=llm_client)


@pytest.fixture
def client(app):
    return TestClient(app, base_url="http://testserver/api")


@pytest.fixture
def admin(db):
    return make_user(db, ADMIN_EMAIL, ROLE_ADMIN)


@pytest.fixture
def member(db):
    return make_user(db, MEMBER_EMAIL, ROLE_USER)


@pytest.fixture
def admin_client(client, admin):
    login(client, admin.email)
    return client


@pytest.fixture
def member_client(client, member):
    login(client, member.email)
    return client
