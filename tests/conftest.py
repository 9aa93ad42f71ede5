import os

# Must be set before socialgraph.core.config builds its Settings
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from socialgraph.core.security import create_access_token
from socialgraph.db.base_class import Base
from socialgraph.db.session import get_db
from socialgraph.main import app
from socialgraph.models.account import Account
from socialgraph.services.close_friends_service import CloseFriendsService
from socialgraph.services.follow_service import FollowService
from socialgraph.services.privacy_service import PrivacyService
from socialgraph.services.restriction_service import RestrictionService


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def make_account(db):
    counter = {"n": 0}

    def _make(username=None, is_private=False):
        counter["n"] += 1
        account = Account(
            username=username or f"user{counter['n']}",
            display_name=(username or f"user{counter['n']}").title(),
            is_private=is_private,
        )
        db.add(account)
        db.commit()
        db.refresh(account)
        return account

    return _make


@pytest.fixture
def follow_service(db):
    return FollowService(db)


@pytest.fixture
def restriction_service(db):
    return RestrictionService(db)


@pytest.fixture
def close_friends_service(db):
    return CloseFriendsService(db)


@pytest.fixture
def privacy_service(db):
    return PrivacyService(db)


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers():
    def _headers(account_id):
        token = create_access_token({"sub": str(account_id)})
        return {"Authorization": f"Bearer {token}"}
    return _headers

