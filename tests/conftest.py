import pytest
from fastapi.testclient import TestClient

from tasktrack.core.config import Settings
from tasktrack.core.security import create_access_token
from tasktrack.main import create_app
from tasktrack.models.user import User


@pytest.fixture
def settings():
    """Config de test: SQLite en mémoire, un secret dédié"""
    return Settings(
        DATABASE_URL="sqlite://",
        JWT_SECRET="test-secret",
        LOG_LEVEL="WARNING"
    )


@pytest.fixture
def app(settings):
    """Une app (et donc une DB) neuve par test"""
    app = create_app(settings)
    yield app
    app.state.engine.dispose()


@pytest.fixture
def client(app):
    """Client de test FastAPI"""
    with TestClient(app) as client:
        yield client


@pytest.fixture
def db(app):
    """Session DB pour les tests"""
    db = app.state.session_factory()
    yield db
    db.close()


@pytest.fixture
def make_user(db):
    """Fabrique d'utilisateurs directement en base"""
    def _make_user(username="testuser", password="pass123", email=None):
        user = User(username=username, email=email)
        user.set_password(password)
        db.add(user)
        db.commit()
        db.refresh(user)
        return user
    return _make_user


@pytest.fixture
def token_for(settings):
    def _token_for(user):
        return create_access_token(user.id, user.username, settings)
    return _token_for


@pytest.fixture
def test_user(make_user):
    return make_user("testuser")


@pytest.fixture
def auth_headers(test_user, token_for):
    """Header Authorization pour l'utilisateur test"""
    return {"Authorization": f"Bearer {token_for(test_user)}"}


@pytest.fixture
def other_headers(make_user, token_for):
    """Header Authorization pour un second utilisateur"""
    other = make_user("otheruser")
    return {"Authorization": f"Bearer {token_for(other)}"}
