import os
import sys
import pytest

# Add backend directory to path
sys.path.insert(0, os.path.abspath(os.path.dirname(__file__) + '/..'))

# Import FastAPI app
from fastapi.testclient import TestClient
from branchchat.config.settings import Config
from branchchat.fastapi_app import create_fastapi_app
from branchchat.infrastructure.persistence import (
    JsonConversationRepository,
    JsonMessageRepository,
    JsonRecordStore,
    JsonUserRepository,
)
from branchchat.infrastructure.security import BcryptPasswordHasher, JwtTokenIssuer


@pytest.fixture()
def storage_dir(tmp_path, monkeypatch):
    """Point every record store and the video directory at a temp dir."""
    monkeypatch.setattr(Config, "STORAGE_DIR", str(tmp_path))
    monkeypatch.setattr(Config, "VIDEO_DIR", "")
    monkeypatch.setattr(Config, "BCRYPT_ROUNDS", 4)
    return tmp_path


@pytest.fixture()
def app(storage_dir):
    """Create and configure a new FastAPI app instance for each test."""
    return create_fastapi_app()


@pytest.fixture()
def client(app):
    """A test client for the FastAPI app (runs startup and shutdown)."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def user_repo(storage_dir):
    return JsonUserRepository(JsonRecordStore(Config.users_path()))


@pytest.fixture()
def conversation_repo(storage_dir):
    return JsonConversationRepository(JsonRecordStore(Config.conversations_path()))


@pytest.fixture()
def message_repo(storage_dir):
    return JsonMessageRepository(JsonRecordStore(Config.messages_path()))


@pytest.fixture()
def password_hasher():
    return BcryptPasswordHasher(rounds=4)


@pytest.fixture()
def token_issuer():
    return JwtTokenIssuer(
        secret="test-secret",
        issuer="branchchat-test",
        audience="branchchat-test-web",
        ttl_minutes=5,
    )
