"""HTTP Basic 认证依赖测试"""

import pytest
from unittest.mock import Mock
from fastapi import Depends, FastAPI
from fastapi.testclient import TestClient

from application.auth.services.imap_authenticator import ImapAuthenticator
from interfaces.api.security.imap_basic_auth import (
    get_authenticator,
    require_imap_user,
    set_authenticator_getter,
)


@pytest.fixture
def mock_authenticator() -> Mock:
    authenticator = Mock(spec=ImapAuthenticator)
    authenticator.authenticate.side_effect = lambda u, p: (u, p) == ("alice", "secret")
    return authenticator


@pytest.fixture
def app(mock_authenticator: Mock) -> FastAPI:
    """创建测试用 FastAPI 应用"""
    app = FastAPI()

    @app.get("/protected")
    def protected(username: str = Depends(require_imap_user)):
        return {"username": username}

    set_authenticator_getter(lambda: mock_authenticator)
    yield app
    set_authenticator_getter(None)


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app)


class TestRequireImapUser:
    """HTTP Basic 认证测试"""

    def test_valid_credentials_allow_request(self, client, mock_authenticator):
        response = client.get("/protected", auth=("alice", "secret"))

        assert response.status_code == 200
        assert response.json() == {"username": "alice"}
        mock_authenticator.authenticate.assert_called_once_with("alice", "secret")

    def test_invalid_credentials_return_401(self, client):
        response = client.get("/protected", auth=("alice", "wrong"))

        assert response.status_code == 401
        assert response.headers["WWW-Authenticate"].startswith("Basic")

    def test_missing_credentials_return_401(self, client, mock_authenticator):
        response = client.get("/protected")

        assert response.status_code == 401
        assert "WWW-Authenticate" in response.headers
        mock_authenticator.authenticate.assert_not_called()

    def test_unconfigured_authenticator_returns_503(self, client):
        set_authenticator_getter(None)

        response = client.get("/protected", auth=("alice", "secret"))

        assert response.status_code == 503


class TestAuthenticatorGetter:
    """authenticator getter 测试"""

    def test_returns_none_when_not_configured(self):
        set_authenticator_getter(None)

        assert get_authenticator() is None

    def test_returns_configured_authenticator(self, mock_authenticator):
        set_authenticator_getter(lambda: mock_authenticator)

        try:
            assert get_authenticator() is mock_authenticator
        finally:
            set_authenticator_getter(None)
