"""AuthContainer 依赖注入测试"""

from unittest.mock import Mock

from dependency_injector import providers

from application.auth.services.imap_authenticator import ImapAuthenticator
from domain.auth.services.imap_connection_establisher import ImapConnectionEstablisher
from domain.auth.services.imap_session import ImapSession
from infrastructure.config.settings import Settings
from infrastructure.containers import AuthContainer


def create_container() -> tuple:
    session = Mock(spec=ImapSession)
    session.login.return_value = True
    establisher = Mock(spec=ImapConnectionEstablisher)
    establisher.establish.return_value = session

    container = AuthContainer()
    container.settings.override(
        providers.Object(
            Settings(_env_file=None, imap_host="imap.example.com", imap_protocol="IMAPS")
        )
    )
    container.connection_establisher.override(providers.Object(establisher))
    return container, establisher, session


class TestAuthContainer:
    """认证容器测试"""

    def test_builds_authenticator_from_settings(self):
        container, establisher, session = create_container()

        authenticator = container.imap_authenticator()

        assert isinstance(authenticator, ImapAuthenticator)
        assert authenticator.options.host == "imap.example.com"
        assert authenticator.session is session
        assert authenticator.authenticate("alice", "secret") is True

    def test_each_call_builds_a_new_authenticator(self):
        """测试每次获取都建立独立的会话"""
        container, establisher, _ = create_container()

        first = container.imap_authenticator()
        second = container.imap_authenticator()

        assert first is not second
        assert establisher.establish.call_count == 2

    def test_collaborators_are_shared(self):
        container, _, _ = create_container()

        assert container.credential_checker() is container.credential_checker()
        assert container.connection_establisher() is container.connection_establisher()
