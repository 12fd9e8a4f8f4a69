"""ImaplibSession 单元测试"""

import imaplib
import socket
from unittest.mock import MagicMock

from infrastructure.auth.services.imaplib_session import ImaplibSession


def create_connection() -> MagicMock:
    """创建模拟的 imaplib 连接"""
    connection = MagicMock()
    connection.login.return_value = ("OK", [b"LOGIN completed"])
    return connection


class TestImaplibSessionLogin:
    """登录测试"""

    def test_login_success(self):
        connection = create_connection()
        session = ImaplibSession(connection)

        assert session.login("alice", "secret") is True
        assert session.errstr() == ""
        connection.login.assert_called_once_with("alice", "secret")

    def test_login_rejected_returns_false(self):
        """测试服务器拒绝凭证"""
        connection = create_connection()
        connection.login.side_effect = imaplib.IMAP4.error("[AUTHENTICATIONFAILED] Invalid credentials")
        session = ImaplibSession(connection)

        assert session.login("alice", "wrong") is False
        assert "AUTHENTICATIONFAILED" in session.errstr()

    def test_transport_error_returns_false(self):
        """测试登录过程中的传输错误同样返回 False"""
        connection = create_connection()
        connection.login.side_effect = socket.error("Connection reset by peer")
        session = ImaplibSession(connection)

        assert session.login("alice", "secret") is False
        assert "Connection reset by peer" in session.errstr()

    def test_abort_returns_false(self):
        """测试连接中断（IMAP4.abort）返回 False"""
        connection = create_connection()
        connection.login.side_effect = imaplib.IMAP4.abort("socket error: EOF")
        session = ImaplibSession(connection)

        assert session.login("alice", "secret") is False

    def test_non_ok_status_returns_false(self):
        connection = create_connection()
        connection.login.return_value = ("NO", [b"Login disabled"])
        session = ImaplibSession(connection)

        assert session.login("alice", "secret") is False
        assert session.errstr() == "Login disabled"

    def test_success_clears_previous_error(self):
        connection = create_connection()
        connection.login.side_effect = [
            imaplib.IMAP4.error("Invalid credentials"),
            ("OK", [b"LOGIN completed"]),
        ]
        session = ImaplibSession(connection)

        assert session.login("alice", "wrong") is False
        assert session.login("alice", "secret") is True
        assert session.errstr() == ""


class TestImaplibSessionLogout:
    """登出测试"""

    def test_logout(self):
        connection = create_connection()

        ImaplibSession(connection).logout()

        connection.logout.assert_called_once()

    def test_logout_ignores_closed_connection(self):
        connection = create_connection()
        connection.logout.side_effect = OSError("Bad file descriptor")

        ImaplibSession(connection).logout()
