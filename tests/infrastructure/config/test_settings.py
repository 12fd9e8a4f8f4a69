"""Settings 配置测试"""

import pytest

from domain.auth.value_objects.imap_protocol import ImapProtocol
from domain.common.exceptions import ImapConfigurationException
from infrastructure.config import settings as settings_module
from infrastructure.config.settings import Settings, get_settings, reset_settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("IMAP_HOST", "IMAP_PORT", "IMAP_PROTOCOL", "IMAP_TIMEOUT", "IMAP_ESCAPE_SLASH"):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()


class TestSettings:
    """配置测试"""

    def test_defaults(self):
        settings = Settings(_env_file=None)

        assert settings.imap_host is None
        assert settings.imap_protocol == "IMAP"
        assert settings.imap_timeout is None
        assert settings.imap_escape_slash is True
        assert settings.log_level == "INFO"

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("IMAP_HOST", "imap.example.com")
        monkeypatch.setenv("IMAP_PROTOCOL", "IMAPS")
        monkeypatch.setenv("IMAP_TIMEOUT", "5")
        monkeypatch.setenv("IMAP_ESCAPE_SLASH", "false")

        options = Settings(_env_file=None).auth_options

        assert options.host == "imap.example.com"
        assert options.imap_protocol is ImapProtocol.IMAPS
        assert options.timeout == 5
        assert options.escape_slash is False

    def test_invalid_protocol_rejected_when_building_options(self):
        settings = Settings(_env_file=None, imap_host="imap.example.com", imap_protocol="FTP")

        with pytest.raises(ImapConfigurationException):
            settings.auth_options

    def test_get_settings_is_singleton(self):
        assert get_settings() is get_settings()

    def test_reset_settings(self):
        first = get_settings()
        reset_settings()

        assert settings_module._settings is None
        assert get_settings() is not first
