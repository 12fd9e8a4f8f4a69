"""IMAP 认证领域服务"""

from domain.auth.services.imap_session import ImapSession
from domain.auth.services.credential_checker import CredentialChecker, escape_password
from domain.auth.services.option_validator import validate_connection_source
from domain.auth.services.imap_connection_establisher import ImapConnectionEstablisher

__all__ = [
    "ImapSession",
    "CredentialChecker",
    "escape_password",
    "validate_connection_source",
    "ImapConnectionEstablisher",
]
