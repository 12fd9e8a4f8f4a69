"""IMAP 认证应用服务"""

from application.auth.services.imap_authenticator import ImapAuthenticator

__all__ = ["ImapAuthenticator"]
