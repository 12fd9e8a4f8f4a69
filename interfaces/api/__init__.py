"""
API 接口层

提供 FastAPI 应用，使用 IMAP 登录校验 HTTP Basic 凭证。

用法：
    from interfaces.api import create_app

    app = create_app(authenticator_getter=container.imap_authenticator)
"""

from interfaces.api.app import create_app

__all__ = ["create_app"]
