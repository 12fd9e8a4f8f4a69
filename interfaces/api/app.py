"""FastAPI 应用工厂"""

from typing import Callable, Optional

from fastapi import FastAPI

from application.auth.services.imap_authenticator import ImapAuthenticator
from interfaces.api.routes import auth_router
from interfaces.api.security.imap_basic_auth import set_authenticator_getter


def create_app(
    title: str = "IMAP Auth Service",
    version: str = "1.0.0",
    authenticator_getter: Optional[Callable[[], ImapAuthenticator]] = None,
) -> FastAPI:
    """
    创建 FastAPI 应用

    Args:
        title: 服务名称
        version: 服务版本
        authenticator_getter: 返回 ImapAuthenticator 的函数（通常来自 DI 容器）
    """
    app = FastAPI(title=title, version=version)

    set_authenticator_getter(authenticator_getter)

    app.include_router(auth_router, prefix="/api/v1")

    @app.get("/health")
    def health():
        """健康检查"""
        return {"status": "healthy"}

    return app
