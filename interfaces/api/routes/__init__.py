"""
REST API 路由

定义 REST API 端点。
"""

from interfaces.api.routes.auth import router as auth_router

__all__ = ["auth_router"]
