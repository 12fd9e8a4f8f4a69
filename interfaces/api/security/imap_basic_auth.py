"""
HTTP Basic 认证依赖

使用 IMAP 登录校验 HTTP Basic 凭证，保护任意路由：

    @router.get("/protected")
    def protected(username: str = Depends(require_imap_user)):
        ...

每个请求使用独立的 ImapAuthenticator（独立的 IMAP 连接），请求结束后登出。
"""

import logging
from typing import Callable, Iterator, Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBasic, HTTPBasicCredentials

from application.auth.services.imap_authenticator import ImapAuthenticator
from domain.common.exceptions import ImapConfigurationException, ImapConnectionException

logger = logging.getLogger(__name__)

security = HTTPBasic(realm="Protected Area", auto_error=False)


# ============ Authenticator 依赖注入 ============

# 全局 authenticator 工厂，由 DI 容器在启动时设置（每次调用返回新实例）
_authenticator_getter: Optional[Callable[[], ImapAuthenticator]] = None


def set_authenticator_getter(getter: Optional[Callable[[], ImapAuthenticator]]) -> None:
    """设置 authenticator 获取器（由 DI 容器调用）"""
    global _authenticator_getter
    _authenticator_getter = getter


def get_authenticator() -> Optional[ImapAuthenticator]:
    """获取 ImapAuthenticator 实例"""
    if _authenticator_getter is None:
        return None
    return _authenticator_getter()


def authenticator_for_request() -> Iterator[Optional[ImapAuthenticator]]:
    """
    为单个请求创建认证服务，请求结束后关闭

    Raises:
        HTTPException: 503 无法建立 IMAP 会话（配置错误、连接失败或超时）
    """
    try:
        authenticator = get_authenticator()
    except (ImapConfigurationException, ImapConnectionException) as e:
        logger.error(f"IMAP authenticator unavailable: {e.message}")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail={"message": e.message, "error_code": e.code},
        )

    if authenticator is None:
        yield None
        return

    try:
        yield authenticator
    finally:
        authenticator.close()


def not_configured() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        detail="IMAP authenticator not configured",
    )


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": 'Basic realm="Protected Area"'},
    )


def require_imap_user(
    credentials: Optional[HTTPBasicCredentials] = Depends(security),
    authenticator: Optional[ImapAuthenticator] = Depends(authenticator_for_request),
) -> str:
    """
    校验 HTTP Basic 凭证

    Returns:
        通过认证的用户名

    Raises:
        HTTPException: 401 凭证缺失或错误；503 认证服务未配置或不可用
    """
    if authenticator is None:
        raise not_configured()
    if credentials is None:
        raise _unauthorized("Missing credentials")

    if not authenticator.authenticate(credentials.username, credentials.password):
        logger.warning(f"Basic auth rejected for user '{credentials.username}'")
        raise _unauthorized("Invalid username or password")

    return credentials.username
