"""IMAP 认证 API 路由"""

from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from application.auth.services.imap_authenticator import ImapAuthenticator
from interfaces.api.security.imap_basic_auth import (
    authenticator_for_request,
    not_configured,
    require_imap_user,
)


router = APIRouter(prefix="/auth", tags=["IMAP Auth"])


# ============ Request/Response DTOs ============

class VerifyCredentialsRequest(BaseModel):
    """
    凭证校验请求

    Attributes:
        username: IMAP 用户名
        password: IMAP 密码
    """

    username: str = Field(..., description="IMAP 用户名")
    password: str = Field(..., description="IMAP 密码")


class VerifyCredentialsResponse(BaseModel):
    """凭证校验响应"""

    username: str = Field(..., description="IMAP 用户名")
    authenticated: bool = Field(..., description="是否通过认证")


class CurrentUserResponse(BaseModel):
    """当前用户响应"""

    username: str = Field(..., description="通过 HTTP Basic 认证的用户名")


# ============ API Endpoints ============

@router.post(
    "/verify",
    response_model=VerifyCredentialsResponse,
    summary="校验 IMAP 凭证",
)
def verify_credentials(
    request: VerifyCredentialsRequest,
    authenticator: Optional[ImapAuthenticator] = Depends(authenticator_for_request),
) -> VerifyCredentialsResponse:
    """尝试一次 IMAP 登录，返回是否成功（失败不返回错误码）"""
    if authenticator is None:
        raise not_configured()

    return VerifyCredentialsResponse(
        username=request.username,
        authenticated=authenticator.authenticate(request.username, request.password),
    )


@router.get(
    "/me",
    response_model=CurrentUserResponse,
    summary="当前用户",
)
def current_user(username: str = Depends(require_imap_user)) -> CurrentUserResponse:
    """返回通过 HTTP Basic 认证的用户名"""
    return CurrentUserResponse(username=username)
