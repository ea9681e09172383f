from fastapi import APIRouter, Request, Depends
from sqlalchemy.orm import Session

from app.core.auth import AuthContext, get_auth_context
from app.db import get_db
from app.domains.auth.service.auth_service import AuthService
from app.schemas.auth.auth_schema import LoginResponse, TokenResponse
from app.domains.auth.exception import AUTH_LOGIN_RESPONSES, AUTH_TOKEN_RESPONSES

router = APIRouter(prefix="/api/auth", tags=["Auth"])


@router.post(
    "/login",
    summary="ID 토큰으로 로그인",
    description="ID 토큰을 사용하여 사용자를 인증하고 로그인합니다. 신규 사용자는 자동으로 생성됩니다.",
    status_code=200,
    response_model=LoginResponse,
    responses=AUTH_LOGIN_RESPONSES,
)
def login(
    request: Request,
    auth: AuthContext = Depends(get_auth_context),
    db: Session = Depends(get_db)
):
    """
    ID 토큰을 사용하여 사용자를 인증합니다.

    - Authorization 헤더에 ID 토큰을 포함하여 요청
    - 신규 사용자는 자동으로 생성되고 is_new_user=true 반환
    - 기존 사용자는 is_new_user=false 반환
    """
    return AuthService.login(request, auth, db)


@router.post(
    "/token",
    summary="Bearer 토큰 발급",
    description="현재 인증된 사용자에 대한 custom token 을 발급합니다.",
    status_code=200,
    response_model=TokenResponse,
    responses=AUTH_TOKEN_RESPONSES,
)
def issue_token(
    request: Request,
    auth: AuthContext = Depends(get_auth_context),
):
    return AuthService.issue_token(request, auth)
