from fastapi import APIRouter, Request, Depends
from sqlalchemy.orm import Session

from app.core.auth import AuthContext, get_auth_context
from app.db import get_db
from app.domains.users.service.user_service import UserService
from app.domains.users.exception import USER_CREATE_RESPONSES, USER_GET_RESPONSES, USER_EDIT_RESPONSES

from app.schemas.users.user_schema import UserCreateRequest, UserResponse
from app.schemas.users.user_update_schema import UserUpdateRequest


router = APIRouter(prefix="/api/users", tags=["Users"])


@router.post(
    "",
    summary="사용자 생성/동기화",
    description="인증된 사용자를 내부 DB 에 생성하거나, 이미 있으면 이메일/이름을 갱신합니다.",
    status_code=201,
    response_model=UserResponse,
    responses=USER_CREATE_RESPONSES,
)
def create_user(
    request: Request,
    body: UserCreateRequest,
    auth: AuthContext = Depends(get_auth_context),
    db: Session = Depends(get_db),
):
    return UserService.create_or_sync(request, auth, body, db)


@router.get(
    "/me",
    summary="내 정보 조회",
    description="현재 로그인한 사용자의 정보를 조회합니다.",
    status_code=200,
    response_model=UserResponse,
    responses=USER_GET_RESPONSES,
)
def get_me(
    request: Request,
    auth: AuthContext = Depends(get_auth_context),
    db: Session = Depends(get_db),
):
    return UserService.get_me(request, auth, db)


@router.patch(
    "/me",
    summary="내 정보 수정",
    description="현재 로그인한 사용자의 이름을 수정합니다.",
    status_code=200,
    response_model=UserResponse,
    responses=USER_EDIT_RESPONSES,
)
def update_me(
    request: Request,
    body: UserUpdateRequest,
    auth: AuthContext = Depends(get_auth_context),
    db: Session = Depends(get_db),
):
    return UserService.update_me(request, auth, body, db)
