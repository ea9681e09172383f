from fastapi import APIRouter, Request, Depends, Path
from sqlalchemy.orm import Session

from app.core.auth import AuthContext, get_auth_context
from app.db import get_db
from app.domains.preventatives.exception import (
    PREVENTATIVE_LIST_RESPONSES,
    PREVENTATIVE_CREATE_RESPONSES,
    PREVENTATIVE_UPDATE_RESPONSES,
    PREVENTATIVE_DELETE_RESPONSES,
)
from app.domains.preventatives.service.preventative_service import PreventativeService
from app.schemas.preventatives.preventative_schema import (
    PreventativeCreateRequest,
    PreventativeUpdateRequest,
    PreventativeResponse,
    PreventativeListResponse,
    PreventativeDeleteResponse,
)

router = APIRouter(prefix="/api/preventatives", tags=["Preventatives"])


@router.get(
    "/pet/{pet_id}",
    summary="예방 관리 항목 목록",
    description="반려동물의 월간 예방 관리 항목을 due_day 오름차순으로 조회합니다.",
    status_code=200,
    response_model=PreventativeListResponse,
    responses=PREVENTATIVE_LIST_RESPONSES,
)
def list_preventatives(
    request: Request,
    pet_id: int = Path(..., description="반려동물 ID"),
    auth: AuthContext = Depends(get_auth_context),
    db: Session = Depends(get_db),
):
    return PreventativeService(db).list_for_pet(request, auth, pet_id)


@router.post(
    "",
    summary="예방 관리 항목 생성",
    status_code=201,
    response_model=PreventativeResponse,
    responses=PREVENTATIVE_CREATE_RESPONSES,
)
def create_preventative(
    request: Request,
    body: PreventativeCreateRequest,
    auth: AuthContext = Depends(get_auth_context),
    db: Session = Depends(get_db),
):
    return PreventativeService(db).create(request, auth, body)


@router.put(
    "/{preventative_id}",
    summary="예방 관리 항목 수정",
    description="전송한 필드만 수정합니다.",
    status_code=200,
    response_model=PreventativeResponse,
    responses=PREVENTATIVE_UPDATE_RESPONSES,
)
def update_preventative(
    request: Request,
    body: PreventativeUpdateRequest,
    preventative_id: int = Path(..., description="예방 관리 항목 ID"),
    auth: AuthContext = Depends(get_auth_context),
    db: Session = Depends(get_db),
):
    return PreventativeService(db).update(request, auth, preventative_id, body)


@router.delete(
    "/{preventative_id}",
    summary="예방 관리 항목 삭제",
    description="항목과 그 완료 기록을 함께 삭제합니다.",
    status_code=200,
    response_model=PreventativeDeleteResponse,
    responses=PREVENTATIVE_DELETE_RESPONSES,
)
def delete_preventative(
    request: Request,
    preventative_id: int = Path(..., description="예방 관리 항목 ID"),
    auth: AuthContext = Depends(get_auth_context),
    db: Session = Depends(get_db),
):
    return PreventativeService(db).delete(request, auth, preventative_id)
