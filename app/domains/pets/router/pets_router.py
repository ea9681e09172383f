from fastapi import APIRouter, Request, Depends, UploadFile, File, Form, Path
from sqlalchemy.orm import Session
from typing import Optional

from app.core.auth import AuthContext, get_auth_context
from app.db import get_db

from app.schemas.pets.pet_schema import PetResponse, PetListResponse
from app.schemas.pets.pet_update_schema import PetUpdateRequest
from app.schemas.pets.pet_image_schema import PetImageResponse

from app.domains.pets.service.pet_service import PetService
from app.domains.pets.exception import (
    PET_REGISTER_RESPONSES,
    PET_GET_RESPONSES,
    PET_UPDATE_RESPONSES,
    PET_IMAGE_RESPONSES,
    PET_DELETE_RESPONSES,
)

router = APIRouter(
    prefix="/api/pets",
    tags=["Pets"]
)


# ------------------------
# 1. 내 반려동물 목록
# ------------------------
@router.get(
    "",
    summary="내 반려동물 목록",
    description="로그인한 사용자가 등록한 반려동물을 최신순으로 조회합니다.",
    status_code=200,
    response_model=PetListResponse,
    responses=PET_GET_RESPONSES,
)
def list_pets(
    request: Request,
    auth: AuthContext = Depends(get_auth_context),
    db: Session = Depends(get_db),
):
    return PetService(db).list_my_pets(request, auth)


# ------------------------
# 2. 반려동물 등록
# ------------------------
@router.post(
    "",
    summary="반려동물 신규 등록",
    description="multipart/form-data 로 반려동물을 등록합니다. image 는 선택입니다.",
    status_code=201,
    response_model=PetResponse,
    responses=PET_REGISTER_RESPONSES,
)
def register_pet(
    request: Request,
    name: Optional[str] = Form(None, description="반려동물 이름 (필수)"),
    species: Optional[str] = Form(None, description="종 (canine, feline 등)"),
    breed: Optional[str] = Form(None, description="품종"),
    sex: Optional[str] = Form(None, description="성별 (M, F, Unknown)"),
    birthdate: Optional[str] = Form(None, description="생일 (YYYY-MM-DD)"),
    adoption_date: Optional[str] = Form(None, description="입양일 (YYYY-MM-DD)"),
    image: Optional[UploadFile] = File(None, description="프로필 이미지 (image/*, 최대 5MB)"),
    auth: AuthContext = Depends(get_auth_context),
    db: Session = Depends(get_db),
):
    """
    반려동물을 등록합니다.

    - 등록한 사용자가 owner 로 설정됨
    - 이미지가 있으면 저장소에 업로드 후 image_url 로 저장
    """
    return PetService(db).register_pet(
        request, auth,
        name=name,
        species=species,
        breed=breed,
        sex=sex,
        birthdate=birthdate,
        adoption_date=adoption_date,
        image=image,
    )


# ------------------------
# 3. 반려동물 상세
# ------------------------
@router.get(
    "/{pet_id}",
    summary="반려동물 상세 조회",
    status_code=200,
    response_model=PetResponse,
    responses=PET_GET_RESPONSES,
)
def get_pet(
    request: Request,
    pet_id: int = Path(..., description="반려동물 ID"),
    auth: AuthContext = Depends(get_auth_context),
    db: Session = Depends(get_db),
):
    return PetService(db).get_pet(request, auth, pet_id)


# ------------------------
# 4. 반려동물 정보 부분 수정
# ------------------------
@router.put(
    "/{pet_id}",
    summary="반려동물 정보 수정",
    description="반려동물의 정보를 부분적으로 수정합니다. 전송한 필드만 업데이트됩니다.",
    status_code=200,
    response_model=PetResponse,
    responses=PET_UPDATE_RESPONSES,
)
def update_pet(
    request: Request,
    body: PetUpdateRequest,
    pet_id: int = Path(..., description="반려동물 ID"),
    auth: AuthContext = Depends(get_auth_context),
    db: Session = Depends(get_db),
):
    return PetService(db).update_pet_detail(request, auth, pet_id, body)


# ------------------------
# 5. 반려동물 이미지 교체
# ------------------------
@router.put(
    "/{pet_id}/image",
    summary="반려동물 이미지 교체",
    description="새 이미지를 업로드하고 이전 이미지는 삭제합니다.",
    status_code=200,
    response_model=PetImageResponse,
    responses=PET_IMAGE_RESPONSES,
)
def update_pet_image(
    request: Request,
    pet_id: int = Path(..., description="반려동물 ID"),
    image: Optional[UploadFile] = File(None, description="프로필 이미지 (image/*, 최대 5MB)"),
    auth: AuthContext = Depends(get_auth_context),
    db: Session = Depends(get_db),
):
    return PetService(db).update_pet_image(request, auth, pet_id, image)


# ------------------------
# 6. 반려동물 삭제
# ------------------------
@router.delete(
    "/{pet_id}",
    summary="반려동물 삭제",
    description="반려동물을 삭제합니다. 할 일, 예방 관리, 완료 기록, 사진도 함께 삭제됩니다.",
    status_code=204,
    responses=PET_DELETE_RESPONSES,
)
def delete_pet(
    request: Request,
    pet_id: int = Path(..., description="반려동물 ID"),
    auth: AuthContext = Depends(get_auth_context),
    db: Session = Depends(get_db),
):
    """
    - 권한: 해당 반려동물의 owner만 삭제 가능
    - 주의: 삭제 시 관련된 모든 데이터가 영구적으로 삭제됩니다
    """
    return PetService(db).delete_pet(request, auth, pet_id)
