import logging
from typing import Optional, Tuple

from fastapi import Request, UploadFile
from fastapi.responses import Response
from sqlalchemy.orm import Session

from app.core.auth import AuthContext
from app.core.response import success_response
from app.domains.auth.exception import auth_error
from app.domains.pets.exception import pet_error
from app.domains.pets.repository.pet_repository import PetRepository
from app.domains.pets.service.pet_access import PetAccess, AccessFailure
from app.models.pet import Pet, PetSex
from app.schemas.pets.pet_schema import PetInfo
from app.schemas.pets.pet_update_schema import PetUpdateRequest
from app.utils.date_utils import parse_calendar_date

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ["name", "species", "breed", "sex", "birthdate", "adoption_date"]


def _pet_dict(pet: Pet) -> dict:
    return PetInfo.model_validate(pet).model_dump()


def discard_photo(storage, url: Optional[str]) -> None:
    """DB 반영 이후의 사진 정리. 실패해도 요청 결과는 바꾸지 않는다."""
    if not url:
        return
    try:
        storage.delete(url)
    except Exception:
        logger.exception("PET_IMAGE_DELETE_ERROR")


def read_image_upload(file: Optional[UploadFile], max_bytes: int) -> Tuple[Optional[bytes], Optional[str]]:
    """
    업로드 파일 검증.

    Returns:
        (content, error) - error 는 "missing" | "type" | "size" 중 하나
    """
    if file is None or not file.filename:
        return None, "missing"

    if not (file.content_type or "").startswith("image/"):
        return None, "type"

    content = file.file.read()
    if len(content) == 0:
        return None, "missing"
    if len(content) > max_bytes:
        return None, "size"

    return content, None


class PetService:
    def __init__(self, db: Session):
        self.db = db
        self.repo = PetRepository(db)
        self.access = PetAccess(db)

    # --------------------------------------------------
    # 반려동물 등록
    # --------------------------------------------------
    def register_pet(
        self,
        request: Request,
        auth: AuthContext,
        name: Optional[str],
        species: Optional[str],
        breed: Optional[str],
        sex: Optional[str],
        birthdate: Optional[str],
        adoption_date: Optional[str],
        image: Optional[UploadFile],
    ):
        path = request.url.path

        if not auth.is_authenticated:
            return auth_error(auth.error_code, path)

        user = self.access.current_user(auth)
        if not user:
            return pet_error("PET_404_1", path)

        if not name or not name.strip():
            return pet_error("PET_400_1", path)

        sex = sex or None
        if sex is not None and sex not in PetSex.__members__:
            return pet_error("PET_400_2", path)

        try:
            birth = parse_calendar_date(birthdate or None)
            adopted = parse_calendar_date(adoption_date or None)
        except ValueError:
            return pet_error("PET_400_3", path)

        # 이미지는 선택
        image_url = None
        storage = request.app.state.photo_storage
        if image is not None and image.filename:
            content, err = read_image_upload(image, request.app.state.settings.MAX_UPLOAD_BYTES)
            if err == "type":
                return pet_error("PET_400_4", path)
            if err == "size":
                return pet_error("PET_400_5", path)
            if content is not None:
                try:
                    image_url = storage.save(content, image.filename, image.content_type)
                except Exception:
                    logger.exception("PET_IMAGE_STORE_ERROR")
                    return pet_error("PET_500_3", path)

        try:
            pet = self.repo.create_pet(
                owner_id=user.user_id,
                name=name.strip(),
                species=species,
                breed=breed,
                sex=sex,
                birthdate=birth,
                adoption_date=adopted,
                image_url=image_url,
            )
            self.db.commit()
            self.db.refresh(pet)
        except Exception:
            logger.exception("PET_REGISTER_ERROR")
            self.db.rollback()
            discard_photo(storage, image_url)
            return pet_error("PET_500_1", path)

        logger.info("Pet %s registered for user %s", pet.pet_id, user.user_id)
        return success_response(path, 201, pet=_pet_dict(pet))

    # --------------------------------------------------
    # 조회
    # --------------------------------------------------
    def list_my_pets(self, request: Request, auth: AuthContext):
        path = request.url.path

        if not auth.is_authenticated:
            return auth_error(auth.error_code, path)

        user = self.access.current_user(auth)
        if not user:
            return pet_error("PET_GET_404_1", path)

        pets = self.repo.get_pets_for_user(user.user_id)
        return success_response(path, pets=[_pet_dict(p) for p in pets])

    def get_pet(self, request: Request, auth: AuthContext, pet_id: int):
        path = request.url.path

        if not auth.is_authenticated:
            return auth_error(auth.error_code, path)

        _, pet, failure = self.access.owned_pet(auth, pet_id)
        if failure:
            return pet_error(self._failure_code("PET_GET", failure), path)

        return success_response(path, pet=_pet_dict(pet))

    # --------------------------------------------------
    # 반려동물 정보 수정
    # --------------------------------------------------
    def update_pet_detail(
        self,
        request: Request,
        auth: AuthContext,
        pet_id: int,
        body: PetUpdateRequest,
    ):
        path = request.url.path

        if not auth.is_authenticated:
            return auth_error(auth.error_code, path)

        _, pet, failure = self.access.owned_pet(auth, pet_id)
        if failure:
            return pet_error(self._failure_code("PET_EDIT", failure), path)

        if not body or all(getattr(body, f) is None for f in UPDATABLE_FIELDS):
            return pet_error("PET_EDIT_400_1", path)

        try:
            updated_pet = self.repo.update_partial(
                pet,
                name=body.name,
                species=body.species,
                breed=body.breed,
                sex=PetSex(body.sex) if body.sex else None,
                birthdate=body.birthdate,
                adoption_date=body.adoption_date,
            )
            self.db.commit()
            self.db.refresh(updated_pet)
        except Exception:
            logger.exception("PET_PARTIAL_UPDATE_ERROR")
            self.db.rollback()
            return pet_error("PET_EDIT_500_1", path)

        return success_response(path, pet=_pet_dict(updated_pet))

    # --------------------------------------------------
    # 반려동물 이미지 교체
    # --------------------------------------------------
    def update_pet_image(
        self,
        request: Request,
        auth: AuthContext,
        pet_id: int,
        image: Optional[UploadFile],
    ):
        path = request.url.path

        if not auth.is_authenticated:
            return auth_error(auth.error_code, path)

        _, pet, failure = self.access.owned_pet(auth, pet_id)
        if failure:
            return pet_error(self._failure_code("PET_IMG", failure), path)

        content, err = read_image_upload(image, request.app.state.settings.MAX_UPLOAD_BYTES)
        if err == "missing":
            return pet_error("PET_IMG_400_1", path)
        if err == "type":
            return pet_error("PET_IMG_400_2", path)
        if err == "size":
            return pet_error("PET_IMG_400_3", path)

        storage = request.app.state.photo_storage
        try:
            image_url = storage.save(content, image.filename, image.content_type)
        except Exception:
            logger.exception("PET_IMAGE_UPLOAD_ERROR")
            return pet_error("PET_IMG_500_1", path)

        old_url = pet.image_url
        try:
            pet.image_url = image_url
            self.db.commit()
            self.db.refresh(pet)
        except Exception:
            logger.exception("PET_IMAGE_URL_SAVE_ERROR")
            self.db.rollback()
            discard_photo(storage, image_url)
            return pet_error("PET_IMG_500_2", path)

        # 이전 사진은 DB 반영 후 삭제
        discard_photo(storage, old_url)

        return success_response(path, image_url=image_url, pet=_pet_dict(pet))

    # --------------------------------------------------
    # 반려동물 삭제
    # --------------------------------------------------
    def delete_pet(self, request: Request, auth: AuthContext, pet_id: int):
        path = request.url.path

        if not auth.is_authenticated:
            return auth_error(auth.error_code, path)

        _, pet, failure = self.access.owned_pet(auth, pet_id)
        if failure:
            return pet_error(self._failure_code("PET_DELETE", failure), path)

        image_url = pet.image_url
        try:
            self.repo.delete_pet(pet)
            self.db.commit()
        except Exception:
            logger.exception("PET_DELETE_ERROR")
            self.db.rollback()
            return pet_error("PET_DELETE_500_1", path)

        discard_photo(request.app.state.photo_storage, image_url)

        logger.info("Pet %s deleted", pet_id)
        return Response(status_code=204)

    @staticmethod
    def _failure_code(prefix: str, failure: AccessFailure) -> str:
        return {
            AccessFailure.USER_NOT_FOUND: f"{prefix}_404_1",
            AccessFailure.PET_NOT_FOUND: f"{prefix}_404_2",
            AccessFailure.NOT_OWNER: f"{prefix}_403_1",
        }[failure]
