import logging
from typing import Optional

from fastapi import Request
from sqlalchemy.orm import Session

from app.core.auth import AuthContext
from app.core.response import success_response
from app.domains.auth.exception import auth_error
from app.domains.pets.service.pet_access import PetAccess, AccessFailure
from app.domains.preventatives.exception import preventative_error
from app.domains.preventatives.repository.preventative_repository import PreventativeRepository
from app.models.preventative import MIN_DUE_DAY, MAX_DUE_DAY
from app.schemas.preventatives.preventative_schema import (
    PreventativeCreateRequest,
    PreventativeInfo,
    PreventativeUpdateRequest,
)

logger = logging.getLogger(__name__)

FAILURE_CODES = {
    AccessFailure.USER_NOT_FOUND: "PREVENTATIVE_404_1",
    AccessFailure.PET_NOT_FOUND: "PREVENTATIVE_404_2",
    AccessFailure.NOT_OWNER: "PREVENTATIVE_403_1",
}


def _valid_due_day(due_day: Optional[int]) -> bool:
    return due_day is not None and MIN_DUE_DAY <= due_day <= MAX_DUE_DAY


def _preventative_dict(p) -> dict:
    return PreventativeInfo.model_validate(p).model_dump()


class PreventativeService:
    def __init__(self, db: Session):
        self.db = db
        self.repo = PreventativeRepository(db)
        self.access = PetAccess(db)

    def list_for_pet(self, request: Request, auth: AuthContext, pet_id: int):
        path = request.url.path

        if not auth.is_authenticated:
            return auth_error(auth.error_code, path)

        _, pet, failure = self.access.owned_pet(auth, pet_id)
        if failure:
            return preventative_error(FAILURE_CODES[failure], path)

        items = self.repo.list_for_pet(pet.pet_id)
        return success_response(
            path,
            pet_id=pet.pet_id,
            preventatives=[_preventative_dict(p) for p in items],
        )

    def create(self, request: Request, auth: AuthContext, body: PreventativeCreateRequest):
        path = request.url.path

        if not auth.is_authenticated:
            return auth_error(auth.error_code, path)

        _, pet, failure = self.access.owned_pet(auth, body.pet_id)
        if failure:
            return preventative_error(FAILURE_CODES[failure], path)

        name = (body.name or "").strip()
        if not name:
            return preventative_error("PREVENTATIVE_400_1", path)
        if not _valid_due_day(body.due_day):
            return preventative_error("PREVENTATIVE_400_2", path)

        try:
            preventative = self.repo.create(pet.pet_id, name, body.due_day, body.notes)
            self.db.commit()
            self.db.refresh(preventative)
        except Exception:
            logger.exception("PREVENTATIVE_CREATE_ERROR")
            self.db.rollback()
            return preventative_error("PREVENTATIVE_500_1", path)

        return success_response(path, 201, preventative=_preventative_dict(preventative))

    def update(self, request: Request, auth: AuthContext, preventative_id: int, body: PreventativeUpdateRequest):
        path = request.url.path

        if not auth.is_authenticated:
            return auth_error(auth.error_code, path)

        preventative, failure_code = self._owned(auth, preventative_id)
        if failure_code:
            return preventative_error(failure_code, path)

        if body.name is None and body.due_day is None and body.notes is None:
            return preventative_error("PREVENTATIVE_400_3", path)

        name = body.name.strip() if body.name is not None else None
        if name == "":
            return preventative_error("PREVENTATIVE_400_1", path)
        if body.due_day is not None and not _valid_due_day(body.due_day):
            return preventative_error("PREVENTATIVE_400_2", path)

        try:
            self.repo.update_partial(preventative, name=name, due_day=body.due_day, notes=body.notes)
            self.db.commit()
            self.db.refresh(preventative)
        except Exception:
            logger.exception("PREVENTATIVE_UPDATE_ERROR")
            self.db.rollback()
            return preventative_error("PREVENTATIVE_500_1", path)

        return success_response(path, preventative=_preventative_dict(preventative))

    def delete(self, request: Request, auth: AuthContext, preventative_id: int):
        path = request.url.path

        if not auth.is_authenticated:
            return auth_error(auth.error_code, path)

        preventative, failure_code = self._owned(auth, preventative_id)
        if failure_code:
            return preventative_error(failure_code, path)

        try:
            self.repo.delete(preventative)
            self.db.commit()
        except Exception:
            logger.exception("PREVENTATIVE_DELETE_ERROR")
            self.db.rollback()
            return preventative_error("PREVENTATIVE_500_2", path)

        return success_response(
            path,
            message="예방 관리 항목이 삭제되었습니다.",
            preventative_id=preventative_id,
        )

    def _owned(self, auth: AuthContext, preventative_id: int):
        user = self.access.current_user(auth)
        if not user:
            return None, "PREVENTATIVE_404_1"

        preventative = self.repo.get_by_id(preventative_id)
        if not preventative:
            return None, "PREVENTATIVE_404_3"

        if preventative.pet.owner_id != user.user_id:
            return None, "PREVENTATIVE_403_1"

        return preventative, None
