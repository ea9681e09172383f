import logging

from fastapi import Request
from sqlalchemy.orm import Session

from app.core.auth import AuthContext
from app.core.response import success_response
from app.domains.auth.exception import auth_error
from app.domains.pets.service.pet_access import PetAccess, AccessFailure
from app.domains.service_tasks.exception import service_task_error
from app.domains.service_tasks.repository.service_task_repository import ServiceTaskRepository
from app.schemas.service_tasks.service_task_schema import ServiceTaskCreateRequest, ServiceTaskInfo

logger = logging.getLogger(__name__)

FAILURE_CODES = {
    AccessFailure.USER_NOT_FOUND: "SERVICE_TASK_404_1",
    AccessFailure.PET_NOT_FOUND: "SERVICE_TASK_404_2",
    AccessFailure.NOT_OWNER: "SERVICE_TASK_403_1",
}


def _task_dict(task) -> dict:
    return ServiceTaskInfo.model_validate(task).model_dump()


class ServiceTaskService:
    """서비스견 작업 목록 (완료 기록 없음)"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = ServiceTaskRepository(db)
        self.access = PetAccess(db)

    def _pet_or_error(self, auth: AuthContext, pet_id: int, path: str):
        if not auth.is_authenticated:
            return None, auth_error(auth.error_code, path)

        _, pet, failure = self.access.owned_pet(auth, pet_id)
        if failure:
            return None, service_task_error(FAILURE_CODES[failure], path)
        return pet, None

    def list_tasks(self, request: Request, auth: AuthContext, pet_id: int):
        path = request.url.path
        pet, error = self._pet_or_error(auth, pet_id, path)
        if error:
            return error

        tasks = self.repo.list_for_pet(pet.pet_id)
        return success_response(path, pet_id=pet.pet_id, tasks=[_task_dict(t) for t in tasks])

    def create_task(self, request: Request, auth: AuthContext, pet_id: int, body: ServiceTaskCreateRequest):
        path = request.url.path
        pet, error = self._pet_or_error(auth, pet_id, path)
        if error:
            return error

        task_name = (body.task_name or "").strip()
        if not task_name:
            return service_task_error("SERVICE_TASK_400_1", path)

        try:
            task = self.repo.create(pet.pet_id, task_name, body.notes)
            self.db.commit()
            self.db.refresh(task)
        except Exception:
            logger.exception("SERVICE_TASK_CREATE_ERROR")
            self.db.rollback()
            return service_task_error("SERVICE_TASK_500_1", path)

        return success_response(path, 201, task=_task_dict(task))

    def get_task(self, request: Request, auth: AuthContext, pet_id: int, task_id: int):
        path = request.url.path
        pet, error = self._pet_or_error(auth, pet_id, path)
        if error:
            return error

        task = self.repo.get_for_pet(pet.pet_id, task_id)
        if not task:
            return service_task_error("SERVICE_TASK_404_3", path)

        return success_response(path, task=_task_dict(task))

    def delete_task(self, request: Request, auth: AuthContext, pet_id: int, task_id: int):
        path = request.url.path
        pet, error = self._pet_or_error(auth, pet_id, path)
        if error:
            return error

        task = self.repo.get_for_pet(pet.pet_id, task_id)
        if not task:
            return service_task_error("SERVICE_TASK_404_3", path)

        try:
            self.repo.delete(task)
            self.db.commit()
        except Exception:
            logger.exception("SERVICE_TASK_DELETE_ERROR")
            self.db.rollback()
            return service_task_error("SERVICE_TASK_500_1", path)

        return success_response(path, message="서비스 작업이 삭제되었습니다.", task_id=task_id)
