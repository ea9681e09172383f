import logging
from typing import Optional

from fastapi import Request
from sqlalchemy.orm import Session

from app.core.auth import AuthContext
from app.core.response import success_response
from app.domains.auth.exception import auth_error
from app.domains.pets.service.pet_access import PetAccess, AccessFailure
from app.domains.preventatives.repository.preventative_repository import PreventativeRepository
from app.domains.tasks.exception import task_error
from app.domains.tasks.repository.completion_repository import CompletionRepository
from app.domains.tasks.repository.task_repository import TaskRepository
from app.domains.tasks.service.due_day_resolver import (
    resolve_due_preventatives,
    tag_daily_task,
    tag_preventative,
)
from app.models.task_completion import TaskType
from app.schemas.tasks.completion_schema import CompletionInfo
from app.schemas.tasks.task_schema import DailyTaskCreateRequest
from app.utils.date_utils import parse_calendar_date

logger = logging.getLogger(__name__)

FAILURE_CODES = {
    AccessFailure.USER_NOT_FOUND: "TASK_404_1",
    AccessFailure.PET_NOT_FOUND: "TASK_404_2",
    AccessFailure.NOT_OWNER: "TASK_403_1",
}


def _completion_dict(completion) -> dict:
    return CompletionInfo.model_validate(completion).model_dump()


class TaskService:
    def __init__(self, db: Session):
        self.db = db
        self.repo = TaskRepository(db)
        self.completions = CompletionRepository(db)
        self.preventatives = PreventativeRepository(db)
        self.access = PetAccess(db)

    # --------------------------------------------------
    # 날짜별 할 일 목록
    # --------------------------------------------------
    def list_pet_tasks(self, request: Request, auth: AuthContext, pet_id: int, date: Optional[str]):
        """
        일일 할 일(최신순) + date 에 해당하는 예방 관리 항목(due_day 오름차순).
        date 가 없으면 일일 할 일만 반환한다.
        """
        path = request.url.path

        if not auth.is_authenticated:
            return auth_error(auth.error_code, path)

        # 날짜 파싱은 여기서 한 번만 (빈 값은 미지정)
        try:
            target = parse_calendar_date(date or None)
        except ValueError:
            return task_error("TASK_400_2", path)

        _, pet, failure = self.access.owned_pet(auth, pet_id)
        if failure:
            return task_error(FAILURE_CODES[failure], path)

        try:
            tasks = [tag_daily_task(t) for t in self.repo.list_daily_tasks(pet.pet_id)]

            if target is not None:
                due = resolve_due_preventatives(self.preventatives.list_for_pet(pet.pet_id), target)
                tasks.extend(tag_preventative(p) for p in due)

                done = self.completions.completed_keys(
                    ((TaskType(t["task_type"]), t["id"]) for t in tasks), target
                )
                for t in tasks:
                    t["completed"] = (TaskType(t["task_type"]), t["id"]) in done
        except Exception:
            logger.exception("TASK_LIST_ERROR")
            return task_error("TASK_500_1", path)

        return success_response(path, pet_id=pet.pet_id, date=target, tasks=tasks)

    # --------------------------------------------------
    # 일일 할 일 생성 / 삭제
    # --------------------------------------------------
    def create_daily_task(self, request: Request, auth: AuthContext, pet_id: int, body: DailyTaskCreateRequest):
        path = request.url.path

        if not auth.is_authenticated:
            return auth_error(auth.error_code, path)

        _, pet, failure = self.access.owned_pet(auth, pet_id)
        if failure:
            return task_error(FAILURE_CODES[failure], path)

        task_name = (body.task_name or "").strip()
        if not task_name:
            return task_error("TASK_400_1", path)

        try:
            task = self.repo.create_daily_task(pet.pet_id, task_name)
            self.db.commit()
            self.db.refresh(task)
        except Exception:
            logger.exception("TASK_CREATE_ERROR")
            self.db.rollback()
            return task_error("TASK_500_2", path)

        return success_response(path, 201, task=tag_daily_task(task))

    def delete_daily_task(self, request: Request, auth: AuthContext, task_id: int):
        path = request.url.path

        if not auth.is_authenticated:
            return auth_error(auth.error_code, path)

        task, failure_code = self._owned_task(auth, TaskType.daily, task_id)
        if failure_code:
            return task_error(failure_code, path)

        try:
            self.repo.delete_daily_task(task)
            self.db.commit()
        except Exception:
            logger.exception("TASK_DELETE_ERROR")
            self.db.rollback()
            return task_error("TASK_500_2", path)

        return success_response(path, message="할 일이 삭제되었습니다.", task_id=task_id)

    # --------------------------------------------------
    # 완료 기록
    # --------------------------------------------------
    def complete_task(
        self,
        request: Request,
        auth: AuthContext,
        task_type: TaskType,
        task_id: int,
        completion_date: Optional[str],
    ):
        """
        (task_type, task_id, date) 당 한 번만 기록.
        처음 기록하면 201, 이미 있으면 기존 기록과 함께 200.
        """
        path = request.url.path

        if not auth.is_authenticated:
            return auth_error(auth.error_code, path)

        try:
            on = parse_calendar_date(completion_date)
        except ValueError:
            return task_error("TASK_400_2", path)
        if on is None:
            return task_error("TASK_400_2", path)

        _, failure_code = self._owned_task(auth, task_type, task_id)
        if failure_code:
            return task_error(failure_code, path)

        try:
            completion, created = self.completions.create_once(task_type, task_id, on)
        except Exception:
            logger.exception("TASK_COMPLETE_ERROR")
            self.db.rollback()
            return task_error("TASK_500_3", path)

        status = 201 if created else 200
        return success_response(path, status, created=created, completion=_completion_dict(completion))

    def get_completion(self, request: Request, auth: AuthContext, task_type: TaskType, task_id: int, on_date: str):
        path = request.url.path

        if not auth.is_authenticated:
            return auth_error(auth.error_code, path)

        try:
            on = parse_calendar_date(on_date)
        except ValueError:
            return task_error("TASK_400_2", path)

        _, failure_code = self._owned_task(auth, task_type, task_id)
        if failure_code:
            return task_error(failure_code, path)

        completion = self.completions.get(task_type, task_id, on)
        return success_response(path, completion=_completion_dict(completion) if completion else None)

    def delete_completion(self, request: Request, auth: AuthContext, task_type: TaskType, task_id: int, on_date: str):
        path = request.url.path

        if not auth.is_authenticated:
            return auth_error(auth.error_code, path)

        try:
            on = parse_calendar_date(on_date)
        except ValueError:
            return task_error("TASK_400_2", path)

        _, failure_code = self._owned_task(auth, task_type, task_id)
        if failure_code:
            return task_error(failure_code, path)

        try:
            deleted = self.completions.delete(task_type, task_id, on)
            self.db.commit()
        except Exception:
            logger.exception("TASK_UNCOMPLETE_ERROR")
            self.db.rollback()
            return task_error("TASK_500_3", path)

        return success_response(path, deleted=deleted)

    def list_pet_completions(
        self,
        request: Request,
        auth: AuthContext,
        pet_id: int,
        start: Optional[str],
        end: Optional[str],
    ):
        """달력 표시용: 반려동물의 모든 할 일 완료 기록 (start~end, 양끝 포함)"""
        path = request.url.path

        if not auth.is_authenticated:
            return auth_error(auth.error_code, path)

        try:
            start_date = parse_calendar_date(start)
            end_date = parse_calendar_date(end)
        except ValueError:
            return task_error("TASK_400_2", path)

        if start_date and end_date and start_date > end_date:
            return task_error("TASK_400_3", path)

        _, pet, failure = self.access.owned_pet(auth, pet_id)
        if failure:
            return task_error(FAILURE_CODES[failure], path)

        daily_ids, preventative_ids = self.repo.task_ids_for_pet(pet.pet_id)
        rows = self.completions.list_for_tasks(daily_ids, preventative_ids, start_date, end_date)

        return success_response(
            path,
            pet_id=pet.pet_id,
            start=start_date,
            end=end_date,
            completions=[_completion_dict(c) for c in rows],
        )

    # --------------------------------------------------
    # 내부: task → pet → owner 확인
    # --------------------------------------------------
    def _owned_task(self, auth: AuthContext, task_type: TaskType, task_id: int):
        user = self.access.current_user(auth)
        if not user:
            return None, "TASK_404_1"

        task, pet = self.repo.get_task_with_pet(task_type, task_id)
        if task is None:
            return None, "TASK_404_3"

        if pet is None or pet.owner_id != user.user_id:
            return None, "TASK_403_1"

        return task, None
