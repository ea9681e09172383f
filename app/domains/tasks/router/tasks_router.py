from typing import Optional

from fastapi import APIRouter, Request, Depends, Path, Query
from sqlalchemy.orm import Session

from app.core.auth import AuthContext, get_auth_context
from app.db import get_db
from app.domains.tasks.exception import (
    TASK_LIST_RESPONSES,
    TASK_CREATE_RESPONSES,
    TASK_DELETE_RESPONSES,
    COMPLETION_RESPONSES,
)
from app.domains.tasks.service.task_service import TaskService
from app.models.task_completion import TaskType
from app.schemas.tasks.completion_schema import (
    CompletionCreateRequest,
    CompletionResponse,
    CompletionLookupResponse,
    CompletionDeleteResponse,
    CompletionListResponse,
)
from app.schemas.tasks.task_schema import (
    DailyTaskCreateRequest,
    TaskListResponse,
    TaskResponse,
    TaskDeleteResponse,
)

router = APIRouter(prefix="/api", tags=["Tasks"])


# ------------------------
# 1. 날짜별 할 일 목록
# ------------------------
@router.get(
    "/pets/{pet_id}/tasks",
    summary="반려동물 할 일 목록",
    description=(
        "일일 할 일을 반환합니다. date(YYYY-MM-DD)를 지정하면 그 날짜에 해당하는 "
        "월간 예방 관리 항목도 함께 반환합니다. due_day 가 그 달의 마지막 날보다 크면 "
        "마지막 날에 표시됩니다."
    ),
    status_code=200,
    response_model=TaskListResponse,
    responses=TASK_LIST_RESPONSES,
)
def list_pet_tasks(
    request: Request,
    pet_id: int = Path(..., description="반려동물 ID"),
    date: Optional[str] = Query(None, description="조회 날짜 (YYYY-MM-DD)"),
    auth: AuthContext = Depends(get_auth_context),
    db: Session = Depends(get_db),
):
    return TaskService(db).list_pet_tasks(request, auth, pet_id, date)


# ------------------------
# 2. 일일 할 일 생성
# ------------------------
@router.post(
    "/pets/{pet_id}/tasks",
    summary="일일 할 일 생성",
    status_code=201,
    response_model=TaskResponse,
    responses=TASK_CREATE_RESPONSES,
)
def create_daily_task(
    request: Request,
    body: DailyTaskCreateRequest,
    pet_id: int = Path(..., description="반려동물 ID"),
    auth: AuthContext = Depends(get_auth_context),
    db: Session = Depends(get_db),
):
    return TaskService(db).create_daily_task(request, auth, pet_id, body)


# ------------------------
# 3. 일일 할 일 삭제
# ------------------------
@router.delete(
    "/tasks/{task_id}",
    summary="일일 할 일 삭제",
    description="할 일과 그 완료 기록을 함께 삭제합니다.",
    status_code=200,
    response_model=TaskDeleteResponse,
    responses=TASK_DELETE_RESPONSES,
)
def delete_daily_task(
    request: Request,
    task_id: int = Path(..., description="할 일 ID"),
    auth: AuthContext = Depends(get_auth_context),
    db: Session = Depends(get_db),
):
    return TaskService(db).delete_daily_task(request, auth, task_id)


# ------------------------
# 4. 완료 기록
# ------------------------
@router.post(
    "/tasks/{task_type}/{task_id}/complete",
    summary="할 일 완료 기록",
    description="같은 날짜에 이미 완료 기록이 있으면 새로 만들지 않고 기존 기록을 반환합니다 (200).",
    status_code=201,
    response_model=CompletionResponse,
    responses=COMPLETION_RESPONSES,
)
def complete_task(
    request: Request,
    body: CompletionCreateRequest,
    task_type: TaskType = Path(..., description="daily | preventative"),
    task_id: int = Path(..., description="할 일 ID"),
    auth: AuthContext = Depends(get_auth_context),
    db: Session = Depends(get_db),
):
    return TaskService(db).complete_task(request, auth, task_type, task_id, body.completion_date)


@router.get(
    "/tasks/{task_type}/{task_id}/completions/{on_date}",
    summary="날짜별 완료 기록 조회",
    description="해당 날짜의 완료 기록을 반환합니다. 없으면 completion 은 null 입니다.",
    status_code=200,
    response_model=CompletionLookupResponse,
    responses=COMPLETION_RESPONSES,
)
def get_completion(
    request: Request,
    task_type: TaskType = Path(..., description="daily | preventative"),
    task_id: int = Path(..., description="할 일 ID"),
    on_date: str = Path(..., description="YYYY-MM-DD"),
    auth: AuthContext = Depends(get_auth_context),
    db: Session = Depends(get_db),
):
    return TaskService(db).get_completion(request, auth, task_type, task_id, on_date)


@router.delete(
    "/tasks/{task_type}/{task_id}/completions/{on_date}",
    summary="완료 기록 취소",
    description="완료 기록을 삭제합니다. 기록이 없어도 200 을 반환합니다.",
    status_code=200,
    response_model=CompletionDeleteResponse,
    responses=COMPLETION_RESPONSES,
)
def delete_completion(
    request: Request,
    task_type: TaskType = Path(..., description="daily | preventative"),
    task_id: int = Path(..., description="할 일 ID"),
    on_date: str = Path(..., description="YYYY-MM-DD"),
    auth: AuthContext = Depends(get_auth_context),
    db: Session = Depends(get_db),
):
    return TaskService(db).delete_completion(request, auth, task_type, task_id, on_date)


# ------------------------
# 5. 기간별 완료 기록 (달력)
# ------------------------
@router.get(
    "/pets/{pet_id}/completions",
    summary="기간별 완료 기록",
    status_code=200,
    response_model=CompletionListResponse,
    responses=TASK_LIST_RESPONSES,
)
def list_pet_completions(
    request: Request,
    pet_id: int = Path(..., description="반려동물 ID"),
    start: Optional[str] = Query(None, description="시작일 (YYYY-MM-DD)"),
    end: Optional[str] = Query(None, description="종료일 (YYYY-MM-DD)"),
    auth: AuthContext = Depends(get_auth_context),
    db: Session = Depends(get_db),
):
    return TaskService(db).list_pet_completions(request, auth, pet_id, start, end)
