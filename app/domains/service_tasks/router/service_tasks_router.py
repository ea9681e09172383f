from fastapi import APIRouter, Request, Depends, Path
from sqlalchemy.orm import Session

from app.core.auth import AuthContext, get_auth_context
from app.db import get_db
from app.domains.service_tasks.exception import SERVICE_TASK_RESPONSES
from app.domains.service_tasks.service.service_task_service import ServiceTaskService
from app.schemas.service_tasks.service_task_schema import (
    ServiceTaskCreateRequest,
    ServiceTaskResponse,
    ServiceTaskListResponse,
    ServiceTaskDeleteResponse,
)

router = APIRouter(prefix="/api/service-dog-tasks", tags=["Service Dog Tasks"])


@router.get(
    "/pet/{pet_id}/servicetasks",
    summary="서비스 작업 목록",
    status_code=200,
    response_model=ServiceTaskListResponse,
    responses=SERVICE_TASK_RESPONSES,
)
def list_service_tasks(
    request: Request,
    pet_id: int = Path(..., description="반려동물 ID"),
    auth: AuthContext = Depends(get_auth_context),
    db: Session = Depends(get_db),
):
    return ServiceTaskService(db).list_tasks(request, auth, pet_id)


@router.post(
    "/pet/{pet_id}/servicetasks",
    summary="서비스 작업 생성",
    status_code=201,
    response_model=ServiceTaskResponse,
    responses=SERVICE_TASK_RESPONSES,
)
def create_service_task(
    request: Request,
    body: ServiceTaskCreateRequest,
    pet_id: int = Path(..., description="반려동물 ID"),
    auth: AuthContext = Depends(get_auth_context),
    db: Session = Depends(get_db),
):
    return ServiceTaskService(db).create_task(request, auth, pet_id, body)


@router.get(
    "/pet/{pet_id}/servicetasks/{task_id}",
    summary="서비스 작업 상세",
    status_code=200,
    response_model=ServiceTaskResponse,
    responses=SERVICE_TASK_RESPONSES,
)
def get_service_task(
    request: Request,
    pet_id: int = Path(..., description="반려동물 ID"),
    task_id: int = Path(..., description="작업 ID"),
    auth: AuthContext = Depends(get_auth_context),
    db: Session = Depends(get_db),
):
    return ServiceTaskService(db).get_task(request, auth, pet_id, task_id)


@router.delete(
    "/pet/{pet_id}/servicetasks/{task_id}",
    summary="서비스 작업 삭제",
    status_code=200,
    response_model=ServiceTaskDeleteResponse,
    responses=SERVICE_TASK_RESPONSES,
)
def delete_service_task(
    request: Request,
    pet_id: int = Path(..., description="반려동물 ID"),
    task_id: int = Path(..., description="작업 ID"),
    auth: AuthContext = Depends(get_auth_context),
    db: Session = Depends(get_db),
):
    return ServiceTaskService(db).delete_task(request, auth, pet_id, task_id)
