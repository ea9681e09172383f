from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ServiceTaskCreateRequest(BaseModel):
    task_name: str = Field(..., description="작업 이름", examples=["문 열기"])
    notes: Optional[str] = None


class ServiceTaskInfo(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    task_id: int
    pet_id: int
    task_name: str
    notes: Optional[str]
    created_at: Optional[datetime]
    updated_at: Optional[datetime]


class ServiceTaskResponse(BaseModel):
    success: bool = True
    status: int = 200
    task: ServiceTaskInfo
    timeStamp: str
    path: str


class ServiceTaskListResponse(BaseModel):
    success: bool = True
    status: int = 200
    pet_id: int
    tasks: List[ServiceTaskInfo]
    timeStamp: str
    path: str


class ServiceTaskDeleteResponse(BaseModel):
    success: bool = True
    status: int = 200
    message: str = "서비스 작업이 삭제되었습니다."
    task_id: int
    timeStamp: str
    path: str
