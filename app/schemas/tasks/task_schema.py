from datetime import date as date_type, datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from app.models.task_completion import TaskType


class DailyTaskCreateRequest(BaseModel):
    task_name: str = Field(..., description="할 일 이름", examples=["아침 산책"])


class TaskItem(BaseModel):
    """일일 할 일과 해당 날짜의 예방 관리 항목을 한 목록으로 표현"""
    id: int
    task_name: str
    pet_id: int
    task_type: TaskType = Field(..., description="daily | preventative")
    due_day: Optional[int] = Field(None, description="preventative 만 해당 (1~31)")
    notes: Optional[str] = None
    completed: Optional[bool] = Field(None, description="date 를 지정한 경우 그 날짜의 완료 여부")
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class TaskListResponse(BaseModel):
    success: bool = True
    status: int = 200
    pet_id: int
    date: Optional[date_type] = Field(None, description="조회 기준 날짜 (없으면 일일 할 일만)")
    tasks: List[TaskItem]
    timeStamp: str
    path: str


class TaskResponse(BaseModel):
    success: bool = True
    status: int = 201
    task: TaskItem
    timeStamp: str
    path: str


class TaskDeleteResponse(BaseModel):
    success: bool = True
    status: int = 200
    message: str = "할 일이 삭제되었습니다."
    task_id: int
    timeStamp: str
    path: str
