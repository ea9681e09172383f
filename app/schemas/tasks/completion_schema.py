from datetime import date, datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from app.models.task_completion import TaskType


class CompletionCreateRequest(BaseModel):
    completion_date: str = Field(
        ...,
        description="완료한 달력 날짜 (YYYY-MM-DD, 시각이 붙어 있으면 무시)",
        examples=["2024-04-30"],
    )


class CompletionInfo(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    completion_id: int
    task_type: TaskType
    task_id: int
    completion_date: date
    created_at: Optional[datetime]


class CompletionResponse(BaseModel):
    success: bool = True
    status: int = Field(201, description="새로 기록하면 201, 이미 있으면 200")
    created: bool = Field(..., description="이번 요청으로 새로 기록되었는지")
    completion: CompletionInfo
    timeStamp: str
    path: str


class CompletionLookupResponse(BaseModel):
    success: bool = True
    status: int = 200
    completion: Optional[CompletionInfo] = Field(None, description="해당 날짜의 완료 기록 (없으면 null)")
    timeStamp: str
    path: str


class CompletionDeleteResponse(BaseModel):
    success: bool = True
    status: int = 200
    deleted: bool = Field(..., description="실제로 삭제된 기록이 있었는지")
    timeStamp: str
    path: str


class CompletionListResponse(BaseModel):
    success: bool = True
    status: int = 200
    pet_id: int
    start: Optional[date] = None
    end: Optional[date] = None
    completions: List[CompletionInfo]
    timeStamp: str
    path: str
