from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class PreventativeCreateRequest(BaseModel):
    pet_id: int = Field(..., description="반려동물 ID")
    name: str = Field(..., description="항목 이름", examples=["심장사상충 약"])
    due_day: int = Field(..., description="매월 해당 일 (1~31). 그 달에 없는 날이면 마지막 날에 표시", examples=[31])
    notes: Optional[str] = Field(None, description="메모")


class PreventativeUpdateRequest(BaseModel):
    name: Optional[str] = None
    due_day: Optional[int] = Field(None, description="1~31")
    notes: Optional[str] = None


class PreventativeInfo(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    preventative_id: int
    pet_id: int
    name: str
    due_day: int
    notes: Optional[str]
    created_at: Optional[datetime]
    updated_at: Optional[datetime]


class PreventativeResponse(BaseModel):
    success: bool = True
    status: int = 200
    preventative: PreventativeInfo
    timeStamp: str
    path: str


class PreventativeListResponse(BaseModel):
    success: bool = True
    status: int = 200
    pet_id: int
    preventatives: List[PreventativeInfo] = Field(..., description="due_day 오름차순")
    timeStamp: str
    path: str


class PreventativeDeleteResponse(BaseModel):
    success: bool = True
    status: int = 200
    message: str = "예방 관리 항목이 삭제되었습니다."
    preventative_id: int
    timeStamp: str
    path: str
