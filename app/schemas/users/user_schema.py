from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class UserCreateRequest(BaseModel):
    """사용자 생성/동기화 요청 (clerkId 는 이전 클라이언트 호환용 별칭)"""
    model_config = ConfigDict(populate_by_name=True)

    firebase_uid: Optional[str] = Field(None, alias="clerkId", description="인증 제공자 UID")
    email: Optional[str] = Field(None, description="이메일")
    first_name: Optional[str] = Field(None, alias="firstName", description="이름")
    last_name: Optional[str] = Field(None, alias="lastName", description="성")


class UserInfo(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    user_id: int
    firebase_uid: str
    email: str
    first_name: Optional[str]
    last_name: Optional[str]
    created_at: Optional[datetime]
    updated_at: Optional[datetime]


class UserResponse(BaseModel):
    success: bool = Field(True, description="성공 여부")
    status: int = Field(200, description="HTTP 상태 코드")
    user: UserInfo
    timeStamp: str = Field(..., description="응답 시간 (ISO 형식)")
    path: str = Field(..., description="요청 경로")
