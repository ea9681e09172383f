from pydantic import BaseModel, Field
from typing import Optional

class UserUpdateRequest(BaseModel):
    """사용자 정보 수정 요청"""
    first_name: Optional[str] = Field(None, description="이름")
    last_name: Optional[str] = Field(None, description="성")
