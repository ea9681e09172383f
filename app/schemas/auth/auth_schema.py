from pydantic import BaseModel, Field

from app.schemas.users.user_schema import UserInfo


class LoginResponse(BaseModel):
    """로그인 응답"""
    is_new_user: bool = Field(..., description="신규 사용자 여부")
    user: UserInfo = Field(..., description="사용자 정보")


class TokenResponse(BaseModel):
    """토큰 발급 응답"""
    success: bool = Field(True, description="성공 여부")
    token: str = Field(..., description="발급된 custom token")
    uid: str = Field(..., description="토큰 대상 UID")
