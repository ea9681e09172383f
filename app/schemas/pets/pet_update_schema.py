from datetime import date
from typing import Optional, Literal

from pydantic import BaseModel, Field

class PetUpdateRequest(BaseModel):
    """반려동물 정보 수정 요청 (전송한 필드만 반영)"""
    name: Optional[str] = Field(None, min_length=1, max_length=50, description="반려동물 이름")
    species: Optional[str] = Field(None, max_length=30, description="종 (canine, feline 등)")
    breed: Optional[str] = Field(None, max_length=50, description="품종")
    sex: Optional[Literal["M", "F", "Unknown"]] = Field(None, description="성별: 'M' | 'F' | 'Unknown'")
    birthdate: Optional[date] = Field(None, description="생일 (YYYY-MM-DD)")
    adoption_date: Optional[date] = Field(None, description="입양일 (YYYY-MM-DD)")
