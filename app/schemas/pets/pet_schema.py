from datetime import date, datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from app.models.pet import PetSex


class PetInfo(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    pet_id: int
    owner_id: int
    name: str
    species: Optional[str]
    breed: Optional[str]
    sex: Optional[PetSex]
    birthdate: Optional[date]
    adoption_date: Optional[date]
    image_url: Optional[str]
    created_at: Optional[datetime]
    updated_at: Optional[datetime]


class PetResponse(BaseModel):
    success: bool = Field(True, description="성공 여부")
    status: int = Field(200, description="HTTP 상태 코드")
    pet: PetInfo = Field(..., description="반려동물 정보")
    timeStamp: str = Field(..., description="응답 시간 (ISO 형식)")
    path: str = Field(..., description="요청 경로")


class PetListResponse(BaseModel):
    success: bool = Field(True, description="성공 여부")
    status: int = Field(200, description="HTTP 상태 코드")
    pets: List[PetInfo] = Field(..., description="내 반려동물 목록 (최신순)")
    timeStamp: str = Field(..., description="응답 시간 (ISO 형식)")
    path: str = Field(..., description="요청 경로")
