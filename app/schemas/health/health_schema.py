from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = Field("healthy", description="DB 연결 상태")
    timestamp: str = Field(..., description="확인 시각 (ISO 형식)")
