from functools import lru_cache
from typing import List, Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    DB_HOST: str = "localhost"
    DB_PORT: int = 3306
    DB_USER: str = "pawtracker"
    DB_PASSWORD: str = ""
    DB_NAME: str = "pawtracker"
    DATABASE_URL_OVERRIDE: Optional[str] = None

    FIREBASE_CREDENTIALS: Optional[str] = None
    FIREBASE_STORAGE_BUCKET: Optional[str] = None

    # "local" 은 UPLOAD_DIR 에 저장, "firebase" 는 Storage 버킷에 업로드
    PHOTO_STORAGE: str = "local"
    UPLOAD_DIR: str = "uploads/pets"
    MAX_UPLOAD_BYTES: int = 5 * 1024 * 1024

    CORS_ORIGINS: List[str] = ["http://localhost:3000"]
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"     # 프로젝트 루트에 있는 .env 자동 로딩

    @property
    def DATABASE_URL(self) -> str:
        """SQLAlchemy에서 사용할 MySQL 연결 URL 생성"""
        if self.DATABASE_URL_OVERRIDE:
            return self.DATABASE_URL_OVERRIDE
        return (
            f"mysql+pymysql://{self.DB_USER}:{self.DB_PASSWORD}"
            f"@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()
