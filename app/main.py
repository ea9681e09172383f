import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.openapi.utils import get_openapi
from fastapi.staticfiles import StaticFiles

from app.core.auth import FirebaseIdentityProvider, IdentityProvider
from app.core.config import Settings, get_settings
from app.core.error_handler import validation_exception_handler
from app.core.logging_setup import setup_logging
from app.core.storage import LOCAL_URL_PREFIX, LocalPhotoStorage, PhotoStorage, build_photo_storage

from app.domains.health.router.health_router import router as health_router
from app.domains.auth.router.auth_router import router as auth_router
from app.domains.users.router.users_router import router as user_router
from app.domains.pets.router.pets_router import router as pets_router
from app.domains.tasks.router.tasks_router import router as tasks_router
from app.domains.preventatives.router.preventatives_router import router as preventatives_router
from app.domains.service_tasks.router.service_tasks_router import router as service_tasks_router

logger = logging.getLogger(__name__)

API_TITLE = "PawTracker API 🐾"
API_VERSION = "1.0.0"
API_DESCRIPTION = """
## PawTracker API

반려동물 돌봄 기록 애플리케이션을 위한 백엔드 API입니다.

### 주요 기능
- 🔐 Firebase 기반 사용자 인증
- 🐕 반려동물 등록 및 사진 관리
- ✅ 일일 할 일 / 월간 예방 관리 / 서비스견 작업
- 📅 날짜별 완료 기록

### 인증
`/` 와 `/api/health` 를 제외한 모든 API는 Firebase ID 토큰을 Authorization 헤더에 포함하여 요청해야 합니다.
"""


def create_app(
    settings: Optional[Settings] = None,
    identity_provider: Optional[IdentityProvider] = None,
    photo_storage: Optional[PhotoStorage] = None,
) -> FastAPI:
    settings = settings or get_settings()
    setup_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title=API_TITLE,
        version=API_VERSION,
        description="Backend API for PawTracker",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        openapi_tags=[
            {"name": "Health", "description": "서버/DB 상태 확인"},
            {"name": "Auth", "description": "Firebase 인증 관련 API"},
            {"name": "Users", "description": "사용자 정보 조회/수정 API"},
            {"name": "Pets", "description": "반려동물 등록/조회/수정/삭제 API"},
            {"name": "Tasks", "description": "일일 할 일과 완료 기록 API"},
            {"name": "Preventatives", "description": "월간 예방 관리 API"},
            {"name": "Service Dog Tasks", "description": "서비스견 작업 API"},
        ]
    )

    # 요청 처리에 필요한 외부 의존성은 app.state 에서 꺼내 쓴다
    app.state.settings = settings
    app.state.identity_provider = identity_provider or FirebaseIdentityProvider(settings)
    app.state.photo_storage = photo_storage or build_photo_storage(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    # 🟢 라우터 등록
    app.include_router(health_router)
    app.include_router(auth_router)
    app.include_router(user_router)

    # Pets APIs
    app.include_router(pets_router)

    # Tasks / Preventatives / Service dog tasks
    app.include_router(tasks_router)
    app.include_router(preventatives_router)
    app.include_router(service_tasks_router)

    # 로컬 저장소 사진 제공
    if isinstance(app.state.photo_storage, LocalPhotoStorage):
        app.mount(
            LOCAL_URL_PREFIX,
            StaticFiles(directory=str(app.state.photo_storage.upload_dir)),
            name="pet_photos",
        )

    @app.get("/")
    def root():
        return {"message": "🐾 PawTracker API is running successfully"}

    def custom_openapi():
        if app.openapi_schema:
            return app.openapi_schema

        openapi_schema = get_openapi(
            title=API_TITLE,
            version=API_VERSION,
            description=API_DESCRIPTION,
            routes=app.routes,
            tags=app.openapi_tags,
        )

        # 🔥 Swagger에 BearerAuth 추가
        openapi_schema.setdefault("components", {})["securitySchemes"] = {
            "BearerAuth": {
                "type": "http",
                "scheme": "bearer",
                "bearerFormat": "JWT",
                "description": "Firebase ID 토큰을 Bearer 형식으로 전달하세요. 예: Bearer <token>"
            }
        }

        app.openapi_schema = openapi_schema
        return app.openapi_schema

    app.openapi = custom_openapi

    logger.info("PawTracker API created (photo storage: %s)", type(app.state.photo_storage).__name__)
    return app


app = create_app()

# 🟢 로컬 실행용 entry point
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True
    )
