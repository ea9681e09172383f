import logging
from datetime import datetime

from fastapi import APIRouter, Request, Depends
from sqlalchemy import text
from sqlalchemy.orm import Session

from app.core.error_handler import error_response
from app.db import get_db
from app.schemas.error_schema import ErrorResponse
from app.schemas.health.health_schema import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Health"])


@router.get(
    "/health",
    summary="헬스 체크",
    description="DB 에 간단한 쿼리를 보내 연결 상태를 확인합니다. 인증이 필요 없습니다.",
    status_code=200,
    response_model=HealthResponse,
    responses={500: {"model": ErrorResponse, "description": "DB 연결 실패"}},
)
def health_check(request: Request, db: Session = Depends(get_db)):
    try:
        db.execute(text("SELECT 1"))
    except Exception:
        logger.exception("HEALTH_CHECK_DB_ERROR")
        return error_response(500, "HEALTH_500_1", "데이터베이스에 연결할 수 없습니다.", request.url.path)

    return {"status": "healthy", "timestamp": datetime.utcnow().isoformat()}
