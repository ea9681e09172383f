from datetime import datetime

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.schemas.error_schema import ErrorResponse


def error_response(status: int, code: str, reason: str, path: str) -> JSONResponse:

    error = ErrorResponse(
        success=False,
        status=status,
        code=code,
        reason=reason,
        timeStamp=datetime.utcnow().isoformat(),
        path=path
    )

    return JSONResponse(
        status_code=status,
        content=error.model_dump()
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """pydantic 검증 실패도 공통 에러 포맷으로 응답"""
    first = exc.errors()[0] if exc.errors() else {}
    loc = ".".join(str(p) for p in first.get("loc", ()) if p not in ("body", "query", "path"))
    msg = first.get("msg", "잘못된 요청입니다.")
    reason = f"{loc}: {msg}" if loc else msg
    return error_response(400, "COMMON_400_1", reason, request.url.path)
