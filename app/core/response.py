from datetime import datetime

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse


def success_response(path: str, status: int = 200, **payload) -> JSONResponse:
    """error_response 와 같은 형태(success/status/timeStamp/path)의 성공 응답"""
    body = {
        "success": True,
        "status": status,
        **payload,
        "timeStamp": datetime.utcnow().isoformat(),
        "path": path,
    }
    return JSONResponse(status_code=status, content=jsonable_encoder(body))
