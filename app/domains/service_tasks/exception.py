from dataclasses import dataclass
from typing import Dict

from app.core.error_handler import error_response
from app.schemas.error_schema import ErrorResponse
from app.domains.auth.exception import UNAUTHORIZED_RESPONSE


@dataclass(frozen=True)
class ServiceTaskError:
    status: int
    code: str
    reason: str


SERVICE_TASK_ERRORS: Dict[str, ServiceTaskError] = {
    "SERVICE_TASK_400_1": ServiceTaskError(400, "SERVICE_TASK_400_1", "task_name 은 필수입니다."),
    "SERVICE_TASK_404_1": ServiceTaskError(404, "SERVICE_TASK_404_1", "사용자를 찾을 수 없습니다."),
    "SERVICE_TASK_404_2": ServiceTaskError(404, "SERVICE_TASK_404_2", "반려동물을 찾을 수 없습니다."),
    "SERVICE_TASK_404_3": ServiceTaskError(404, "SERVICE_TASK_404_3", "서비스 작업을 찾을 수 없습니다."),
    "SERVICE_TASK_403_1": ServiceTaskError(403, "SERVICE_TASK_403_1", "본인 반려동물의 서비스 작업만 접근할 수 있습니다."),
    "SERVICE_TASK_500_1": ServiceTaskError(500, "SERVICE_TASK_500_1", "서비스 작업을 저장하는 중 오류가 발생했습니다."),
}


def service_task_error(code: str, path: str):
    err = SERVICE_TASK_ERRORS.get(code)
    if not err:
        return error_response(500, "SERVICE_TASK_500_1", "서버 내부 오류가 발생했습니다.", path)
    return error_response(err.status, err.code, err.reason, path)


SERVICE_TASK_RESPONSES = {
    400: {"model": ErrorResponse, "description": "task_name 누락"},
    401: UNAUTHORIZED_RESPONSE,
    403: {"model": ErrorResponse, "description": "권한 없음"},
    404: {"model": ErrorResponse, "description": "사용자/반려동물/작업 없음"},
    500: {"model": ErrorResponse, "description": "서버 내부 오류"},
}
