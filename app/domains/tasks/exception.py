from dataclasses import dataclass
from typing import Dict

from app.core.error_handler import error_response
from app.schemas.error_schema import ErrorResponse
from app.domains.auth.exception import UNAUTHORIZED_RESPONSE


@dataclass(frozen=True)
class TaskError:
    status: int
    code: str
    reason: str

    def to_dict(self, path: str) -> Dict:
        return {
            "success": False,
            "status": self.status,
            "code": self.code,
            "reason": self.reason,
            "timeStamp": "...",
            "path": path,
        }


TASK_ERRORS: Dict[str, TaskError] = {
    "TASK_400_1": TaskError(400, "TASK_400_1", "task_name 은 필수입니다."),
    "TASK_400_2": TaskError(400, "TASK_400_2", "날짜 형식이 올바르지 않습니다. YYYY-MM-DD 형식을 사용해주세요."),
    "TASK_400_3": TaskError(400, "TASK_400_3", "start 는 end 보다 이후일 수 없습니다."),
    "TASK_404_1": TaskError(404, "TASK_404_1", "사용자를 찾을 수 없습니다."),
    "TASK_404_2": TaskError(404, "TASK_404_2", "반려동물을 찾을 수 없습니다."),
    "TASK_404_3": TaskError(404, "TASK_404_3", "할 일을 찾을 수 없습니다."),
    "TASK_403_1": TaskError(403, "TASK_403_1", "본인 반려동물의 할 일만 접근할 수 있습니다."),
    "TASK_500_1": TaskError(500, "TASK_500_1", "할 일을 조회하는 중 오류가 발생했습니다."),
    "TASK_500_2": TaskError(500, "TASK_500_2", "할 일을 저장하는 중 오류가 발생했습니다."),
    "TASK_500_3": TaskError(500, "TASK_500_3", "완료 기록을 처리하는 중 오류가 발생했습니다."),
}


# 공통 에러 응답 생성기
def task_error(code: str, path: str):
    err = TASK_ERRORS.get(code)
    if not err:
        return error_response(500, "TASK_500_1", "서버 내부 오류가 발생했습니다.", path)
    return error_response(err.status, err.code, err.reason, path)


def _examples(path: str, codes) -> Dict:
    return {
        code: {"value": TASK_ERRORS[code].to_dict(path)}
        for code in codes
    }


TASK_LIST_RESPONSES = {
    400: {
        "model": ErrorResponse,
        "description": "잘못된 날짜",
        "content": {"application/json": {"examples": _examples("/api/pets/{pet_id}/tasks", ["TASK_400_2"])}},
    },
    401: UNAUTHORIZED_RESPONSE,
    403: {"model": ErrorResponse, "description": "권한 없음"},
    404: {
        "model": ErrorResponse,
        "description": "리소스 없음",
        "content": {"application/json": {"examples": _examples("/api/pets/{pet_id}/tasks", ["TASK_404_1", "TASK_404_2"])}},
    },
    500: {"model": ErrorResponse, "description": "서버 내부 오류"},
}

TASK_CREATE_RESPONSES = {
    400: {"model": ErrorResponse, "description": "task_name 누락"},
    401: UNAUTHORIZED_RESPONSE,
    403: {"model": ErrorResponse, "description": "권한 없음"},
    404: {"model": ErrorResponse, "description": "반려동물 없음"},
    500: {"model": ErrorResponse, "description": "서버 내부 오류"},
}

TASK_DELETE_RESPONSES = {
    401: UNAUTHORIZED_RESPONSE,
    403: {"model": ErrorResponse, "description": "권한 없음"},
    404: {"model": ErrorResponse, "description": "할 일 없음"},
    500: {"model": ErrorResponse, "description": "서버 내부 오류"},
}

COMPLETION_RESPONSES = {
    400: {
        "model": ErrorResponse,
        "description": "잘못된 요청",
        "content": {"application/json": {"examples": _examples("/api/tasks/{task_type}/{task_id}/complete", ["TASK_400_2"])}},
    },
    401: UNAUTHORIZED_RESPONSE,
    403: {"model": ErrorResponse, "description": "권한 없음"},
    404: {
        "model": ErrorResponse,
        "description": "리소스 없음",
        "content": {"application/json": {"examples": _examples("/api/tasks/{task_type}/{task_id}/complete", ["TASK_404_1", "TASK_404_3"])}},
    },
    500: {"model": ErrorResponse, "description": "서버 내부 오류"},
}
