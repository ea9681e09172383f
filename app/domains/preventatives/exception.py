from dataclasses import dataclass
from typing import Dict

from app.core.error_handler import error_response
from app.schemas.error_schema import ErrorResponse
from app.domains.auth.exception import UNAUTHORIZED_RESPONSE


@dataclass(frozen=True)
class PreventativeError:
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


PREVENTATIVE_ERRORS: Dict[str, PreventativeError] = {
    "PREVENTATIVE_400_1": PreventativeError(400, "PREVENTATIVE_400_1", "name 은 필수입니다."),
    "PREVENTATIVE_400_2": PreventativeError(400, "PREVENTATIVE_400_2", "due_day 는 1 에서 31 사이여야 합니다."),
    "PREVENTATIVE_400_3": PreventativeError(400, "PREVENTATIVE_400_3", "수정할 항목이 없습니다."),
    "PREVENTATIVE_404_1": PreventativeError(404, "PREVENTATIVE_404_1", "사용자를 찾을 수 없습니다."),
    "PREVENTATIVE_404_2": PreventativeError(404, "PREVENTATIVE_404_2", "반려동물을 찾을 수 없습니다."),
    "PREVENTATIVE_404_3": PreventativeError(404, "PREVENTATIVE_404_3", "예방 관리 항목을 찾을 수 없습니다."),
    "PREVENTATIVE_403_1": PreventativeError(403, "PREVENTATIVE_403_1", "본인 반려동물의 예방 관리 항목만 접근할 수 있습니다."),
    "PREVENTATIVE_500_1": PreventativeError(500, "PREVENTATIVE_500_1", "예방 관리 항목을 저장하는 중 오류가 발생했습니다."),
    "PREVENTATIVE_500_2": PreventativeError(500, "PREVENTATIVE_500_2", "예방 관리 항목을 삭제하는 중 오류가 발생했습니다."),
}


def preventative_error(code: str, path: str):
    err = PREVENTATIVE_ERRORS.get(code)
    if not err:
        return error_response(500, "PREVENTATIVE_500_1", "서버 내부 오류가 발생했습니다.", path)
    return error_response(err.status, err.code, err.reason, path)


def _examples(path: str, codes) -> Dict:
    return {code: {"value": PREVENTATIVE_ERRORS[code].to_dict(path)} for code in codes}


def _responses(path: str, bad_request_codes) -> Dict:
    responses = {
        401: UNAUTHORIZED_RESPONSE,
        403: {
            "model": ErrorResponse,
            "description": "권한 없음",
            "content": {"application/json": {"examples": _examples(path, ["PREVENTATIVE_403_1"])}},
        },
        404: {
            "model": ErrorResponse,
            "description": "리소스 없음",
            "content": {"application/json": {"examples": _examples(
                path, ["PREVENTATIVE_404_1", "PREVENTATIVE_404_2", "PREVENTATIVE_404_3"]
            )}},
        },
        500: {"model": ErrorResponse, "description": "서버 내부 오류"},
    }
    if bad_request_codes:
        responses[400] = {
            "model": ErrorResponse,
            "description": "잘못된 요청",
            "content": {"application/json": {"examples": _examples(path, bad_request_codes)}},
        }
    return responses


PREVENTATIVE_LIST_RESPONSES = _responses("/api/preventatives/pet/{pet_id}", [])
PREVENTATIVE_CREATE_RESPONSES = _responses("/api/preventatives", ["PREVENTATIVE_400_1", "PREVENTATIVE_400_2"])
PREVENTATIVE_UPDATE_RESPONSES = _responses(
    "/api/preventatives/{preventative_id}",
    ["PREVENTATIVE_400_1", "PREVENTATIVE_400_2", "PREVENTATIVE_400_3"],
)
PREVENTATIVE_DELETE_RESPONSES = _responses("/api/preventatives/{preventative_id}", [])
