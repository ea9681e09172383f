from dataclasses import dataclass
from typing import Dict

from app.core.error_handler import error_response
from app.schemas.error_schema import ErrorResponse
from app.domains.auth.exception import UNAUTHORIZED_RESPONSE


@dataclass(frozen=True)
class UserError:
    status: int
    code: str
    reason: str


USER_ERRORS: Dict[str, UserError] = {
    "USER_400_1": UserError(400, "USER_400_1", "firebase_uid 와 email 은 필수입니다."),
    "USER_400_2": UserError(400, "USER_400_2", "수정할 항목이 없습니다."),
    "USER_403_1": UserError(403, "USER_403_1", "다른 사용자의 정보는 동기화할 수 없습니다."),
    "USER_404_1": UserError(404, "USER_404_1", "사용자를 찾을 수 없습니다."),
    "USER_409_1": UserError(409, "USER_409_1", "이미 다른 계정에서 사용 중인 이메일입니다."),
    "USER_500_1": UserError(500, "USER_500_1", "사용자 정보를 저장하는 중 오류가 발생했습니다."),
}


def user_error(code: str, path: str):
    err = USER_ERRORS.get(code)
    if not err:
        return error_response(500, "USER_500_1", "서버 내부 오류가 발생했습니다.", path)
    return error_response(err.status, err.code, err.reason, path)


USER_CREATE_RESPONSES = {
    400: {"model": ErrorResponse, "description": "필수 값 누락"},
    401: UNAUTHORIZED_RESPONSE,
    403: {"model": ErrorResponse, "description": "UID 불일치"},
    409: {"model": ErrorResponse, "description": "이메일 중복"},
    500: {"model": ErrorResponse, "description": "서버 내부 오류"},
}

USER_GET_RESPONSES = {
    401: UNAUTHORIZED_RESPONSE,
    404: {"model": ErrorResponse, "description": "사용자 없음"},
}

USER_EDIT_RESPONSES = {
    400: {"model": ErrorResponse, "description": "수정할 항목 없음"},
    401: UNAUTHORIZED_RESPONSE,
    404: {"model": ErrorResponse, "description": "사용자 없음"},
    500: {"model": ErrorResponse, "description": "서버 내부 오류"},
}
