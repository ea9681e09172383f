from dataclasses import dataclass
from typing import Dict

from app.core.error_handler import error_response
from app.schemas.error_schema import ErrorResponse
from app.domains.auth.exception import UNAUTHORIZED_RESPONSE


@dataclass(frozen=True)
class PetError:
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


# 공통 에러 코드 정의
PET_ERRORS: Dict[str, PetError] = {
    # Register
    "PET_400_1": PetError(400, "PET_400_1", "반려동물 이름은 필수입니다."),
    "PET_400_2": PetError(400, "PET_400_2", "sex 값 오류 (M, F, Unknown)."),
    "PET_400_3": PetError(400, "PET_400_3", "날짜 형식이 올바르지 않습니다. YYYY-MM-DD 형식을 사용해주세요."),
    "PET_400_4": PetError(400, "PET_400_4", "이미지 파일만 업로드할 수 있습니다."),
    "PET_400_5": PetError(400, "PET_400_5", "이미지 파일 크기가 허용 범위를 초과했습니다."),
    "PET_404_1": PetError(404, "PET_404_1", "사용자를 찾을 수 없습니다. 먼저 로그인해주세요."),
    "PET_500_1": PetError(500, "PET_500_1", "반려동물 등록 중 오류."),
    "PET_500_3": PetError(500, "PET_500_3", "이미지 저장 중 오류."),

    # Read
    "PET_GET_404_1": PetError(404, "PET_GET_404_1", "사용자를 찾을 수 없습니다."),
    "PET_GET_404_2": PetError(404, "PET_GET_404_2", "반려동물을 찾을 수 없습니다."),
    "PET_GET_403_1": PetError(403, "PET_GET_403_1", "본인의 반려동물만 조회할 수 있습니다."),

    # Update detail
    "PET_EDIT_404_1": PetError(404, "PET_EDIT_404_1", "사용자를 찾을 수 없습니다."),
    "PET_EDIT_404_2": PetError(404, "PET_EDIT_404_2", "반려동물을 찾을 수 없습니다."),
    "PET_EDIT_403_1": PetError(403, "PET_EDIT_403_1", "펫의 주인만 수정가능합니다"),
    "PET_EDIT_400_1": PetError(400, "PET_EDIT_400_1", "수정할 항목이 없습니다."),
    "PET_EDIT_500_1": PetError(500, "PET_EDIT_500_1", "반려동물 정보를 수정하는 중 오류."),

    # Update image
    "PET_IMG_400_1": PetError(400, "PET_IMG_400_1", "업로드할 이미지 파일이 필요합니다."),
    "PET_IMG_400_2": PetError(400, "PET_IMG_400_2", "이미지 파일만 업로드할 수 있습니다."),
    "PET_IMG_400_3": PetError(400, "PET_IMG_400_3", "이미지 파일 크기가 허용 범위를 초과했습니다."),
    "PET_IMG_404_1": PetError(404, "PET_IMG_404_1", "사용자를 찾을 수 없습니다."),
    "PET_IMG_404_2": PetError(404, "PET_IMG_404_2", "반려동물을 찾을 수 없습니다."),
    "PET_IMG_403_1": PetError(403, "PET_IMG_403_1", "펫의 주인만 수정가능합니다"),
    "PET_IMG_500_1": PetError(500, "PET_IMG_500_1", "이미지 업로드 중 오류가 발생했습니다."),
    "PET_IMG_500_2": PetError(500, "PET_IMG_500_2", "이미지 URL 저장 중 오류."),

    # Delete
    "PET_DELETE_404_1": PetError(404, "PET_DELETE_404_1", "사용자를 찾을 수 없습니다."),
    "PET_DELETE_404_2": PetError(404, "PET_DELETE_404_2", "반려동물을 찾을 수 없습니다."),
    "PET_DELETE_403_1": PetError(403, "PET_DELETE_403_1", "펫의 주인만 삭제가능합니다"),
    "PET_DELETE_500_1": PetError(500, "PET_DELETE_500_1", "반려동물 삭제 중 오류 발생"),
}


def pet_error(code: str, path: str):
    err = PET_ERRORS.get(code)
    if not err:
        return error_response(500, "PET_500_1", "서버 내부 오류가 발생했습니다.", path)
    return error_response(err.status, err.code, err.reason, path)


def _examples(path: str, mapping: Dict[str, PetError]) -> Dict:
    return {
        code: {"value": err.to_dict(path)}
        for code, err in mapping.items()
    }


def _codes(prefix: str, status: int) -> Dict[str, PetError]:
    return {
        code: err for code, err in PET_ERRORS.items()
        if code.startswith(f"{prefix}{status}_")
    }


def _documented(path: str, prefix: str, statuses: Dict[int, str]) -> Dict:
    responses = {401: UNAUTHORIZED_RESPONSE}
    for status, description in statuses.items():
        responses[status] = {
            "model": ErrorResponse,
            "description": description,
            "content": {"application/json": {"examples": _examples(path, _codes(prefix, status))}},
        }
    return responses


# Swagger responses
PET_REGISTER_RESPONSES = _documented("/api/pets", "PET_", {
    400: "잘못된 요청", 404: "사용자 없음", 500: "서버 내부 오류",
})

PET_GET_RESPONSES = _documented("/api/pets/{pet_id}", "PET_GET_", {
    403: "권한 없음", 404: "리소스를 찾을 수 없음",
})

PET_UPDATE_RESPONSES = _documented("/api/pets/{pet_id}", "PET_EDIT_", {
    400: "잘못된 요청", 403: "권한 없음", 404: "반려동물을 찾을 수 없음", 500: "서버 내부 오류",
})

PET_IMAGE_RESPONSES = _documented("/api/pets/{pet_id}/image", "PET_IMG_", {
    400: "잘못된 요청", 403: "권한 없음", 404: "반려동물을 찾을 수 없음", 500: "서버 내부 오류",
})

PET_DELETE_RESPONSES = _documented("/api/pets/{pet_id}", "PET_DELETE_", {
    403: "권한 없음", 404: "반려동물을 찾을 수 없음", 500: "서버 내부 오류",
})
