import logging

from fastapi import Request
from fastapi.encoders import jsonable_encoder
from sqlalchemy.orm import Session

from app.core.auth import AuthContext
from app.domains.auth.exception import auth_error
from app.domains.users.repository.user_repository import UserRepository
from app.schemas.users.user_schema import UserInfo

logger = logging.getLogger(__name__)


class AuthService:

    @staticmethod
    def login(request: Request, auth: AuthContext, db: Session):
        path = request.url.path

        # 1) 토큰 검증 결과 확인
        if not auth.is_authenticated:
            return auth_error(auth.error_code, path)

        principal = auth.principal

        # 2) DB 접근
        repo = UserRepository(db)
        user = repo.get_user_by_firebase_uid(principal.uid)

        # --- 기존 유저 로그인 ---
        if user:
            return {
                "is_new_user": False,
                "user": jsonable_encoder(UserInfo.model_validate(user)),
            }

        # --- 신규 회원가입 ---
        if not principal.email:
            return auth_error("AUTH_400_1", path)

        first_name, _, last_name = (principal.name or "").partition(" ")
        try:
            new_user = repo.create_user(
                firebase_uid=principal.uid,
                email=principal.email,
                first_name=first_name or None,
                last_name=last_name or None,
            )
            db.commit()
            db.refresh(new_user)
        except Exception:
            db.rollback()
            logger.exception("AUTH_LOGIN_DB_ERROR")
            return auth_error("AUTH_500_1", path)

        return {
            "is_new_user": True,
            "user": jsonable_encoder(UserInfo.model_validate(new_user)),
        }

    @staticmethod
    def issue_token(request: Request, auth: AuthContext):
        path = request.url.path

        if not auth.is_authenticated:
            return auth_error(auth.error_code, path)

        try:
            token = auth.issue_token()
        except Exception:
            logger.exception("AUTH_TOKEN_ISSUE_ERROR")
            return auth_error("AUTH_500_2", path)

        return {"success": True, "token": token, "uid": auth.principal.uid}
