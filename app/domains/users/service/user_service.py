import logging

from fastapi import Request
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.auth import AuthContext
from app.core.response import success_response
from app.domains.auth.exception import auth_error
from app.domains.users.exception import user_error
from app.domains.users.repository.user_repository import UserRepository
from app.models.user import User
from app.schemas.users.user_schema import UserCreateRequest, UserInfo
from app.schemas.users.user_update_schema import UserUpdateRequest

logger = logging.getLogger(__name__)


def _user_response(user: User, path: str, status: int = 200):
    return success_response(path, status, user=UserInfo.model_validate(user).model_dump())


class UserService:

    @staticmethod
    def create_or_sync(request: Request, auth: AuthContext, body: UserCreateRequest, db: Session):
        """
        인증된 사용자를 내부 users 테이블에 동기화.
        uid 또는 email 이 일치하는 사용자가 있으면 갱신(200), 없으면 생성(201).
        """
        path = request.url.path

        if not auth.is_authenticated:
            return auth_error(auth.error_code, path)

        uid = body.firebase_uid or auth.principal.uid
        email = body.email or auth.principal.email

        if not uid or not email:
            return user_error("USER_400_1", path)

        if uid != auth.principal.uid:
            return user_error("USER_403_1", path)

        repo = UserRepository(db)
        try:
            user, created = repo.upsert_user(
                firebase_uid=uid,
                email=email,
                first_name=body.first_name,
                last_name=body.last_name,
            )
            db.commit()
            db.refresh(user)
        except IntegrityError:
            db.rollback()
            return user_error("USER_409_1", path)
        except Exception:
            logger.exception("USER_UPSERT_ERROR")
            db.rollback()
            return user_error("USER_500_1", path)

        return _user_response(user, path, 201 if created else 200)

    @staticmethod
    def get_me(request: Request, auth: AuthContext, db: Session):
        path = request.url.path

        if not auth.is_authenticated:
            return auth_error(auth.error_code, path)

        user = UserRepository(db).get_user_by_firebase_uid(auth.principal.uid)
        if not user:
            return user_error("USER_404_1", path)

        return _user_response(user, path)

    @staticmethod
    def update_me(request: Request, auth: AuthContext, body: UserUpdateRequest, db: Session):
        path = request.url.path

        if not auth.is_authenticated:
            return auth_error(auth.error_code, path)

        repo = UserRepository(db)
        user = repo.get_user_by_firebase_uid(auth.principal.uid)
        if not user:
            return user_error("USER_404_1", path)

        if body is None or (body.first_name is None and body.last_name is None):
            return user_error("USER_400_2", path)

        try:
            repo.update_user(user, first_name=body.first_name, last_name=body.last_name)
            db.commit()
            db.refresh(user)
        except Exception:
            logger.exception("USER_UPDATE_ERROR")
            db.rollback()
            return user_error("USER_500_1", path)

        return _user_response(user, path)
