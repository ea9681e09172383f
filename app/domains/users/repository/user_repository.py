from sqlalchemy import or_
from sqlalchemy.orm import Session
from typing import List, Optional

from app.models.user import User


class UserRepository:

    def __init__(self, db: Session):
        self.db = db

    # -------------------------------------------------
    # Basic user lookups
    # -------------------------------------------------

    def get_user_by_firebase_uid(self, firebase_uid: str) -> Optional[User]:
        return (
            self.db.query(User)
            .filter(User.firebase_uid == firebase_uid)
            .first()
        )

    def get_user_by_id(self, user_id: int) -> Optional[User]:
        return self.db.get(User, user_id)

    def find_by_uid_or_email(self, firebase_uid: str, email: str) -> Optional[User]:
        return (
            self.db.query(User)
            .filter(or_(User.firebase_uid == firebase_uid, User.email == email))
            .order_by((User.firebase_uid == firebase_uid).desc())
            .first()
        )

    def list_users(self) -> List[User]:
        return (
            self.db.query(User)
            .order_by(User.created_at.desc(), User.user_id.desc())
            .all()
        )

    # -------------------------------------------------
    # Create / update
    # -------------------------------------------------

    def create_user(
        self,
        firebase_uid: str,
        email: str,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
    ) -> User:
        user = User(
            firebase_uid=firebase_uid,
            email=email,
            first_name=first_name,
            last_name=last_name,
        )
        self.db.add(user)
        self.db.flush()
        return user

    def upsert_user(
        self,
        firebase_uid: str,
        email: str,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
    ):
        """
        firebase_uid 또는 email 로 기존 사용자를 찾아 갱신, 없으면 생성.

        Returns:
            (user, created)
        """
        user = self.find_by_uid_or_email(firebase_uid, email)
        if user is None:
            return self.create_user(firebase_uid, email, first_name, last_name), True

        user.firebase_uid = firebase_uid
        user.email = email
        user.first_name = first_name
        user.last_name = last_name
        self.db.flush()
        return user, False

    def update_user(self, user: User, **kwargs) -> User:
        for k, v in kwargs.items():
            if v is not None:
                setattr(user, k, v)
        self.db.flush()
        return user
