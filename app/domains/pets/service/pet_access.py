import enum
from typing import Optional, Tuple

from sqlalchemy.orm import Session

from app.core.auth import AuthContext
from app.domains.pets.repository.pet_repository import PetRepository
from app.domains.users.repository.user_repository import UserRepository
from app.models.pet import Pet
from app.models.user import User


class AccessFailure(str, enum.Enum):
    USER_NOT_FOUND = "USER_NOT_FOUND"
    PET_NOT_FOUND = "PET_NOT_FOUND"
    NOT_OWNER = "NOT_OWNER"


class PetAccess:
    """
    인증된 principal → 내부 user → 소유한 pet 순서로 확인.
    모든 읽기/쓰기 전에 호출해서 owner_id 를 검증한다.
    """

    def __init__(self, db: Session):
        self.db = db
        self.user_repo = UserRepository(db)
        self.pet_repo = PetRepository(db)

    def current_user(self, auth: AuthContext) -> Optional[User]:
        if not auth.is_authenticated:
            return None
        return self.user_repo.get_user_by_firebase_uid(auth.principal.uid)

    def owned_pet(
        self, auth: AuthContext, pet_id: int
    ) -> Tuple[Optional[User], Optional[Pet], Optional[AccessFailure]]:
        user = self.current_user(auth)
        if not user:
            return None, None, AccessFailure.USER_NOT_FOUND

        pet = self.pet_repo.get_by_id(pet_id)
        if not pet:
            return user, None, AccessFailure.PET_NOT_FOUND

        if pet.owner_id != user.user_id:
            return user, pet, AccessFailure.NOT_OWNER

        return user, pet, None
