from sqlalchemy.orm import Session
from typing import Optional, List

from app.models.pet import Pet, PetSex
from app.models.daily_task import DailyTask
from app.models.preventative import Preventative
from app.models.task_completion import TaskCompletion, TaskType


class PetRepository:
    def __init__(self, db: Session):
        self.db = db

    # -------------------------------
    # PET: CRUD
    # -------------------------------
    def get_by_id(self, pet_id: int) -> Optional[Pet]:
        return self.db.get(Pet, pet_id)

    def get_pets_for_user(self, user_id: int) -> List[Pet]:
        return (
            self.db.query(Pet)
            .filter(Pet.owner_id == user_id)
            .order_by(Pet.created_at.desc(), Pet.pet_id.desc())
            .all()
        )

    def create_pet(self, owner_id: int, **fields) -> Pet:
        sex = fields.pop("sex", None)
        pet = Pet(
            owner_id=owner_id,
            sex=PetSex(sex) if sex else PetSex.Unknown,
            **fields,
        )
        self.db.add(pet)
        self.db.flush()  # pet.pet_id 사용 가능
        return pet

    def update_partial(self, pet: Pet, **kwargs) -> Pet:
        for k, v in kwargs.items():
            if v is not None:
                setattr(pet, k, v)
        self.db.flush()
        return pet

    def delete_pet(self, pet: Pet) -> None:
        """
        반려동물 삭제. 완료 기록은 FK 가 없으므로 먼저 직접 지우고,
        할 일/예방 관리/서비스 할 일은 relationship cascade 로 삭제된다.
        """
        daily_ids = [
            tid for (tid,) in self.db.query(DailyTask.task_id)
            .filter(DailyTask.pet_id == pet.pet_id)
            .all()
        ]
        preventative_ids = [
            pid for (pid,) in self.db.query(Preventative.preventative_id)
            .filter(Preventative.pet_id == pet.pet_id)
            .all()
        ]

        if daily_ids:
            self.db.query(TaskCompletion).filter(
                TaskCompletion.task_type == TaskType.daily,
                TaskCompletion.task_id.in_(daily_ids),
            ).delete(synchronize_session=False)

        if preventative_ids:
            self.db.query(TaskCompletion).filter(
                TaskCompletion.task_type == TaskType.preventative,
                TaskCompletion.task_id.in_(preventative_ids),
            ).delete(synchronize_session=False)

        self.db.delete(pet)
        self.db.flush()
