from typing import List, Optional

from sqlalchemy.orm import Session

from app.models.preventative import Preventative
from app.models.task_completion import TaskCompletion, TaskType


class PreventativeRepository:
    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, preventative_id: int) -> Optional[Preventative]:
        return self.db.get(Preventative, preventative_id)

    def list_for_pet(self, pet_id: int) -> List[Preventative]:
        return (
            self.db.query(Preventative)
            .filter(Preventative.pet_id == pet_id)
            .order_by(Preventative.due_day.asc(), Preventative.preventative_id.asc())
            .all()
        )

    def create(self, pet_id: int, name: str, due_day: int, notes: Optional[str]) -> Preventative:
        preventative = Preventative(pet_id=pet_id, name=name, due_day=due_day, notes=notes)
        self.db.add(preventative)
        self.db.flush()
        return preventative

    def update_partial(self, preventative: Preventative, **fields) -> Preventative:
        for key, value in fields.items():
            if value is not None:
                setattr(preventative, key, value)
        self.db.flush()
        return preventative

    def delete(self, preventative: Preventative) -> None:
        self.db.query(TaskCompletion).filter(
            TaskCompletion.task_type == TaskType.preventative,
            TaskCompletion.task_id == preventative.preventative_id,
        ).delete(synchronize_session=False)
        self.db.delete(preventative)
        self.db.flush()
