from typing import List, Optional

from sqlalchemy.orm import Session

from app.models.service_task import ServiceTask


class ServiceTaskRepository:
    def __init__(self, db: Session):
        self.db = db

    def list_for_pet(self, pet_id: int) -> List[ServiceTask]:
        return (
            self.db.query(ServiceTask)
            .filter(ServiceTask.pet_id == pet_id)
            .order_by(ServiceTask.created_at.desc(), ServiceTask.task_id.desc())
            .all()
        )

    def get_for_pet(self, pet_id: int, task_id: int) -> Optional[ServiceTask]:
        return (
            self.db.query(ServiceTask)
            .filter(ServiceTask.pet_id == pet_id, ServiceTask.task_id == task_id)
            .first()
        )

    def create(self, pet_id: int, task_name: str, notes: Optional[str]) -> ServiceTask:
        task = ServiceTask(pet_id=pet_id, task_name=task_name, notes=notes)
        self.db.add(task)
        self.db.flush()
        return task

    def delete(self, task: ServiceTask) -> None:
        self.db.delete(task)
        self.db.flush()
