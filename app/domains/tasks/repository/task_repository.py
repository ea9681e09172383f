from typing import List, Optional, Tuple

from sqlalchemy.orm import Session

from app.models.daily_task import DailyTask
from app.models.pet import Pet
from app.models.preventative import Preventative
from app.models.task_completion import TaskCompletion, TaskType


class TaskRepository:
    def __init__(self, db: Session):
        self.db = db

    # -------------------------------
    # DAILY TASK
    # -------------------------------
    def list_daily_tasks(self, pet_id: int) -> List[DailyTask]:
        return (
            self.db.query(DailyTask)
            .filter(DailyTask.pet_id == pet_id)
            .order_by(DailyTask.created_at.desc(), DailyTask.task_id.desc())
            .all()
        )

    def create_daily_task(self, pet_id: int, task_name: str) -> DailyTask:
        task = DailyTask(pet_id=pet_id, task_name=task_name)
        self.db.add(task)
        self.db.flush()
        return task

    def delete_daily_task(self, task: DailyTask) -> None:
        self.db.query(TaskCompletion).filter(
            TaskCompletion.task_type == TaskType.daily,
            TaskCompletion.task_id == task.task_id,
        ).delete(synchronize_session=False)
        self.db.delete(task)
        self.db.flush()

    # -------------------------------
    # task_type + id → (task, pet)
    # -------------------------------
    def get_task_with_pet(self, task_type: TaskType, task_id: int) -> Tuple[Optional[object], Optional[Pet]]:
        model = DailyTask if task_type == TaskType.daily else Preventative
        task = self.db.get(model, task_id)
        if task is None:
            return None, None
        return task, task.pet

    def task_ids_for_pet(self, pet_id: int) -> Tuple[List[int], List[int]]:
        daily_ids = [
            tid for (tid,) in self.db.query(DailyTask.task_id)
            .filter(DailyTask.pet_id == pet_id)
            .all()
        ]
        preventative_ids = [
            pid for (pid,) in self.db.query(Preventative.preventative_id)
            .filter(Preventative.pet_id == pet_id)
            .all()
        ]
        return daily_ids, preventative_ids
