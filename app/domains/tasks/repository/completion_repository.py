from datetime import date
from typing import Iterable, List, Optional, Set, Tuple

from sqlalchemy import and_, or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.models.task_completion import TaskCompletion, TaskType


class CompletionRepository:
    def __init__(self, db: Session):
        self.db = db

    def get(self, task_type: TaskType, task_id: int, completion_date: date) -> Optional[TaskCompletion]:
        return (
            self.db.query(TaskCompletion)
            .filter(
                TaskCompletion.task_type == task_type,
                TaskCompletion.task_id == task_id,
                TaskCompletion.completion_date == completion_date,
            )
            .first()
        )

    def create_once(self, task_type: TaskType, task_id: int, completion_date: date) -> Tuple[TaskCompletion, bool]:
        """
        (task, date) 당 한 건만 저장하고 commit.
        이미 있으면 기존 row 를 돌려준다. 동시 요청으로 unique 제약에 걸리면
        rollback 후 먼저 저장된 row 를 다시 읽는다.

        Returns:
            (completion, created)
        """
        existing = self.get(task_type, task_id, completion_date)
        if existing:
            return existing, False

        completion = TaskCompletion(
            task_type=task_type,
            task_id=task_id,
            completion_date=completion_date,
        )
        try:
            self.db.add(completion)
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            existing = self.get(task_type, task_id, completion_date)
            if existing is None:
                raise
            return existing, False

        self.db.refresh(completion)
        return completion, True

    def delete(self, task_type: TaskType, task_id: int, completion_date: date) -> bool:
        deleted = (
            self.db.query(TaskCompletion)
            .filter(
                TaskCompletion.task_type == task_type,
                TaskCompletion.task_id == task_id,
                TaskCompletion.completion_date == completion_date,
            )
            .delete(synchronize_session=False)
        )
        return deleted > 0

    def completed_keys(self, keys: Iterable[Tuple[TaskType, int]], on: date) -> Set[Tuple[TaskType, int]]:
        """on 날짜에 완료된 (task_type, task_id) 집합"""
        keys = list(keys)
        if not keys:
            return set()
        rows = (
            self.db.query(TaskCompletion.task_type, TaskCompletion.task_id)
            .filter(
                TaskCompletion.completion_date == on,
                or_(*[
                    and_(TaskCompletion.task_type == t, TaskCompletion.task_id == i)
                    for t, i in keys
                ]),
            )
            .all()
        )
        return {(t, i) for t, i in rows}

    def list_for_tasks(
        self,
        daily_ids: List[int],
        preventative_ids: List[int],
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> List[TaskCompletion]:
        conditions = []
        if daily_ids:
            conditions.append(and_(
                TaskCompletion.task_type == TaskType.daily,
                TaskCompletion.task_id.in_(daily_ids),
            ))
        if preventative_ids:
            conditions.append(and_(
                TaskCompletion.task_type == TaskType.preventative,
                TaskCompletion.task_id.in_(preventative_ids),
            ))
        if not conditions:
            return []

        query = self.db.query(TaskCompletion).filter(or_(*conditions))
        if start is not None:
            query = query.filter(TaskCompletion.completion_date >= start)
        if end is not None:
            query = query.filter(TaskCompletion.completion_date <= end)

        return query.order_by(TaskCompletion.completion_date.asc(), TaskCompletion.completion_id.asc()).all()
