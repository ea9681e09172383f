from datetime import date
from typing import Iterable, List, Protocol

from app.models.task_completion import TaskType
from app.utils.date_utils import last_day_of_month


class HasDueDay(Protocol):
    due_day: int


def is_due_on(due_day: int, target: date) -> bool:
    """
    due_day 가 target 날짜에 해당하는지.

    - 일자가 같으면 해당
    - target 이 그 달의 마지막 날이고 due_day 가 그보다 크면 해당
      (31일 항목은 2월 28/29일, 4월 30일 등에 표시)
    """
    selected_day = target.day
    last_day = last_day_of_month(target)

    if due_day == selected_day:
        return True
    return selected_day == last_day and due_day > last_day


def resolve_due_preventatives(preventatives: Iterable[HasDueDay], target: date) -> List[HasDueDay]:
    """target 날짜에 표시할 월간 항목만 due_day 오름차순으로 반환 (부수 효과 없음)"""
    due = [p for p in preventatives if is_due_on(p.due_day, target)]
    due.sort(key=lambda p: (p.due_day, getattr(p, "preventative_id", 0) or 0))
    return due


def tag_preventative(p) -> dict:
    """일일 할 일과 한 목록으로 합칠 수 있는 형태로 변환"""
    return {
        "id": p.preventative_id,
        "task_name": p.name,
        "pet_id": p.pet_id,
        "task_type": TaskType.preventative.value,
        "due_day": p.due_day,
        "notes": p.notes,
        "completed": None,
        "created_at": p.created_at,
        "updated_at": p.updated_at,
    }


def tag_daily_task(t) -> dict:
    return {
        "id": t.task_id,
        "task_name": t.task_name,
        "pet_id": t.pet_id,
        "task_type": TaskType.daily.value,
        "due_day": None,
        "notes": None,
        "completed": None,
        "created_at": t.created_at,
        "updated_at": t.updated_at,
    }
