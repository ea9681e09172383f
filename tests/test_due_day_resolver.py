# tests/test_due_day_resolver.py

from datetime import date
from types import SimpleNamespace

import pytest

from app.domains.tasks.service.due_day_resolver import (
    is_due_on,
    resolve_due_preventatives,
    tag_daily_task,
    tag_preventative,
)
from app.utils.date_utils import last_day_of_month, parse_calendar_date


def _prev(pid: int, due_day: int):
    return SimpleNamespace(
        preventative_id=pid,
        pet_id=1,
        name=f"day-{due_day}",
        due_day=due_day,
        notes=None,
        created_at=None,
        updated_at=None,
    )


@pytest.mark.parametrize(
    "target, due_days, expected",
    [
        # 2023-02 는 28일까지
        (date(2023, 2, 28), [28, 29, 30, 31], [28, 29, 30, 31]),
        # 윤년 2024-02 는 29일까지
        (date(2024, 2, 29), [28, 29, 30, 31], [29, 30, 31]),
        (date(2024, 2, 28), [28, 29, 30, 31], [28]),
        (date(2024, 1, 31), [30, 31], [31]),
        (date(2024, 4, 30), [30, 31], [30, 31]),
        (date(2024, 4, 29), [30, 31], []),
    ],
)
def test_month_end_overflow(target, due_days, expected):
    items = [_prev(i, d) for i, d in enumerate(due_days, start=1)]
    assert [p.due_day for p in resolve_due_preventatives(items, target)] == expected


def test_april_schedule():
    items = [_prev(1, 1), _prev(2, 15), _prev(3, 31)]

    assert [p.due_day for p in resolve_due_preventatives(items, date(2024, 4, 1))] == [1]
    assert [p.due_day for p in resolve_due_preventatives(items, date(2024, 4, 15))] == [15]
    assert [p.due_day for p in resolve_due_preventatives(items, date(2024, 4, 30))] == [31]
    for day in (2, 14, 16, 29):
        assert resolve_due_preventatives(items, date(2024, 4, day)) == []


def test_results_sorted_by_due_day_then_id():
    items = [_prev(5, 31), _prev(2, 30), _prev(9, 30), _prev(1, 45)]
    due = resolve_due_preventatives(items, date(2024, 4, 30))
    assert [(p.due_day, p.preventative_id) for p in due] == [(30, 2), (30, 9), (31, 5), (45, 1)]


def test_out_of_range_due_day_never_raises():
    assert is_due_on(0, date(2024, 4, 1)) is False
    assert is_due_on(-3, date(2024, 4, 30)) is False
    # 마지막 날보다 크면 overflow 규칙으로 마지막 날에만 해당
    assert is_due_on(45, date(2024, 4, 30)) is True
    assert is_due_on(45, date(2024, 4, 29)) is False


def test_empty_input_and_no_mutation():
    assert resolve_due_preventatives([], date(2024, 4, 30)) == []

    items = [_prev(1, 31), _prev(2, 1)]
    resolve_due_preventatives(items, date(2024, 4, 30))
    assert [p.due_day for p in items] == [31, 1]


def test_tags_distinguish_task_kinds():
    daily = SimpleNamespace(task_id=1, task_name="walk", pet_id=1, created_at=None, updated_at=None)

    assert tag_daily_task(daily)["task_type"] == "daily"
    tagged = tag_preventative(_prev(1, 31))
    assert tagged["task_type"] == "preventative"
    assert tagged["id"] == 1
    assert tagged["task_name"] == "day-31"
    assert tagged["due_day"] == 31
    assert tagged["completed"] is None
    assert tag_daily_task(daily)["completed"] is None


@pytest.mark.parametrize(
    "value, expected",
    [
        ("2024-04-30", date(2024, 4, 30)),
        ("2024-04-30T23:59:59.000Z", date(2024, 4, 30)),
        ("2024-02-29 00:00:00", date(2024, 2, 29)),
        (None, None),
    ],
)
def test_parse_calendar_date(value, expected):
    assert parse_calendar_date(value) == expected


@pytest.mark.parametrize("value", ["04/30/2024", "2024-4-30", "2023-02-29", "tomorrow", ""])
def test_parse_calendar_date_rejects_invalid(value):
    with pytest.raises(ValueError):
        parse_calendar_date(value)


def test_last_day_of_month_handles_leap_years():
    assert last_day_of_month(date(2023, 2, 1)) == 28
    assert last_day_of_month(date(2024, 2, 1)) == 29
    assert last_day_of_month(date(1900, 2, 1)) == 28
    assert last_day_of_month(date(2000, 2, 1)) == 29
    assert last_day_of_month(date(2024, 4, 1)) == 30
