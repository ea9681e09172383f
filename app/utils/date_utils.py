"""
달력 날짜(date) 변환을 경계 한 곳에서 처리하는 유틸리티.

요청으로 들어온 날짜 문자열은 여기서 한 번만 date 로 바뀌고,
그 이후 계층은 시각/타임존 없이 date 만 다룬다.
"""
import calendar
import re
from datetime import date
from typing import Optional

# YYYY-MM-DD, 뒤에 시각이 붙어 있으면 (2024-02-29T00:00:00.000Z) 날짜 부분만 사용
_DATE_PREFIX = re.compile(r"^(\d{4}-\d{2}-\d{2})(?:[T ].*)?$")


def parse_calendar_date(value: Optional[str]) -> Optional[date]:
    """
    문자열을 date 로 파싱. 값이 없으면 None, 형식이 틀리면 ValueError.

    시각 부분은 타임존 변환 없이 버린다 (클라이언트가 보낸 달력 날짜가 기준).
    """
    if value is None:
        return None

    m = _DATE_PREFIX.match(value.strip())
    if not m:
        raise ValueError(f"잘못된 날짜 형식입니다: {value}")
    return date.fromisoformat(m.group(1))


def last_day_of_month(d: date) -> int:
    """해당 연/월의 마지막 날 (28~31, 윤년 반영)"""
    return calendar.monthrange(d.year, d.month)[1]
