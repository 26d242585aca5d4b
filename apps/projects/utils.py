"""
작업 일정(간트) / 상태 요약 계산

모든 함수는 순수 함수이며 DB 를 조회하지 않습니다.
"""
from datetime import date
from typing import Dict, Iterable, List

from .models import WorkStatus


# 간트 막대 색상 (상태별 고정)
TIMELINE_COLORS = {
    WorkStatus.PENDING: 'rgba(234, 179, 8, 0.8)',
    WorkStatus.IN_PROGRESS: 'rgba(59, 130, 246, 0.8)',
    WorkStatus.COMPLETED: 'rgba(34, 197, 94, 0.8)',
}
CANCELLED_COLOR = 'rgba(156, 163, 175, 0.8)'

# 요약 카드에 표시하는 상태 순서
SUMMARY_STATUSES = [WorkStatus.PENDING, WorkStatus.IN_PROGRESS, WorkStatus.COMPLETED]


def _as_date(value):
    if isinstance(value, str):
        return date.fromisoformat(value[:10])
    return value


def days_between(start, end) -> int:
    """달력 기준 일수 차이 (종료일 미포함: 1/1 ~ 1/8 → 7일)"""
    return (_as_date(end) - _as_date(start)).days


def timeline_color(status) -> str:
    return TIMELINE_COLORS.get(status, CANCELLED_COLOR)


def build_timeline_bars(tasks: Iterable) -> List[Dict]:
    """
    간트 차트용 막대 목록

    시작일(start_date)과 마감일(due_date)이 모두 있는 작업만 막대를 만듭니다.

    Returns:
        [{'x': 시작일, 'label': 제목, 'duration': 일수, 'color': 색상, 'status': 상태}, ...]
    """
    bars = []
    for task in tasks:
        if not task.start_date or not task.due_date:
            continue

        bars.append({
            'x': _as_date(task.start_date),
            'label': task.title,
            'duration': days_between(task.start_date, task.due_date),
            'color': timeline_color(task.status),
            'status': task.status,
        })
    return bars


def summarize_task_status(tasks: Iterable) -> List[Dict]:
    """
    상태별 작업 수와 비율(%)

    비율은 전체 작업 대비 정수 반올림, 작업이 없으면 0
    """
    tasks = list(tasks)
    total = len(tasks)

    summary = []
    for status in SUMMARY_STATUSES:
        count = sum(1 for task in tasks if task.status == status)
        percentage = int(count * 100 / total + 0.5) if total else 0
        summary.append({
            'status': status.value,
            'label': status.label,
            'count': count,
            'percentage': percentage,
        })
    return summary
