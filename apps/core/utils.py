"""
공통 계산/포맷 유틸리티
"""
from datetime import date
from decimal import Decimal, InvalidOperation, ROUND_FLOOR, ROUND_HALF_UP

from django.conf import settings


# 구독 1건당 가격 (캠페인 매출, 고객 추이 수입 모두 동일 단가)
SUBSCRIPTION_PRICE = 20000

# 순이익 분배 인원
PARTNER_COUNT = 3

MONTH_NAMES = [
    'Enero', 'Febrero', 'Marzo', 'Abril', 'Mayo', 'Junio',
    'Julio', 'Agosto', 'Septiembre', 'Octubre', 'Noviembre', 'Diciembre',
]


def to_decimal(value, places=Decimal('0.01')):
    """
    값을 Decimal 로 변환 (기본 소수점 2자리, 반올림)
    변환할 수 없으면 Decimal('0')
    """
    if value is None or str(value).strip() == '':
        return Decimal('0')

    try:
        return Decimal(str(value)).quantize(places, rounding=ROUND_HALF_UP)
    except (InvalidOperation, ValueError, TypeError):
        return Decimal('0')


def round_amount(value):
    """
    정수 반올림 (Decimal 기반)

    .5 는 항상 양의 방향으로 올림: 2.5 → 3, -2.5 → -2
    """
    if value is None:
        return 0
    return int((Decimal(str(value)) + Decimal('0.5')).to_integral_value(rounding=ROUND_FLOOR))


def month_key(value):
    """날짜(또는 'YYYY-MM-DD' 문자열) → 'YYYY-MM'"""
    if isinstance(value, str):
        value = date.fromisoformat(value[:10])
    return f"{value.year:04d}-{value.month:02d}"


def month_name(month):
    """1~12 → 스페인어 월 이름"""
    return MONTH_NAMES[month - 1]


def format_month_label(key):
    """'2024-03' → 'marzo 2024' (차트 라벨용)"""
    year, month = key.split('-')
    return f"{month_name(int(month)).lower()} {year}"


def first_form_error(form, default='Revisa los datos ingresados.'):
    """폼 에러 중 첫 번째 메시지 (리다이렉트 후 messages 로 표시할 용도)"""
    for errors in form.errors.values():
        if errors:
            return errors[0]
    return default


def get_assignees():
    """설정에 등록된 작업 담당자 목록 [{'id', 'name'}]"""
    return list(getattr(settings, 'DASHBOARD_ASSIGNEES', []))


def get_assignee_name(assignee_id, default='Ninguno'):
    for assignee in get_assignees():
        if assignee['id'] == assignee_id:
            return assignee['name']
    return default
