"""
고객 추이 계산 및 엑셀 내보내기

    수입(income) = round(유료 고객 × 구독 단가)
    순수입(net_income) = round(수입 - 지출)
    파트너별 이익(profit_per_partner) = round(순수입 / 파트너 수)

반올림은 정수 단위이며 .5 는 양의 방향으로 올립니다. (-0.5 → 0)
"""
from decimal import Decimal
from io import BytesIO

import openpyxl

from apps.core.utils import PARTNER_COUNT, SUBSCRIPTION_PRICE, round_amount

# 화면에서 수정 가능한 입력 필드
EDITABLE_FIELDS = ('month_text', 'active_clients', 'trial_clients', 'paid_clients', 'expenses')
NUMERIC_FIELDS = ('active_clients', 'trial_clients', 'paid_clients', 'expenses')
DERIVED_FIELDS = ('income', 'net_income', 'profit_per_partner')


def _dec(value):
    return Decimal(str(value or 0))


def recalculate_from_income(income, expenses):
    """
    수입이 정해진 상태에서 지출만 바뀐 경우의 하위 계산

    Returns:
        {'net_income': int, 'profit_per_partner': int}
    """
    net_income = round_amount(_dec(income) - _dec(expenses))
    return {
        'net_income': net_income,
        'profit_per_partner': round_amount(Decimal(net_income) / PARTNER_COUNT),
    }


def calculate_client_figures(paid_clients, expenses):
    """
    유료 고객 수와 지출로부터 계산 필드 전체

    Returns:
        {'income': int, 'net_income': int, 'profit_per_partner': int}
    """
    income = round_amount(_dec(paid_clients) * SUBSCRIPTION_PRICE)
    return {'income': income, **recalculate_from_income(income, expenses)}


def derived_changes(row, field, value):
    """
    필드 1개 수정 시 기록할 부분 레코드

    - paid_clients: 입력값 + income, net_income, profit_per_partner
    - expenses: 입력값 + net_income, profit_per_partner (저장된 income 사용)
    - 그 외: 입력값만

    숫자 필드는 정수로 반올림해서 기록합니다.
    """
    if field not in EDITABLE_FIELDS:
        raise ValueError(f"수정할 수 없는 필드입니다: {field}")

    if field == 'month_text':
        return {field: value}

    value = round_amount(value)
    changes = {field: value}

    if field == 'paid_clients':
        changes.update(calculate_client_figures(value, row.expenses))
    elif field == 'expenses':
        changes.update(recalculate_from_income(row.income, value))

    return changes


def export_client_evolution_to_excel(rows):
    """고객 추이 표를 엑셀로 내보내기 (월 순서 그대로)"""
    wb = openpyxl.Workbook()
    ws = wb.active
    ws.title = "Evolucion_clientes"

    headers = ['Mes', 'Fecha', 'Clientes activos', 'Clientes en prueba', 'Clientes pagos',
               'Ingresos', 'Gastos', 'Ingreso neto', 'Ganancia por socio']
    ws.append(headers)

    for row in rows:
        ws.append([
            row.month_text,
            row.month.strftime('%Y-%m-%d') if row.month else '',
            row.active_clients,
            row.trial_clients,
            row.paid_clients,
            row.income,
            row.expenses,
            row.net_income,
            row.profit_per_partner,
        ])

    output = BytesIO()
    wb.save(output)
    output.seek(0)
    return output
