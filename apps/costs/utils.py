"""
월별 고정비 집계 및 엑셀 내보내기

월 키 형식은 'YYYY-MM' 이며, 항목은 시작월 한 달에만 집계합니다.
(연간 항목도 12개월로 나누어 퍼뜨리지 않고 시작월에 1/12 만 반영)
"""
from collections import defaultdict
from decimal import Decimal
from io import BytesIO

import openpyxl

from apps.core.utils import format_month_label, month_key, to_decimal
from .models import Frequency


def monthly_amount(cost):
    """
    월 환산 금액 (연간 항목은 ÷ 12)

    반올림하지 않은 값을 반환합니다. 합계는 aggregate_monthly_costs 에서 한 번만 반올림.
    """
    amount = to_decimal(cost.amount)
    if cost.frequency == Frequency.ANNUAL:
        return amount / 12
    return amount


def aggregate_monthly_costs(costs):
    """
    시작월별 월 환산 금액 합계

    Returns:
        {'YYYY-MM': Decimal} (키 오름차순), 항목이 없으면 {}
    """
    totals = defaultdict(Decimal)
    for cost in costs:
        totals[month_key(cost.start_date)] += monthly_amount(cost)
    return dict(sorted((key, to_decimal(total)) for key, total in totals.items()))


def group_costs_by_month(costs):
    """시작월별 항목 목록 {'YYYY-MM': [cost, ...]} (키 오름차순)"""
    groups = defaultdict(list)
    for cost in costs:
        groups[month_key(cost.start_date)].append(cost)
    return dict(sorted(groups.items()))


def resolve_selected_month(requested, available, today):
    """
    월 필터 값 결정

    요청한 월이 집계된 월 중에 있으면 그대로, 아니면 첫 번째 월,
    집계된 월이 없으면 오늘이 속한 월
    """
    available = list(available)
    if requested in available:
        return requested
    if available:
        return available[0]
    return month_key(today)


def build_cost_chart(totals):
    """차트 데이터 {'labels': ['marzo 2024', ...], 'data': [float, ...]}"""
    return {
        'labels': [format_month_label(key) for key in totals],
        'data': [float(total) for total in totals.values()],
    }


def export_monthly_costs_to_excel(costs):
    """월별 합계 + 항목 상세 엑셀"""
    totals = aggregate_monthly_costs(costs)
    groups = group_costs_by_month(costs)

    wb = openpyxl.Workbook()
    ws = wb.active
    ws.title = "Costos_mensuales"
    ws.append(['Mes', 'Total'])
    for key, total in totals.items():
        # Decimal을 float으로 변환 (엑셀 호환)
        ws.append([format_month_label(key), float(total)])

    detail = wb.create_sheet("Detalles")
    detail.append(['Mes', 'Descripción', 'Monto', 'Frecuencia', 'Monto mensual', 'Fecha de inicio'])
    for key, entries in groups.items():
        for cost in entries:
            detail.append([
                key,
                cost.description,
                float(cost.amount),
                cost.get_frequency_display(),
                float(to_decimal(monthly_amount(cost))),
                cost.start_date.strftime('%Y-%m-%d'),
            ])

    output = BytesIO()
    wb.save(output)
    output.seek(0)
    return output
