import logging

from django.contrib import messages
from django.http import HttpResponse
from django.shortcuts import redirect, render
from django.urls import reverse
from django.utils import timezone
from django.views.decorators.http import require_POST

from apps.core.exceptions import StoreError
from apps.core.store import RecordStore
from apps.core.utils import first_form_error, format_month_label, month_key
from .forms import CostEntryForm, MonthFilterForm
from .models import CostEntry
from .utils import (
    aggregate_monthly_costs,
    build_cost_chart,
    export_monthly_costs_to_excel,
    group_costs_by_month,
    resolve_selected_month,
)

logger = logging.getLogger(__name__)

cost_store = RecordStore(CostEntry)


def cost_list(request):
    """
    고정비 화면

    - 월별 합계 표 (시작월 기준) + 항목 상세
    - 월 필터: 선택한 월의 합계/항목
    - 월별 합계 차트
    """
    try:
        costs = cost_store.select(order='start_date')
    except StoreError as e:
        logger.error(f"고정비 조회 실패: {e}")
        messages.error(request, 'Error al cargar los costos.')
        costs = []

    totals = aggregate_monthly_costs(costs)
    groups = group_costs_by_month(costs)

    filter_form = MonthFilterForm(request.GET)
    requested = filter_form.cleaned_data.get('month') if filter_form.is_valid() else None
    selected_month = resolve_selected_month(requested, totals.keys(), timezone.localdate())

    month_rows = [
        {
            'key': key,
            'label': format_month_label(key),
            'total': total,
            'entries': groups.get(key, []),
        }
        for key, total in totals.items()
    ]

    context = {
        'month_rows': month_rows,
        'selected_month': selected_month,
        'selected_label': format_month_label(selected_month),
        'selected_total': totals.get(selected_month, 0),
        'selected_entries': groups.get(selected_month, []),
        'filter_form': MonthFilterForm(initial={'month': selected_month}),
        'chart_data': build_cost_chart(totals),
        'form': CostEntryForm(initial={'start_date': timezone.localdate()}),
    }
    return render(request, 'costs/cost_list.html', context)


@require_POST
def cost_create(request):
    form = CostEntryForm(request.POST)

    if not form.is_valid():
        messages.error(request, first_form_error(form))
        return redirect('costs:cost_list')

    try:
        cost = cost_store.insert(form.cleaned_data)
    except StoreError as e:
        logger.error(f"고정비 등록 실패: {e}")
        messages.error(request, 'Error al agregar el costo.')
        return redirect('costs:cost_list')

    logger.info(f"고정비 등록: {cost.description} {cost.amount} ({cost.frequency})")
    messages.success(request, f'Costo "{cost.description}" agregado.')
    return redirect(f"{reverse('costs:cost_list')}?month={month_key(cost.start_date)}")


@require_POST
def cost_delete(request, pk):
    try:
        cost_store.delete(pk)
    except StoreError as e:
        logger.error(f"고정비 삭제 실패: cost_id={pk}, error={e}")
        messages.error(request, 'Error al eliminar el costo.')
    else:
        messages.success(request, 'Costo eliminado.')

    return redirect('costs:cost_list')


def cost_export(request):
    """월별 고정비 엑셀 다운로드"""
    try:
        costs = cost_store.select(order='start_date')
    except StoreError as e:
        logger.error(f"고정비 내보내기 실패: {e}")
        messages.error(request, 'Error al cargar los costos.')
        return redirect('costs:cost_list')

    excel_file = export_monthly_costs_to_excel(costs)
    timestamp = timezone.localtime().strftime('%Y%m%d_%H%M%S')

    filename = f"costos_{timestamp}.xlsx"
    response = HttpResponse(
        excel_file.read(),
        content_type='application/vnd.openxmlformats-officedocument.spreadsheetml.sheet'
    )
    response['Content-Disposition'] = f'attachment; filename="{filename}"'

    return response
