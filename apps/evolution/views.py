import logging

from django.contrib import messages
from django.http import HttpResponse
from django.shortcuts import redirect, render
from django.utils import timezone
from django.views.decorators.http import require_POST

from apps.core.exceptions import DuplicateMonth, StoreError
from apps.core.store import RecordStore
from apps.core.utils import first_form_error
from .forms import ClientEvolutionForm, FieldUpdateForm
from .models import ClientEvolution
from .services import ClientEvolutionService
from .utils import export_client_evolution_to_excel

logger = logging.getLogger(__name__)

evolution_store = RecordStore(ClientEvolution)

DUPLICATE_MONTH_MESSAGE = 'Ya existe un registro para este mes'


def _service():
    return ClientEvolutionService(evolution_store)


def _chart_data(rows):
    """고객 수 / 수입 차트 데이터"""
    return {
        'labels': [row.month_text for row in rows],
        'active_clients': [row.active_clients for row in rows],
        'trial_clients': [row.trial_clients for row in rows],
        'paid_clients': [row.paid_clients for row in rows],
        'income': [row.income for row in rows],
        'net_income': [row.net_income for row in rows],
    }


def evolution_list(request):
    """고객 추이 표 + 추가 폼 + 차트"""
    try:
        rows = _service().list()
    except StoreError as e:
        logger.error(f"고객 추이 조회 실패: {e}")
        messages.error(request, 'Error al cargar los datos')
        rows = []

    context = {
        'rows': rows,
        'form': ClientEvolutionForm(),
        'chart_data': _chart_data(rows),
    }
    return render(request, 'evolution/evolution_list.html', context)


@require_POST
def evolution_create(request):
    form = ClientEvolutionForm(request.POST)

    if not form.is_valid():
        messages.error(request, first_form_error(form))
        return redirect('evolution:evolution_list')

    try:
        row = _service().create(form.cleaned_data)
    except DuplicateMonth:
        messages.error(request, DUPLICATE_MONTH_MESSAGE)
        return redirect('evolution:evolution_list')
    except StoreError as e:
        logger.error(f"고객 추이 생성 실패: {e}")
        messages.error(request, 'Error al agregar los datos del cliente')
        return redirect('evolution:evolution_list')

    messages.success(request, f'Datos de {row.month_text} agregados.')
    return redirect('evolution:evolution_list')


@require_POST
def evolution_update_field(request, pk):
    """셀 1개 수정 (하위 계산 필드 함께 갱신)"""
    form = FieldUpdateForm(request.POST)

    if not form.is_valid():
        messages.error(request, first_form_error(form))
        return redirect('evolution:evolution_list')

    field = form.cleaned_data['field']
    value = form.cleaned_data['value']

    try:
        _service().update_field(pk, field, value)
    except DuplicateMonth:
        messages.error(request, DUPLICATE_MONTH_MESSAGE)
    except StoreError as e:
        logger.error(f"고객 추이 수정 실패: row_id={pk}, {field}={value}, error={e}")
        messages.error(request, 'Error al actualizar el campo')

    return redirect('evolution:evolution_list')


def evolution_export(request):
    """고객 추이 엑셀 다운로드"""
    try:
        rows = _service().list()
    except StoreError as e:
        logger.error(f"고객 추이 내보내기 실패: {e}")
        messages.error(request, 'Error al cargar los datos')
        return redirect('evolution:evolution_list')

    excel_file = export_client_evolution_to_excel(rows)
    timestamp = timezone.localtime().strftime('%Y%m%d_%H%M%S')

    filename = f"evolucion_clientes_{timestamp}.xlsx"
    response = HttpResponse(
        excel_file.read(),
        content_type='application/vnd.openxmlformats-officedocument.spreadsheetml.sheet'
    )
    response['Content-Disposition'] = f'attachment; filename="{filename}"'

    return response
