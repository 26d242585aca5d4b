import logging

from django.contrib import messages
from django.http import Http404
from django.shortcuts import redirect, render
from django.utils.http import url_has_allowed_host_and_scheme
from django.views.decorators.http import require_POST

from apps.core.exceptions import StoreError
from apps.core.store import RecordStore
from apps.core.utils import first_form_error
from .forms import CampaignForm, LeadForm, LeadStatusForm, StageCounterForm
from .models import Campaign, FunnelStage, Lead
from .utils import build_funnel, calculate_campaign_metrics, count_leads_by_stage, summarize_campaigns

logger = logging.getLogger(__name__)

campaign_store = RecordStore(Campaign)
lead_store = RecordStore(Lead)


def _next_url(request):
    """POST 의 next (같은 호스트만 허용), 없으면 캠페인 목록"""
    next_url = request.POST.get('next')
    if next_url and url_has_allowed_host_and_scheme(next_url, allowed_hosts={request.get_host()}):
        return next_url
    return 'marketing:campaign_list'


# =============================================================================
# Campaign 뷰
# =============================================================================

def campaign_list(request):
    """캠페인 목록 + 캠페인별 지표/퍼널 + 전체 합계"""
    try:
        campaigns = campaign_store.select(order='-created_at')
    except StoreError as e:
        logger.error(f"캠페인 목록 조회 실패: {e}")
        messages.error(request, 'Error al cargar las campañas.')
        campaigns = []

    rows = [
        {
            'campaign': campaign,
            'metrics': calculate_campaign_metrics(campaign),
            'funnel': build_funnel(campaign),
        }
        for campaign in campaigns
    ]

    context = {
        'rows': rows,
        'summary': summarize_campaigns(campaigns),
        'form': CampaignForm(),
    }
    return render(request, 'marketing/campaign_list.html', context)


@require_POST
def campaign_create(request):
    form = CampaignForm(request.POST)

    if not form.is_valid():
        messages.error(request, first_form_error(form))
        return redirect('marketing:campaign_list')

    try:
        campaign = campaign_store.insert(form.cleaned_data)
    except StoreError as e:
        logger.error(f"캠페인 생성 실패: {e}")
        messages.error(request, 'Error al agregar la campaña.')
        return redirect('marketing:campaign_list')

    logger.info(f"캠페인 생성: {campaign.name} (ID: {campaign.pk}, 비용: {campaign.cost})")
    messages.success(request, f'Campaña "{campaign.name}" creada.')
    return redirect('marketing:campaign_list')


@require_POST
def campaign_stage_update(request, pk):
    """
    퍼널 카운터 1개 수정

    해당 컬럼만 갱신하며 리드 상태와는 동기화하지 않습니다.
    """
    form = StageCounterForm(request.POST)
    next_url = _next_url(request)

    if not form.is_valid():
        messages.error(request, first_form_error(form))
        return redirect(next_url)

    stage = form.cleaned_data['stage']
    value = form.cleaned_data['value']

    try:
        campaign_store.update(pk, {stage: value})
    except StoreError as e:
        logger.error(f"캠페인 지표 수정 실패: campaign_id={pk}, {stage}={value}, error={e}")
        messages.error(request, 'Error al actualizar las métricas de la campaña.')

    return redirect(next_url)


def campaign_detail(request, pk):
    """캠페인 상세: 퍼널 카운터와 리드 상태별 건수를 나란히 표시"""
    try:
        campaign = campaign_store.get(pk)
    except StoreError:
        raise Http404('Campaña no encontrada')

    try:
        leads = lead_store.select(filters={'campaign_id': pk}, order='-created_at')
    except StoreError as e:
        logger.error(f"리드 조회 실패: campaign_id={pk}, error={e}")
        messages.error(request, 'Error al cargar los leads.')
        leads = []

    lead_counts = count_leads_by_stage(leads)
    funnel = build_funnel(campaign)
    for step in funnel:
        step['leads'] = lead_counts[step['stage']]

    context = {
        'campaign': campaign,
        'metrics': calculate_campaign_metrics(campaign),
        'funnel': funnel,
        'leads': leads,
        'lead_form': LeadForm(),
        'stage_choices': FunnelStage.choices,
    }
    return render(request, 'marketing/campaign_detail.html', context)


# =============================================================================
# Lead 뷰
# =============================================================================

@require_POST
def lead_create(request, pk):
    form = LeadForm(request.POST)

    if not form.is_valid():
        messages.error(request, first_form_error(form))
        return redirect('marketing:campaign_detail', pk=pk)

    try:
        lead = lead_store.insert({'campaign_id': pk, **form.cleaned_data})
    except StoreError as e:
        logger.error(f"리드 생성 실패: campaign_id={pk}, error={e}")
        messages.error(request, 'Error al agregar el lead.')
        return redirect('marketing:campaign_detail', pk=pk)

    logger.info(f"리드 생성: {lead.name} (캠페인 ID: {pk})")
    return redirect('marketing:campaign_detail', pk=pk)


@require_POST
def lead_status_update(request, pk):
    form = LeadStatusForm(request.POST)

    if not form.is_valid():
        messages.error(request, 'Estado inválido.')
        return redirect('marketing:campaign_list')

    try:
        lead = lead_store.update(pk, {'status': form.cleaned_data['status']})
    except StoreError as e:
        logger.error(f"리드 상태 변경 실패: lead_id={pk}, error={e}")
        messages.error(request, 'Error al actualizar el estado del lead.')
        return redirect('marketing:campaign_list')

    return redirect('marketing:campaign_detail', pk=lead.campaign_id)
