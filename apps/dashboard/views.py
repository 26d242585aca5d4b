import logging

from django.contrib import messages
from django.shortcuts import render
from django.utils import timezone

from apps.core.exceptions import StoreError
from apps.core.store import RecordStore
from apps.core.utils import format_month_label, month_key
from apps.costs.models import CostEntry
from apps.costs.utils import aggregate_monthly_costs
from apps.evolution.models import ClientEvolution
from apps.marketing.models import Campaign
from apps.marketing.utils import summarize_campaigns
from apps.projects.models import Project, Task
from apps.projects.utils import summarize_task_status

logger = logging.getLogger(__name__)

project_store = RecordStore(Project)
task_store = RecordStore(Task)
campaign_store = RecordStore(Campaign)
evolution_store = RecordStore(ClientEvolution)
cost_store = RecordStore(CostEntry)


def _load(request, store, label, **kwargs):
    """섹션 하나 조회 (실패 시 빈 목록 + 메시지, 다른 섹션은 계속 표시)"""
    try:
        return store.select(**kwargs)
    except StoreError as e:
        logger.error(f"대시보드 {label} 조회 실패: {e}")
        messages.error(request, f'Error al cargar {label}.')
        return []


def home(request):
    """
    대시보드 메인

    - 프로젝트/작업: 상태별 작업 수와 비율
    - 마케팅: 전체 비용, 매출, 이익, ROI
    - 고객 추이: 가장 최근 월
    - 고정비: 이번 달 합계와 최근 월 합계
    """
    projects = _load(request, project_store, 'los proyectos')
    tasks = _load(request, task_store, 'las tareas')
    campaigns = _load(request, campaign_store, 'las campañas')
    evolution = _load(request, evolution_store, 'la evolución de clientes', order='month')
    costs = _load(request, cost_store, 'los costos', order='start_date')

    cost_totals = aggregate_monthly_costs(costs)
    current_month = month_key(timezone.localdate())
    latest_cost_month = next(reversed(cost_totals), None)

    context = {
        'project_count': len(projects),
        'task_count': len(tasks),
        'task_summary': summarize_task_status(tasks),
        'campaign_summary': summarize_campaigns(campaigns),
        'campaign_count': len(campaigns),
        'latest_evolution': evolution[-1] if evolution else None,
        'current_month_label': format_month_label(current_month),
        'current_month_costs': cost_totals.get(current_month, 0),
        'latest_cost_month': format_month_label(latest_cost_month) if latest_cost_month else None,
        'latest_cost_total': cost_totals.get(latest_cost_month, 0),
    }
    return render(request, 'dashboard/home.html', context)
