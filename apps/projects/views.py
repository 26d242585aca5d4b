import logging

from django.contrib import messages
from django.http import JsonResponse
from django.shortcuts import redirect, render
from django.urls import reverse
from django.views.decorators.http import require_POST

from apps.core.exceptions import StoreError
from apps.core.store import RecordStore
from apps.core.utils import first_form_error, get_assignees
from .forms import ProjectForm, StatusForm, TaskFilterForm, TaskForm
from .models import Project, Task, WorkStatus
from .utils import build_timeline_bars, summarize_task_status

logger = logging.getLogger(__name__)

project_store = RecordStore(Project)
task_store = RecordStore(Task)


# =============================================================================
# Helper 함수
# =============================================================================

def _task_filters(request):
    """GET 파라미터 → 작업 조회 조건"""
    filter_form = TaskFilterForm(request.GET)
    filters = {}

    if filter_form.is_valid():
        project = filter_form.cleaned_data.get('project')
        if project:
            filters['project_id'] = project.pk

        status = filter_form.cleaned_data.get('status')
        if status:
            filters['status'] = status

    return filter_form, filters


def _list_url(project_id=None):
    url = reverse('projects:project_list')
    if project_id:
        url = f"{url}?project={project_id}"
    return url


# =============================================================================
# Project 뷰
# =============================================================================

def project_list(request):
    """
    프로젝트/작업 메인 화면

    - 상태별 작업 요약 (전체 작업 기준)
    - 프로젝트/상태 필터가 적용된 작업 목록
    - 간트 차트 데이터
    """
    filter_form, filters = _task_filters(request)

    try:
        projects = project_store.select(order='-created_at')
        all_tasks = task_store.select(order='-created_at')
        tasks = task_store.select(filters=filters, order='-created_at') if filters else all_tasks
    except StoreError as e:
        logger.error(f"프로젝트 화면 조회 실패: {e}")
        messages.error(request, 'Error al cargar los datos.')
        projects, all_tasks, tasks = [], [], []

    selected_project = filters.get('project_id')

    context = {
        'projects': projects,
        'tasks': tasks,
        'filter_form': filter_form,
        'selected_project': selected_project,
        'status_summary': summarize_task_status(all_tasks),
        'timeline_bars': build_timeline_bars(tasks),
        'project_form': ProjectForm(),
        'task_form': TaskForm(initial={'project': selected_project}),
        'status_choices': WorkStatus.choices,
        'assignees': get_assignees(),
    }
    return render(request, 'projects/project_list.html', context)


@require_POST
def project_create(request):
    """프로젝트 생성 후 해당 프로젝트를 선택한 상태로 이동"""
    form = ProjectForm(request.POST)

    if not form.is_valid():
        messages.error(request, first_form_error(form))
        return redirect('projects:project_list')

    try:
        project = project_store.insert(form.cleaned_data)
    except StoreError as e:
        logger.error(f"프로젝트 생성 실패: {e}")
        messages.error(request, 'Error inesperado al crear el proyecto. Por favor, intenta de nuevo.')
        return redirect('projects:project_list')

    logger.info(f"프로젝트 생성: {project.name} (ID: {project.pk})")
    messages.success(request, f'Proyecto "{project.name}" creado.')
    return redirect(_list_url(project.pk))


@require_POST
def project_status_update(request, pk):
    form = StatusForm(request.POST)

    if not form.is_valid():
        messages.error(request, 'Estado inválido.')
        return redirect('projects:project_list')

    try:
        project_store.update(pk, {'status': form.cleaned_data['status']})
    except StoreError as e:
        logger.error(f"프로젝트 상태 변경 실패: project_id={pk}, error={e}")
        messages.error(request, 'Error al actualizar el estado del proyecto.')

    return redirect(_list_url(pk))


@require_POST
def project_delete(request, pk):
    """프로젝트 삭제 (연결된 작업은 삭제하지 않음)"""
    try:
        project_store.delete(pk)
    except StoreError as e:
        logger.error(f"프로젝트 삭제 실패: project_id={pk}, error={e}")
        messages.error(request, 'Error al eliminar el proyecto.')
    else:
        messages.success(request, 'Proyecto eliminado.')

    return redirect('projects:project_list')


# =============================================================================
# Task 뷰
# =============================================================================

@require_POST
def task_create(request):
    form = TaskForm(request.POST)

    if not form.is_valid():
        messages.error(request, first_form_error(form))
        return redirect(_list_url(request.POST.get('project')))

    try:
        task = task_store.insert(form.cleaned_data)
    except StoreError as e:
        logger.error(f"작업 생성 실패: {e}")
        messages.error(request, 'Error inesperado al crear la tarea. Por favor, intenta de nuevo.')
        return redirect(_list_url(request.POST.get('project')))

    logger.info(f"작업 생성: {task.title} (ID: {task.pk}, 담당: {task.assigned_to or '-'})")
    messages.success(request, f'Tarea "{task.title}" creada.')
    return redirect(_list_url(task.project_id))


@require_POST
def task_status_update(request, pk):
    """작업 상태 변경 (어떤 상태로든 전환 가능)"""
    form = StatusForm(request.POST)

    if not form.is_valid():
        messages.error(request, 'Estado inválido.')
        return redirect('projects:project_list')

    try:
        task = task_store.update(pk, {'status': form.cleaned_data['status']})
    except StoreError as e:
        logger.error(f"작업 상태 변경 실패: task_id={pk}, error={e}")
        messages.error(request, 'Error al actualizar el estado de la tarea.')
        return redirect('projects:project_list')

    return redirect(_list_url(task.project_id))


@require_POST
def task_delete(request, pk):
    try:
        task_store.delete(pk)
    except StoreError as e:
        logger.error(f"작업 삭제 실패: task_id={pk}, error={e}")
        messages.error(request, 'Error al eliminar la tarea.')
    else:
        messages.success(request, 'Tarea eliminada.')

    return redirect('projects:project_list')


def task_timeline(request):
    """간트 차트 데이터 (JSON)"""
    _, filters = _task_filters(request)

    try:
        tasks = task_store.select(filters=filters, order='start_date')
    except StoreError as e:
        logger.error(f"간트 데이터 조회 실패: {e}")
        return JsonResponse({'error': 'Error al cargar los datos.'}, status=503)

    return JsonResponse({'bars': build_timeline_bars(tasks)})
