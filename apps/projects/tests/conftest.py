"""
projects 앱 테스트용 공통 fixture
"""
from datetime import date

import pytest

from apps.projects.models import Project, Task


@pytest.fixture(autouse=True)
def assignees(settings):
    """테스트용 담당자 목록 (환경변수와 무관하게 고정)"""
    settings.DASHBOARD_ASSIGNEES = [
        {'id': 'maxi', 'name': 'Maxi'},
        {'id': 'tomas', 'name': 'Tomas'},
    ]
    return settings.DASHBOARD_ASSIGNEES


@pytest.fixture
def project(db):
    return Project.objects.create(name='Lanzamiento web', start_date=date(2024, 1, 1))


@pytest.fixture
def other_project(db):
    return Project.objects.create(name='App móvil')


@pytest.fixture
def task(project):
    return Task.objects.create(
        project=project,
        title='Diseñar landing',
        start_date=date(2024, 1, 1),
        due_date=date(2024, 1, 8),
        assigned_to='maxi',
    )
