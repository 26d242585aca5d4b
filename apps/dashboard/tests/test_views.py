"""
대시보드 홈 테스트
"""
from datetime import date
from decimal import Decimal
from unittest.mock import patch

import pytest
from django.contrib.messages import get_messages
from django.core.management import call_command
from django.urls import reverse

from apps.core.exceptions import StoreError
from apps.costs.models import CostEntry
from apps.evolution.models import ClientEvolution
from apps.marketing.models import Campaign, Lead
from apps.projects.models import Project, Task


@pytest.mark.django_db
class TestHome:

    def test_empty(self, client):
        response = client.get(reverse('dashboard:home'))

        assert response.status_code == 200
        assert response.context['task_count'] == 0
        assert response.context['latest_evolution'] is None
        assert response.context['campaign_summary']['roi'] == 0

    def test_summaries(self, client):
        project = Project.objects.create(name='P')
        Task.objects.create(project=project, title='a', status='completed')
        Task.objects.create(project=project, title='b', status='pending')
        Campaign.objects.create(
            name='C', start_date=date(2024, 1, 1), end_date=date(2024, 1, 31),
            cost=Decimal('20000'), suscrito=2,
        )
        ClientEvolution.objects.create(month=date(2024, 1, 1), month_text='Enero', paid_clients=1)
        latest = ClientEvolution.objects.create(month=date(2024, 2, 1), month_text='Febrero', paid_clients=2)
        CostEntry.objects.create(description='x', amount=Decimal('1200'), frequency='annual', start_date=date(2024, 2, 1))

        response = client.get(reverse('dashboard:home'))

        summary = {row['status']: row['percentage'] for row in response.context['task_summary']}
        assert summary['completed'] == 50
        assert response.context['campaign_summary']['roi'] == Decimal('100.00')
        assert response.context['latest_evolution'] == latest
        assert response.context['latest_cost_month'] == 'febrero 2024'
        assert response.context['latest_cost_total'] == Decimal('100')

    def test_one_section_failing_keeps_others(self, client):
        Project.objects.create(name='P')

        with patch('apps.dashboard.views.campaign_store') as store:
            store.select.side_effect = StoreError('boom')
            response = client.get(reverse('dashboard:home'))

        assert response.status_code == 200
        assert response.context['project_count'] == 1
        assert 'Error al cargar las campañas.' in [str(m) for m in get_messages(response.wsgi_request)]


@pytest.mark.django_db
class TestSeedDashboard:

    def test_seed_is_idempotent(self):
        call_command('seed_dashboard', '--year', '2024', '--months', '3')
        call_command('seed_dashboard', '--year', '2024', '--months', '3')

        assert ClientEvolution.objects.count() == 3
        assert Project.objects.count() == 1
        assert Task.objects.count() == 3
        assert Lead.objects.count() == 3
        assert CostEntry.objects.count() == 3

    def test_seeded_rows_have_derived_figures(self):
        call_command('seed_dashboard', '--year', '2024', '--months', '1')

        row = ClientEvolution.objects.get(month_text='Enero')
        assert row.income == row.paid_clients * 20000
