"""
고정비 뷰 테스트
"""
from decimal import Decimal
from io import BytesIO
from unittest.mock import patch

import openpyxl
import pytest
from django.contrib.messages import get_messages
from django.urls import reverse

from apps.core.exceptions import StoreError
from apps.costs.models import CostEntry


def message_texts(response):
    return [str(m) for m in get_messages(response.wsgi_request)]


@pytest.mark.django_db
class TestCostList:

    def test_month_rows(self, client, monthly_cost, annual_cost):
        response = client.get(reverse('costs:cost_list'))

        assert response.status_code == 200
        row = response.context['month_rows'][0]
        assert row['key'] == '2024-03'
        assert row['label'] == 'marzo 2024'
        assert row['total'] == Decimal('5100')
        assert set(row['entries']) == {monthly_cost, annual_cost}

    def test_selected_month_falls_back_to_first(self, client, monthly_cost):
        response = client.get(reverse('costs:cost_list'), {'month': '2030-01'})

        assert response.context['selected_month'] == '2024-03'
        assert response.context['selected_total'] == Decimal('5000')

    def test_empty(self, client):
        response = client.get(reverse('costs:cost_list'))

        assert response.status_code == 200
        assert response.context['month_rows'] == []
        assert response.context['chart_data'] == {'labels': [], 'data': []}

    def test_store_failure(self, client):
        with patch('apps.costs.views.cost_store') as store:
            store.select.side_effect = StoreError('boom')
            response = client.get(reverse('costs:cost_list'))

        assert response.status_code == 200
        assert 'Error al cargar los costos.' in message_texts(response)


@pytest.mark.django_db
class TestCostMutations:

    def test_create(self, client):
        response = client.post(reverse('costs:cost_create'), {
            'description': 'Licencias',
            'amount': '2400',
            'frequency': 'annual',
            'start_date': '2024-05-15',
        })

        cost = CostEntry.objects.get(description='Licencias')
        assert cost.amount == Decimal('2400')
        assert response.url == f"{reverse('costs:cost_list')}?month=2024-05"

    def test_create_zero_amount(self, client):
        response = client.post(reverse('costs:cost_create'), {
            'description': 'Gratis',
            'amount': '0',
            'frequency': 'monthly',
            'start_date': '2024-05-15',
        })

        assert not CostEntry.objects.exists()
        assert 'El monto debe ser mayor a 0.' in message_texts(response)

    def test_delete(self, client, monthly_cost):
        client.post(reverse('costs:cost_delete', args=[monthly_cost.pk]))
        assert not CostEntry.objects.exists()

    def test_delete_missing(self, client):
        response = client.post(reverse('costs:cost_delete', args=[999]))
        assert 'Error al eliminar el costo.' in message_texts(response)


@pytest.mark.django_db
class TestCostExport:

    def test_xlsx(self, client, monthly_cost, annual_cost):
        response = client.get(reverse('costs:cost_export'))

        assert response.status_code == 200
        wb = openpyxl.load_workbook(BytesIO(response.content))
        summary = list(wb['Costos_mensuales'].iter_rows(values_only=True))
        assert summary[1] == ('marzo 2024', 5100.0)
        assert wb['Detalles'].max_row == 3
