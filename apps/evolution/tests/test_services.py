"""
ClientEvolutionService 테스트
"""
from datetime import date
from unittest.mock import MagicMock

import pytest
from django.db import IntegrityError

from apps.core.exceptions import DuplicateMonth, StoreError
from apps.evolution.models import ClientEvolution
from apps.evolution.services import ClientEvolutionService


@pytest.fixture
def service():
    return ClientEvolutionService()


@pytest.mark.django_db
class TestCreate:

    def test_create_rounds_and_computes(self, service):
        row = service.create({
            'month': date(2024, 5, 1),
            'month_text': 'Mayo',
            'active_clients': '20.4',
            'trial_clients': 3,
            'paid_clients': '9.5',
            'expenses': '1000.5',
        })

        assert row.active_clients == 20
        assert row.paid_clients == 10
        assert row.expenses == 1001
        assert row.income == 200000
        assert row.net_income == 198999
        assert row.profit_per_partner == 66333

    def test_month_defaults_to_today(self, service):
        row = service.create({'month_text': 'Junio'})
        assert row.month is not None
        assert row.paid_clients == 0

    def test_duplicate_month_leaves_existing_row(self, service, march):
        with pytest.raises(DuplicateMonth):
            service.create({'month_text': 'Marzo', 'paid_clients': 99, 'expenses': 1})

        march_after = ClientEvolution.objects.get(pk=march.pk)
        assert ClientEvolution.objects.count() == 1
        assert march_after.paid_clients == 10
        assert march_after.income == 200000
        assert march_after.expenses == 50000

    def test_unique_violation_from_store_maps_to_duplicate(self):
        store = MagicMock()
        store.exists.return_value = False
        error = StoreError('UNIQUE constraint failed')
        error.__cause__ = IntegrityError('UNIQUE constraint failed: client_evolution.month_text')
        store.insert.side_effect = error

        with pytest.raises(DuplicateMonth):
            ClientEvolutionService(store).create({'month_text': 'Marzo'})

    def test_other_store_errors_propagate(self):
        store = MagicMock()
        store.exists.return_value = False
        store.insert.side_effect = StoreError('connection lost')

        with pytest.raises(StoreError):
            ClientEvolutionService(store).create({'month_text': 'Marzo'})


@pytest.mark.django_db
class TestUpdateField:

    def test_expenses_keeps_income_and_paid(self, service, march):
        row = service.update_field(march.pk, 'expenses', 80000)

        assert row.expenses == 80000
        assert row.net_income == 120000
        assert row.profit_per_partner == 40000
        assert row.income == 200000
        assert row.paid_clients == 10

    def test_paid_clients_cascades(self, service, march):
        row = service.update_field(march.pk, 'paid_clients', 15)

        assert row.income == 300000
        assert row.net_income == 250000
        assert row.profit_per_partner == 83333
        assert row.expenses == 50000

    def test_active_clients_only(self, service, march):
        row = service.update_field(march.pk, 'active_clients', 30)

        assert row.active_clients == 30
        assert row.trial_clients == 5
        assert row.income == 200000

    def test_single_write_with_downstream_fields(self, march):
        store = MagicMock()
        store.get.return_value = march

        ClientEvolutionService(store).update_field(march.pk, 'expenses', 80000)

        store.update.assert_called_once_with(march.pk, {
            'expenses': 80000,
            'net_income': 120000,
            'profit_per_partner': 40000,
        })

    def test_rename_to_existing_month(self, service, march, april):
        with pytest.raises(DuplicateMonth):
            service.update_field(april.pk, 'month_text', 'Marzo')

        april.refresh_from_db()
        assert april.month_text == 'Abril'

    def test_rename_to_same_month_allowed(self, service, march):
        row = service.update_field(march.pk, 'month_text', 'Marzo')
        assert row.month_text == 'Marzo'

    def test_missing_row(self, service, db):
        with pytest.raises(StoreError):
            service.update_field(999, 'expenses', 1)


@pytest.mark.django_db
class TestList:

    def test_ordered_by_month(self, service, april, march):
        assert [row.month_text for row in service.list()] == ['Marzo', 'Abril']
