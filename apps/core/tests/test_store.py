"""
RecordStore 테스트
"""
from datetime import date
from decimal import Decimal
from unittest.mock import patch

import pytest
from django.db import IntegrityError, OperationalError

from apps.core.exceptions import StoreError
from apps.core.store import RecordStore
from apps.costs.models import CostEntry
from apps.evolution.models import ClientEvolution
from apps.projects.models import Project, Task


@pytest.fixture
def store():
    return RecordStore(Task)


@pytest.fixture
def project(db):
    return Project.objects.create(name='P')


@pytest.mark.django_db
class TestSelect:

    def test_filters_and_order(self, store, project):
        Task.objects.create(project=project, title='b', status='pending')
        Task.objects.create(project=project, title='a', status='pending')
        Task.objects.create(project=project, title='c', status='completed')

        rows = store.select(filters={'status': 'pending'}, order='title')

        assert [row.title for row in rows] == ['a', 'b']

    def test_order_list(self, store, project):
        Task.objects.create(project=project, title='a', status='pending')
        Task.objects.create(project=project, title='b', status='completed')

        rows = store.select(order=['-status', 'title'])

        assert [row.title for row in rows] == ['a', 'b']

    def test_database_error(self, store):
        with patch.object(Task.objects, 'all', side_effect=OperationalError('down')):
            with pytest.raises(StoreError) as exc_info:
                store.select()

        assert exc_info.value.table == 'tasks'


@pytest.mark.django_db
class TestInsertUpdateDelete:

    def test_insert(self, store, project):
        task = store.insert({'project': project, 'title': 'Nueva'})

        assert task.pk is not None
        assert Task.objects.get(pk=task.pk).title == 'Nueva'

    def test_insert_constraint_violation(self):
        cost_store = RecordStore(CostEntry)

        with pytest.raises(StoreError) as exc_info:
            cost_store.insert({'description': 'x', 'amount': Decimal('0'), 'start_date': date(2024, 1, 1)})

        assert isinstance(exc_info.value.__cause__, IntegrityError)
        assert not CostEntry.objects.exists()

    def test_update_only_given_columns(self, store, project):
        task = Task.objects.create(project=project, title='Original', description='desc')

        updated = store.update(task.pk, {'status': 'completed'})

        assert updated.status == 'completed'
        assert updated.title == 'Original'
        assert updated.description == 'desc'

    def test_update_touches_updated_at(self, store, project):
        task = Task.objects.create(project=project, title='t')

        updated = store.update(task.pk, {'title': 'u'})

        assert updated.updated_at >= task.updated_at

    def test_update_missing(self, store):
        with pytest.raises(StoreError):
            store.update(999, {'status': 'completed'})

    def test_get_missing(self, store):
        with pytest.raises(StoreError):
            store.get(999)

    def test_delete(self, store, project):
        task = Task.objects.create(project=project, title='t')

        store.delete(task.pk)

        assert not Task.objects.exists()

    def test_delete_missing(self, store):
        with pytest.raises(StoreError):
            store.delete(999)

    def test_exists(self, store, project):
        Task.objects.create(project=project, title='t')

        assert store.exists({'title': 't'})
        assert not store.exists({'title': 'x'})

    def test_insert_overflow(self, store, project):
        with patch.object(Task.objects, 'create', side_effect=OverflowError('Python int too large')):
            with pytest.raises(StoreError) as exc_info:
                store.insert({'project': project, 'title': 'Nueva'})

        assert isinstance(exc_info.value.__cause__, OverflowError)

    def test_update_value_out_of_integer_range(self):
        """정수 컬럼 범위를 넘는 값은 StoreError 로 변환되고 기존 값 유지"""
        row = ClientEvolution.objects.create(month_text='Marzo', paid_clients=10, expenses=50000)

        with pytest.raises(StoreError):
            RecordStore(ClientEvolution).update(row.pk, {'income': 10 ** 20})

        row.refresh_from_db()
        assert row.income == 200000
