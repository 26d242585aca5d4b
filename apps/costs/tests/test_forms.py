"""
고정비 폼 테스트
"""
import pytest

from apps.costs.forms import CostEntryForm


def data(**kwargs):
    values = {'description': 'Hosting', 'amount': '100', 'frequency': 'monthly', 'start_date': '2024-03-01'}
    values.update(kwargs)
    return values


@pytest.mark.django_db
class TestCostEntryForm:

    def test_valid(self):
        form = CostEntryForm(data=data(description='  Hosting  '))
        assert form.is_valid(), form.errors
        assert form.cleaned_data['description'] == 'Hosting'

    @pytest.mark.parametrize("amount", ['0', '-10'])
    def test_non_positive_amount(self, amount):
        form = CostEntryForm(data=data(amount=amount))
        assert not form.is_valid()
        assert form.errors['amount'] == ['El monto debe ser mayor a 0.']

    def test_blank_description(self):
        form = CostEntryForm(data=data(description='   '))
        assert not form.is_valid()
        assert form.errors['description'] == ['Por favor, ingresa una descripción.']

    def test_unknown_frequency(self):
        assert not CostEntryForm(data=data(frequency='weekly')).is_valid()
