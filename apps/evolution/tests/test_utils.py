"""
고객 추이 계산 테스트
"""
from io import BytesIO
from types import SimpleNamespace

import openpyxl
import pytest

from apps.evolution.utils import (
    calculate_client_figures,
    derived_changes,
    export_client_evolution_to_excel,
    recalculate_from_income,
)


class TestCalculateClientFigures:

    @pytest.mark.parametrize("paid,expenses,income,net,profit", [
        (0, 0, 0, 0, 0),
        (10, 50000, 200000, 150000, 50000),
        (5, 0, 100000, 100000, 33333),
        (1, 19999, 20000, 1, 0),
        (1, 18500, 20000, 1500, 500),
        (2, 39998, 40000, 2, 1),
        # 지출이 수입보다 큰 경우 (음수 허용)
        (1, 50000, 20000, -30000, -10000),
    ])
    def test_formulas(self, paid, expenses, income, net, profit):
        assert calculate_client_figures(paid, expenses) == {
            'income': income,
            'net_income': net,
            'profit_per_partner': profit,
        }

    def test_rounds_half_up(self):
        # 100,001 / 3 = 33,333.67 → 33,334
        assert recalculate_from_income(100001, 0)['profit_per_partner'] == 33334
        # 0.5 단위는 올림
        assert calculate_client_figures(0.5, 0)['income'] == 10000

    def test_negative_half_rounds_up(self):
        """음수 .5 도 양의 방향으로 올림 (-0.5 → 0)"""
        assert calculate_client_figures(0, '0.5')['net_income'] == 0
        assert recalculate_from_income(0, '1.5')['net_income'] == -1

    def test_none_treated_as_zero(self):
        assert calculate_client_figures(None, None)['income'] == 0
        assert recalculate_from_income(None, 100) == {'net_income': -100, 'profit_per_partner': -33}


class TestDerivedChanges:

    def row(self, **kwargs):
        values = {'income': 200000, 'expenses': 50000, 'paid_clients': 10}
        values.update(kwargs)
        return SimpleNamespace(**values)

    def test_paid_clients_cascades_everything(self):
        changes = derived_changes(self.row(), 'paid_clients', 12)

        assert changes == {
            'paid_clients': 12,
            'income': 240000,
            'net_income': 190000,
            'profit_per_partner': 63333,
        }

    def test_expenses_uses_stored_income(self):
        # 저장된 income 이 공식과 다르더라도 그대로 사용
        changes = derived_changes(self.row(income=210000), 'expenses', 60000)

        assert changes == {
            'expenses': 60000,
            'net_income': 150000,
            'profit_per_partner': 50000,
        }
        assert 'income' not in changes
        assert 'paid_clients' not in changes

    @pytest.mark.parametrize("field", ['active_clients', 'trial_clients'])
    def test_other_counts_only_themselves(self, field):
        assert derived_changes(self.row(), field, 7) == {field: 7}

    def test_month_text(self):
        assert derived_changes(self.row(), 'month_text', 'Abril') == {'month_text': 'Abril'}

    def test_numeric_value_rounded(self):
        assert derived_changes(self.row(), 'active_clients', '7.5') == {'active_clients': 8}

    def test_derived_field_not_editable(self):
        with pytest.raises(ValueError):
            derived_changes(self.row(), 'income', 1)


@pytest.mark.django_db
class TestExport:

    def test_rows_in_order(self, march, april):
        output = export_client_evolution_to_excel([march, april])

        ws = openpyxl.load_workbook(BytesIO(output.read())).active
        rows = list(ws.iter_rows(values_only=True))
        assert rows[0][0] == 'Mes'
        assert rows[1][:2] == ('Marzo', '2024-03-01')
        assert rows[1][5] == 200000
        assert rows[2][0] == 'Abril'
