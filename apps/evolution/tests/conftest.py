"""
evolution 앱 테스트용 공통 fixture
"""
from datetime import date

import pytest

from apps.evolution.models import ClientEvolution


@pytest.fixture
def march(db):
    """Marzo: 유료 10명, 지출 50,000 → 수입 200,000 / 순수입 150,000 / 1인 50,000"""
    return ClientEvolution.objects.create(
        month=date(2024, 3, 1),
        month_text='Marzo',
        active_clients=25,
        trial_clients=5,
        paid_clients=10,
        expenses=50000,
    )


@pytest.fixture
def april(db):
    return ClientEvolution.objects.create(
        month=date(2024, 4, 1),
        month_text='Abril',
        paid_clients=12,
        expenses=60000,
    )
