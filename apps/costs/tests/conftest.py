"""
costs 앱 테스트용 공통 fixture
"""
from datetime import date
from decimal import Decimal

import pytest

from apps.costs.models import CostEntry


@pytest.fixture
def monthly_cost(db):
    return CostEntry.objects.create(
        description='Hosting',
        amount=Decimal('5000.00'),
        frequency='monthly',
        start_date=date(2024, 3, 10),
    )


@pytest.fixture
def annual_cost(db):
    return CostEntry.objects.create(
        description='Dominio',
        amount=Decimal('1200.00'),
        frequency='annual',
        start_date=date(2024, 3, 1),
    )
