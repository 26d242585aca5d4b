"""
marketing 앱 테스트용 공통 fixture
"""
from datetime import date
from decimal import Decimal

import pytest

from apps.marketing.models import Campaign, Lead


@pytest.fixture
def campaign(db):
    return Campaign.objects.create(
        name='Facebook Marzo',
        source='facebook',
        start_date=date(2024, 3, 1),
        end_date=date(2024, 3, 31),
        cost=Decimal('50000.00'),
        contacto_inicial=100,
        info_enviada=50,
        contacto_personal=20,
        registrado=10,
        suscrito=5,
    )


@pytest.fixture
def lead(campaign):
    return Lead.objects.create(campaign=campaign, name='Juan Pérez')
