# =============================================================================
# evolution/models.py - 월별 고객 추이
# =============================================================================

"""
월별 고객 추이 (ClientEvolution)

입력 필드: month_text, active_clients, trial_clients, paid_clients, expenses
계산 필드: income, net_income, profit_per_partner

계산 필드는 항상 같은 행의 paid_clients / expenses 로부터 계산한 값과 같아야 합니다.
save() 는 매번 전체 공식을 다시 적용하고, 서비스의 부분 수정은
입력 필드와 그 하위 계산 필드를 한 번의 UPDATE 로 함께 기록합니다.
"""
from django.db import models
from django.utils import timezone

from apps.core.models import TimeStampedModel
from apps.core.utils import MONTH_NAMES
from .utils import calculate_client_figures

MONTH_CHOICES = [(name, name) for name in MONTH_NAMES]


class ClientEvolution(TimeStampedModel):
    """월별 고객 수 / 수입 / 파트너별 이익"""

    month = models.DateField(default=timezone.localdate)
    # 월 이름 (대소문자 구분, 행마다 고유)
    month_text = models.CharField(max_length=20, choices=MONTH_CHOICES, unique=True)

    active_clients = models.IntegerField(default=0)
    trial_clients = models.IntegerField(default=0)
    paid_clients = models.IntegerField(default=0)
    expenses = models.IntegerField(default=0)

    # 계산 필드
    income = models.IntegerField(default=0, editable=False)
    net_income = models.IntegerField(default=0, editable=False)
    profit_per_partner = models.IntegerField(default=0, editable=False)

    class Meta:
        db_table = 'client_evolution'
        ordering = ['month']

    def __str__(self):
        return self.month_text

    def save(self, *args, **kwargs):
        # 어떤 경로로 저장하든 계산 필드를 다시 맞춤
        for field, value in calculate_client_figures(self.paid_clients, self.expenses).items():
            setattr(self, field, value)
        super().save(*args, **kwargs)
