"""
고정비 (CostEntry)

월 집계 시 각 항목은 시작월(start_date 의 연-월) 한 달에만 반영됩니다.
"""
from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models
from django.utils import timezone

from apps.core.models import TimeStampedModel


class Frequency(models.TextChoices):
    MONTHLY = 'monthly', 'Mensual'
    ANNUAL = 'annual', 'Anual'


class CostEntry(TimeStampedModel):
    """고정비 항목"""

    description = models.CharField(max_length=200)
    amount = models.DecimalField(
        max_digits=14,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.01'))]
    )
    frequency = models.CharField(max_length=10, choices=Frequency.choices, default=Frequency.MONTHLY)
    start_date = models.DateField(default=timezone.localdate, db_index=True)

    class Meta:
        db_table = 'costs'
        ordering = ['start_date']
        constraints = [
            models.CheckConstraint(
                condition=models.Q(amount__gt=0),
                name='cost_amount_positive'
            ),
        ]

    def __str__(self):
        return f"{self.description} ({self.get_frequency_display()})"
