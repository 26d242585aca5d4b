# =============================================================================
# marketing/models.py - 마케팅 캠페인 및 리드
# =============================================================================

"""
마케팅 캠페인 / 리드

Campaign 의 퍼널 카운터 5개(contacto_inicial ~ suscrito)는 사용자가 직접 입력하는
집계값입니다. Lead 의 상태와는 동기화하지 않습니다. (리드 상태를 바꿔도 카운터는
그대로, 카운터를 바꿔도 리드는 그대로)
"""
from django.core.validators import MinValueValidator
from django.db import models

from apps.core.models import TimeStampedModel


class CampaignSource(models.TextChoices):
    FACEBOOK = 'facebook', 'Facebook'
    INSTAGRAM = 'instagram', 'Instagram'
    MERCADOLIBRE = 'mercadolibre', 'MercadoLibre'
    GRATUITA = 'gratuita', 'Gratuita'


class FunnelStage(models.TextChoices):
    """퍼널 단계 (정의 순서 = 퍼널 순서)"""
    CONTACTO_INICIAL = 'contacto_inicial', 'Contacto inicial'
    INFO_ENVIADA = 'info_enviada', 'Info enviada'
    CONTACTO_PERSONAL = 'contacto_personal', 'Contacto personal'
    REGISTRADO = 'registrado', 'Registrado'
    SUSCRITO = 'suscrito', 'Suscrito'


class Campaign(TimeStampedModel):
    """마케팅 캠페인"""

    name = models.CharField(max_length=200)
    source = models.CharField(
        max_length=20,
        choices=CampaignSource.choices,
        default=CampaignSource.FACEBOOK
    )
    start_date = models.DateField()
    end_date = models.DateField()
    cost = models.DecimalField(
        max_digits=14,
        decimal_places=2,
        default=0,
        validators=[MinValueValidator(0)]
    )

    # 퍼널 카운터 (단계 간 대소 관계는 강제하지 않음)
    contacto_inicial = models.PositiveIntegerField(default=0)
    info_enviada = models.PositiveIntegerField(default=0)
    contacto_personal = models.PositiveIntegerField(default=0)
    registrado = models.PositiveIntegerField(default=0)
    suscrito = models.PositiveIntegerField(default=0)

    class Meta:
        db_table = 'campaigns'
        ordering = ['-created_at']
        constraints = [
            models.CheckConstraint(
                condition=models.Q(cost__gte=0),
                name='campaign_cost_non_negative'
            ),
        ]

    def __str__(self):
        return f"{self.name} ({self.get_source_display()})"

    def stage_count(self, stage):
        return getattr(self, stage, 0) or 0


class Lead(TimeStampedModel):
    """캠페인 리드 (campaign 은 약한 참조)"""

    campaign = models.ForeignKey(
        Campaign,
        on_delete=models.DO_NOTHING,
        db_constraint=False,
        related_name='leads'
    )
    name = models.CharField(max_length=200)
    status = models.CharField(
        max_length=20,
        choices=FunnelStage.choices,
        default=FunnelStage.CONTACTO_INICIAL
    )

    class Meta:
        db_table = 'leads'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['campaign', 'status'], name='leads_campaign_status_idx'),
        ]

    def __str__(self):
        return self.name
