"""
캠페인 지표 계산

- calculate_campaign_metrics(): 매출 / 이익 / ROI
- build_funnel(): 단계별 카운터와 전 단계 대비 전환율
- count_leads_by_stage(): 리드 상태별 건수 (카운터와 비교 표시용)
- summarize_campaigns(): 전체 캠페인 합계 (대시보드)

모든 함수는 DB 를 조회하지 않습니다.
"""
from decimal import Decimal, ROUND_HALF_UP

from apps.core.utils import SUBSCRIPTION_PRICE, to_decimal
from .models import FunnelStage

PERCENT = Decimal('0.01')


def _roi(profit, cost):
    """ROI(%) = 이익 / 비용 × 100, 비용이 0 이하이면 0"""
    if cost > 0:
        return (profit / cost * 100).quantize(PERCENT, rounding=ROUND_HALF_UP)
    return Decimal('0')


def _rate(count, previous):
    if not previous:
        return Decimal('0')
    return (Decimal(count) * 100 / Decimal(previous)).quantize(PERCENT, rounding=ROUND_HALF_UP)


def calculate_campaign_metrics(campaign):
    """
    캠페인 매출/이익/ROI

    매출 = 구독(suscrito) 수 × 구독 단가
    이익 = 매출 - 비용
    ROI = 이익 / 비용 × 100 (비용 0 → 0)

    Returns:
        {'revenue': Decimal, 'profit': Decimal, 'roi': Decimal}
    """
    cost = to_decimal(campaign.cost)
    revenue = to_decimal((campaign.suscrito or 0) * SUBSCRIPTION_PRICE)
    profit = revenue - cost

    return {
        'revenue': revenue,
        'profit': profit,
        'roi': _roi(profit, cost),
    }


def build_funnel(campaign):
    """
    퍼널 단계 목록 (퍼널 순서)

    전환율은 바로 앞 단계 대비 비율, 첫 단계와 앞 단계가 0 인 경우는 0
    """
    funnel = []
    previous = None
    for stage in FunnelStage:
        count = campaign.stage_count(stage.value)
        funnel.append({
            'stage': stage.value,
            'label': stage.label,
            'count': count,
            'conversion': _rate(count, previous) if previous is not None else Decimal('0'),
        })
        previous = count
    return funnel


def count_leads_by_stage(leads):
    """리드 상태별 건수 {stage: count} (모든 단계 포함)"""
    counts = {stage.value: 0 for stage in FunnelStage}
    for lead in leads:
        if lead.status in counts:
            counts[lead.status] += 1
    return counts


def summarize_campaigns(campaigns):
    """전체 캠페인 비용/매출/이익 합계와 전체 ROI"""
    total_cost = Decimal('0')
    total_revenue = Decimal('0')
    subscribers = 0

    for campaign in campaigns:
        metrics = calculate_campaign_metrics(campaign)
        total_cost += to_decimal(campaign.cost)
        total_revenue += metrics['revenue']
        subscribers += campaign.suscrito or 0

    total_profit = total_revenue - total_cost
    return {
        'total_cost': total_cost,
        'total_revenue': total_revenue,
        'total_profit': total_profit,
        'subscribers': subscribers,
        'roi': _roi(total_profit, total_cost),
    }
