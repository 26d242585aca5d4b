"""
고객 추이 생성/수정 서비스

뷰는 이 서비스를 통해서만 ClientEvolution 을 기록합니다.

    service = ClientEvolutionService(RecordStore(ClientEvolution))
    service.create({'month_text': 'Marzo', 'paid_clients': 10, ...})
    service.update_field(pk, 'expenses', 50000)
"""
import logging

from django.db import IntegrityError
from django.utils import timezone

from apps.core.exceptions import DuplicateMonth, StoreError
from apps.core.store import RecordStore
from apps.core.utils import round_amount
from .models import ClientEvolution
from .utils import NUMERIC_FIELDS, calculate_client_figures, derived_changes

logger = logging.getLogger(__name__)


def _is_unique_violation(error):
    return isinstance(error.__cause__, IntegrityError)


class ClientEvolutionService:

    def __init__(self, store=None):
        self.store = store or RecordStore(ClientEvolution)

    def list(self):
        """전체 행 (month 오름차순)"""
        return self.store.select(order='month')

    def create(self, data):
        """
        새 월 행 생성

        숫자 입력은 정수로 반올림하고 계산 필드를 함께 기록합니다.

        Raises:
            DuplicateMonth: 같은 month_text 행이 이미 있음 (기존 행은 변경 없음)
            StoreError: 저장소 오류
        """
        month_text = data['month_text']
        record = {
            'month': data.get('month') or timezone.localdate(),
            'month_text': month_text,
        }
        for field in NUMERIC_FIELDS:
            record[field] = round_amount(data.get(field))

        if self.store.exists({'month_text': month_text}):
            logger.warning(f"고객 추이 중복 월: {month_text}")
            raise DuplicateMonth(month_text)

        record.update(calculate_client_figures(record['paid_clients'], record['expenses']))

        try:
            row = self.store.insert(record)
        except StoreError as e:
            if _is_unique_violation(e):
                raise DuplicateMonth(month_text) from e
            raise

        logger.info(
            f"고객 추이 생성: {month_text} "
            f"(유료 {row.paid_clients}명, 순수입 {row.net_income})"
        )
        return self.store.get(row.pk)

    def update_field(self, pk, field, value):
        """
        필드 1개 수정 (입력값 + 하위 계산 필드만 한 번에 기록)

        Returns:
            수정 후 다시 읽은 행

        Raises:
            DuplicateMonth: month_text 를 다른 행이 쓰는 월로 변경
            StoreError: 저장소 오류 또는 행 없음
        """
        row = self.store.get(pk)
        changes = derived_changes(row, field, value)

        if field == 'month_text' and value != row.month_text:
            if self.store.exists({'month_text': value}):
                logger.warning(f"고객 추이 중복 월 변경 시도: {row.month_text} → {value}")
                raise DuplicateMonth(value)

        try:
            return self.store.update(pk, changes)
        except StoreError as e:
            if field == 'month_text' and _is_unique_violation(e):
                raise DuplicateMonth(value) from e
            raise
