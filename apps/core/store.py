"""
테이블 단위 레코드 저장소

뷰는 ORM 을 직접 호출하지 않고 RecordStore 를 통해서만 데이터를 읽고 씁니다.

    store = RecordStore(Task)
    store.select(filters={'status': 'pending'}, order='-created_at')
    store.insert({'title': '...'})
    store.update(pk, {'status': 'completed'})   # 지정한 컬럼만 1쿼리로 갱신
    store.delete(pk)

규칙:
    - DB 오류는 모두 StoreError 로 변환 (원인 예외는 __cause__ 에 보존)
    - 정수 컬럼 범위를 넘는 값(OverflowError)도 insert/update 에서 StoreError 로 변환
    - update 는 전달된 컬럼만 수정하고 갱신된 레코드를 다시 읽어서 반환
    - 실패 시 부분 반영 없음 (각 호출은 transaction.atomic 안에서 실행)
"""
import logging

from django.core.exceptions import FieldDoesNotExist
from django.db import DatabaseError, transaction
from django.utils import timezone

from .exceptions import StoreError

logger = logging.getLogger(__name__)


class RecordStore:
    """모델 하나(= 테이블 하나)에 대한 select/insert/update/delete 클라이언트"""

    def __init__(self, model):
        self.model = model

    @property
    def table(self):
        return self.model._meta.db_table

    def _has_field(self, name):
        try:
            self.model._meta.get_field(name)
        except FieldDoesNotExist:
            return False
        return True

    def select(self, filters=None, order=None):
        """
        레코드 목록 조회

        Args:
            filters: ORM filter 인자 dict (선택)
            order: 정렬 필드 문자열 또는 리스트 (선택)
        """
        if isinstance(order, str):
            order = [order]

        try:
            qs = self.model.objects.all()
            if filters:
                qs = qs.filter(**filters)
            if order:
                qs = qs.order_by(*order)
            return list(qs)
        except DatabaseError as e:
            logger.error(f"[{self.table}] 조회 실패: filters={filters}, error={e}")
            raise StoreError(f"{self.table} 조회 중 오류가 발생했습니다.", table=self.table) from e

    def exists(self, filters):
        try:
            return self.model.objects.filter(**filters).exists()
        except DatabaseError as e:
            logger.error(f"[{self.table}] 존재 확인 실패: filters={filters}, error={e}")
            raise StoreError(f"{self.table} 조회 중 오류가 발생했습니다.", table=self.table) from e

    def get(self, pk):
        try:
            return self.model.objects.get(pk=pk)
        except self.model.DoesNotExist as e:
            raise StoreError(f"{self.table} 레코드를 찾을 수 없습니다. (ID: {pk})", table=self.table) from e
        except DatabaseError as e:
            logger.error(f"[{self.table}] 단건 조회 실패: id={pk}, error={e}")
            raise StoreError(f"{self.table} 조회 중 오류가 발생했습니다.", table=self.table) from e

    def insert(self, record):
        """레코드 생성 후 생성된 인스턴스 반환"""
        try:
            with transaction.atomic():
                instance = self.model.objects.create(**record)
        except (DatabaseError, OverflowError) as e:
            logger.error(f"[{self.table}] 생성 실패: error={e}")
            raise StoreError(f"{self.table} 생성 중 오류가 발생했습니다.", table=self.table) from e

        logger.info(f"[{self.table}] 생성: ID {instance.pk}")
        return instance

    def update(self, pk, partial):
        """
        지정한 컬럼만 갱신 (같은 행의 다른 컬럼은 건드리지 않음)

        Returns:
            갱신 후 다시 읽은 레코드
        """
        values = dict(partial)
        if self._has_field('updated_at'):
            values['updated_at'] = timezone.now()

        try:
            with transaction.atomic():
                updated = self.model.objects.filter(pk=pk).update(**values)
        except (DatabaseError, OverflowError) as e:
            logger.error(f"[{self.table}] 수정 실패: id={pk}, fields={list(partial)}, error={e}")
            raise StoreError(f"{self.table} 수정 중 오류가 발생했습니다.", table=self.table) from e

        if updated == 0:
            raise StoreError(f"{self.table} 레코드를 찾을 수 없습니다. (ID: {pk})", table=self.table)

        logger.info(f"[{self.table}] 수정: ID {pk} ({', '.join(partial)})")
        return self.get(pk)

    def delete(self, pk):
        try:
            with transaction.atomic():
                deleted, _ = self.model.objects.filter(pk=pk).delete()
        except DatabaseError as e:
            logger.error(f"[{self.table}] 삭제 실패: id={pk}, error={e}")
            raise StoreError(f"{self.table} 삭제 중 오류가 발생했습니다.", table=self.table) from e

        if deleted == 0:
            raise StoreError(f"{self.table} 레코드를 찾을 수 없습니다. (ID: {pk})", table=self.table)

        logger.info(f"[{self.table}] 삭제: ID {pk}")
