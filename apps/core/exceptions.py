"""
대시보드 공통 예외

입력값 검증은 Django ValidationError(폼 단계)를 그대로 사용하고,
여기에는 저장소 계층과 월별 데이터 중복 예외만 정의합니다.

- StoreError: 저장소(DB) 호출 실패 (네트워크, 제약조건 위반, 레코드 없음)
- DuplicateMonth: 같은 month_text 를 가진 고객 추이 행이 이미 존재
"""


class StoreError(Exception):
    """저장소 호출 실패"""

    def __init__(self, message, table=None):
        super().__init__(message)
        self.table = table


class DuplicateMonth(Exception):
    """이미 등록된 월 (month_text 는 대소문자 구분 정확 일치)"""

    def __init__(self, month_text):
        super().__init__(f"이미 등록된 월입니다: {month_text}")
        self.month_text = month_text
