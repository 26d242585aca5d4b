"""
Dashboard 앱은 자체 모델을 가지지 않습니다.
각 앱의 모델(Task, Campaign, ClientEvolution, CostEntry)을 읽어 요약만 보여줍니다.

주요 기능:
- 작업 상태 요약
- 캠페인 전체 비용/매출/ROI
- 최근 월 고객 추이
- 월별 고정비 합계
"""
