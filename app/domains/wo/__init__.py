# app/domains/wo/__init__.py

"""
FastAPI 애플리케이션의 'wo' 도메인 패키지입니다.

'wo' 도메인은 정비소의 작업지시서(WorkOrder)와 그 하위 작업 항목(Task),
사용 부품(WorkOrderPart)의 수명 주기를 관리합니다.

주요 서브모듈:
- `models.py`: 작업지시서/작업 항목/부품 테이블에 매핑되는 SQLModel 정의.
- `schemas.py`: 요청 검증 및 응답 직렬화를 위한 Pydantic 모델 (camelCase JSON).
- `crud.py`: 테넌트 범위가 지정된 비동기 데이터 접근 로직.
- `services.py`: 상태 전이, 수량 검증 등의 비즈니스 규칙.
- `routers.py`: `/api/v1/work-orders` 엔드포인트 정의.
"""

__title__ = "Work Order Domain"
__description__ = "Manages repair work orders, their tasks and used parts."
__version__ = "0.1.0"
__all__ = []
