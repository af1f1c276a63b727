# app/domains/bil/__init__.py

"""
FastAPI 애플리케이션의 'bil' 도메인 패키지입니다.

'bil' 도메인은 작업지시서에 대한 송장(Invoice) 테이블을 정의합니다.
송장 생성은 청구 서비스의 책임이며, 작업지시서 조회 시 존재하면 함께 반환됩니다.

주요 서브모듈:
- `models.py`: invoices 테이블에 매핑되는 SQLModel 정의.
- `schemas.py`: 조회용 스키마.
"""

__title__ = "Repair Shop Billing Domain"
__description__ = "Invoices attached to work orders (read only here)."
__version__ = "0.1.0"
__all__ = []
