# app/domains/cus/__init__.py

"""
FastAPI 애플리케이션의 'cus' 도메인 패키지입니다.

'cus' 도메인은 고객(Customer)과 고객 소유 차량(Vehicle) 테이블을 정의합니다.
작업지시서는 고객/차량을 ID 로 참조하고 응답 시 조인하여 반환합니다.

주요 서브모듈:
- `models.py`: customers, vehicles 테이블에 매핑되는 SQLModel 정의.
- `schemas.py`: 조회용 스키마.
"""

__title__ = "Repair Shop Customer Domain"
__description__ = "Customers and their vehicles, referenced by work orders."
__version__ = "0.1.0"
__all__ = []
