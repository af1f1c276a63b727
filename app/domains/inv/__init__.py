# app/domains/inv/__init__.py

"""
FastAPI 애플리케이션의 'inv' 도메인 패키지입니다.

'inv' 도메인은 재고 품목(InventoryItem) 테이블을 정의합니다.
작업지시서 부품은 재고 품목을 참조만 하며, 재고 수량 차감은 이 서비스에서 수행하지 않습니다.

주요 서브모듈:
- `models.py`: inventory_items 테이블에 매핑되는 SQLModel 정의.
- `schemas.py`: 조회용 스키마.
"""

__title__ = "Repair Shop Inventory Domain"
__description__ = "Inventory items referenced by work order parts."
__version__ = "0.1.0"
__all__ = []
