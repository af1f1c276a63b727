# app/domains/inv/schemas.py

"""
'inv' 도메인(재고)의 조회용 DTO 를 정의하는 모듈입니다.
"""

from typing import Optional
from decimal import Decimal

from app.domains.shared.schemas import CamelModel


class InventoryItemRead(CamelModel):
    id: str
    name: str
    sku: Optional[str] = None
    unit_price: Decimal
    quantity: int
