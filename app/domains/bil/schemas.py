# app/domains/bil/schemas.py

"""
'bil' 도메인(청구)의 조회용 DTO 를 정의하는 모듈입니다.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from app.domains.shared.schemas import CamelModel


class InvoiceRead(CamelModel):
    id: str
    number: str
    status: str
    total_amount: Decimal
    work_order_id: str
    created_at: Optional[datetime] = None
