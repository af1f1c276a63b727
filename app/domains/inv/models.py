# app/domains/inv/models.py

"""
'inv' 도메인(재고)의 데이터베이스 ORM 모델을 정의하는 모듈입니다.

재고 품목(InventoryItem)은 작업지시서 부품(WorkOrderPart)이 ID 로 참조할 뿐,
재고 수량 차감 등 재고 관리 로직은 재고 서비스의 책임입니다.
"""

from typing import Optional, List, TYPE_CHECKING
from datetime import datetime, UTC
from decimal import Decimal
from sqlmodel import Field, Relationship, SQLModel, Column
from sqlalchemy import ForeignKey, Numeric
from sqlalchemy.sql import func
from sqlalchemy.types import TIMESTAMP

from app.utils.ids import new_id

# 순환 임포트 방지를 위한 TYPE_CHECKING
if TYPE_CHECKING:
    from app.domains.wo.models import WorkOrderPart


# =============================================================================
# inventory_items 테이블 모델
# =============================================================================
class InventoryItem(SQLModel, table=True):
    __tablename__ = "inventory_items"

    id: str = Field(default_factory=new_id, primary_key=True, max_length=36)
    name: str = Field(max_length=100, description="품목명")
    sku: Optional[str] = Field(default=None, max_length=50, index=True, description="재고 관리 코드")
    unit_price: Decimal = Field(default=Decimal("0"), sa_column=Column(Numeric(12, 2), nullable=False, server_default="0"))
    quantity: int = Field(default=0, description="현재 재고 수량 (재고 서비스가 관리)")
    company_id: str = Field(
        sa_column=Column(ForeignKey("companies.id", ondelete="CASCADE"), nullable=False, index=True),
        description="소속 회사 ID (FK)"
    )
    created_at: Optional[datetime] = Field(
        default_factory=lambda: datetime.now(UTC),
        sa_column=Column(TIMESTAMP(timezone=True), server_default=func.now()),
        description="레코드 생성 일시"
    )
    updated_at: Optional[datetime] = Field(
        default_factory=lambda: datetime.now(UTC),
        sa_column=Column(TIMESTAMP(timezone=True), server_default=func.now(), onupdate=func.now()),
        description="레코드 마지막 업데이트 일시"
    )

    work_order_parts: List["WorkOrderPart"] = Relationship(back_populates="inventory_item")
