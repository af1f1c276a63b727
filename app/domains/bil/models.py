# app/domains/bil/models.py

"""
'bil' 도메인(청구)의 데이터베이스 ORM 모델을 정의하는 모듈입니다.
송장(Invoice)은 작업지시서당 최대 1건이며 청구 서비스가 생성합니다.
"""

from typing import Optional, TYPE_CHECKING
from datetime import datetime, UTC
from decimal import Decimal
from sqlmodel import Field, Relationship, SQLModel, Column
from sqlalchemy import ForeignKey, Numeric
from sqlalchemy.sql import func
from sqlalchemy.types import TIMESTAMP

from app.utils.ids import new_id

if TYPE_CHECKING:
    from app.domains.wo.models import WorkOrder


class Invoice(SQLModel, table=True):
    __tablename__ = "invoices"

    id: str = Field(default_factory=new_id, primary_key=True, max_length=36)
    number: str = Field(max_length=50, index=True, description="송장 번호")
    status: str = Field(default="DRAFT", max_length=20, description="송장 상태 (청구 서비스 정의)")
    total_amount: Decimal = Field(default=Decimal("0"), sa_column=Column(Numeric(12, 2), nullable=False, server_default="0"))
    work_order_id: str = Field(
        sa_column=Column(ForeignKey("work_orders.id", ondelete="CASCADE"), nullable=False, unique=True),
        description="대상 작업지시서 ID (FK, 1:1)"
    )
    company_id: str = Field(
        sa_column=Column(ForeignKey("companies.id", ondelete="CASCADE"), nullable=False, index=True),
        description="소속 회사 ID (FK)"
    )
    created_at: Optional[datetime] = Field(
        default_factory=lambda: datetime.now(UTC),
        sa_column=Column(TIMESTAMP(timezone=True), server_default=func.now()),
        description="레코드 생성 일시"
    )

    work_order: Optional["WorkOrder"] = Relationship(back_populates="invoice")
