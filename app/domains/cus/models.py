# app/domains/cus/models.py

"""
'cus' 도메인(고객 및 차량)의 데이터베이스 ORM 모델을 정의하는 모듈입니다.
고객/차량 레코드의 CRUD 는 외부 협력 서비스의 책임이며,
이 모듈은 작업지시서가 참조하는 테이블 구조만 정의합니다.
"""

from typing import Optional, List, TYPE_CHECKING
from datetime import datetime, UTC
from sqlmodel import Field, Relationship, SQLModel, Column
from sqlalchemy import ForeignKey
from sqlalchemy.sql import func
from sqlalchemy.types import TIMESTAMP

from app.utils.ids import new_id

if TYPE_CHECKING:
    from app.domains.wo.models import WorkOrder


# =============================================================================
# 1. customers 테이블 모델
# =============================================================================
class Customer(SQLModel, table=True):
    __tablename__ = "customers"

    id: str = Field(default_factory=new_id, primary_key=True, max_length=36)
    first_name: str = Field(max_length=100)
    last_name: str = Field(max_length=100)
    email: Optional[str] = Field(default=None, max_length=255)
    phone: Optional[str] = Field(default=None, max_length=50)
    company_id: str = Field(
        sa_column=Column(ForeignKey("companies.id", ondelete="CASCADE"), nullable=False, index=True),
        description="소속 회사 ID (FK)"
    )
    created_at: Optional[datetime] = Field(
        default_factory=lambda: datetime.now(UTC),
        sa_column=Column(TIMESTAMP(timezone=True), server_default=func.now()),
        description="레코드 생성 일시"
    )

    vehicles: List["Vehicle"] = Relationship(back_populates="customer")
    work_orders: List["WorkOrder"] = Relationship(back_populates="customer")


# =============================================================================
# 2. vehicles 테이블 모델
# =============================================================================
class Vehicle(SQLModel, table=True):
    __tablename__ = "vehicles"

    id: str = Field(default_factory=new_id, primary_key=True, max_length=36)
    make: str = Field(max_length=100, description="제조사")
    model: str = Field(max_length=100, description="모델명")
    year: Optional[int] = Field(default=None, description="연식")
    vin: Optional[str] = Field(default=None, max_length=17, description="차대번호")
    license_plate: Optional[str] = Field(default=None, max_length=16, index=True, description="번호판")
    customer_id: str = Field(
        sa_column=Column(ForeignKey("customers.id", ondelete="CASCADE"), nullable=False, index=True),
        description="차량 소유 고객 ID (FK)"
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

    customer: Optional["Customer"] = Relationship(back_populates="vehicles")
    work_orders: List["WorkOrder"] = Relationship(back_populates="vehicle")
