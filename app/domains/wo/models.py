# app/domains/wo/models.py

"""
'wo' 도메인(작업지시서)의 데이터베이스 ORM 모델을 정의하는 모듈입니다.

- WorkOrder     : 수리 작업 1건. 회사(테넌트)가 소유하며 고객/차량/정비사를 참조합니다.
- Task          : 작업지시서에 속한 작업 항목. 부모 작업지시서가 독점 소유합니다.
- WorkOrderPart : 작업지시서에 사용된 재고 품목과 수량. 재고 품목은 참조만 합니다.

company_id 와 고객/차량/정비사 참조는 생성 후 변경되지 않습니다.
"""

from typing import Optional, List, TYPE_CHECKING
from datetime import datetime, UTC
from enum import Enum
from sqlmodel import Field, Relationship, SQLModel, Column
from sqlalchemy import CheckConstraint, ForeignKey
from sqlalchemy.sql import func
from sqlalchemy.types import TIMESTAMP

from app.utils.ids import new_id

# 순환 임포트 방지를 위한 TYPE_CHECKING
if TYPE_CHECKING:
    from app.domains.bil.models import Invoice
    from app.domains.cus.models import Customer, Vehicle
    from app.domains.inv.models import InventoryItem
    from app.domains.usr.models import User


# =============================================================================
# 작업지시서 상태
# =============================================================================
class WorkOrderStatus(str, Enum):
    """
    작업지시서 상태값입니다. 생성 시 PENDING 이며,
    네 상태 사이의 모든 전이가 허용됩니다 (COMPLETED/CANCELLED 도 종료 상태로 취급하지 않음).
    """
    PENDING = "PENDING"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"


# =============================================================================
# 1. work_orders 테이블 모델
# =============================================================================
class WorkOrderBase(SQLModel):
    description: str = Field(description="작업 내용")
    status: WorkOrderStatus = Field(default=WorkOrderStatus.PENDING, index=True, description="작업 상태")


class WorkOrder(WorkOrderBase, table=True):
    __tablename__ = "work_orders"

    id: str = Field(default_factory=new_id, primary_key=True, max_length=36)
    company_id: str = Field(
        sa_column=Column(ForeignKey("companies.id", ondelete="CASCADE"), nullable=False, index=True),
        description="소유 회사 ID (FK, 테넌트)"
    )
    customer_id: str = Field(
        sa_column=Column(ForeignKey("customers.id", ondelete="RESTRICT"), nullable=False, index=True),
        description="고객 ID (FK)"
    )
    vehicle_id: str = Field(
        sa_column=Column(ForeignKey("vehicles.id", ondelete="RESTRICT"), nullable=False, index=True),
        description="차량 ID (FK)"
    )
    technician_id: str = Field(
        sa_column=Column(ForeignKey("users.id", ondelete="RESTRICT"), nullable=False, index=True),
        description="담당 정비사 사용자 ID (FK)"
    )
    created_at: Optional[datetime] = Field(
        default_factory=lambda: datetime.now(UTC),
        sa_column=Column(TIMESTAMP(timezone=True), server_default=func.now(), index=True),
        description="레코드 생성 일시"
    )
    updated_at: Optional[datetime] = Field(
        default_factory=lambda: datetime.now(UTC),
        sa_column=Column(TIMESTAMP(timezone=True), server_default=func.now(), onupdate=func.now()),
        description="레코드 마지막 업데이트 일시"
    )

    # 관계 정의: 작업 항목과 부품은 작업지시서에 종속됩니다.
    customer: Optional["Customer"] = Relationship(back_populates="work_orders")
    vehicle: Optional["Vehicle"] = Relationship(back_populates="work_orders")
    technician: Optional["User"] = Relationship(back_populates="assigned_work_orders")
    tasks: List["Task"] = Relationship(
        back_populates="work_order",
        sa_relationship_kwargs={
            "cascade": "all, delete-orphan",
            "order_by": "[Task.created_at, Task.id]",
        },
    )
    parts: List["WorkOrderPart"] = Relationship(
        back_populates="work_order",
        sa_relationship_kwargs={
            "cascade": "all, delete-orphan",
            "order_by": "[WorkOrderPart.created_at, WorkOrderPart.id]",
        },
    )
    invoice: Optional["Invoice"] = Relationship(
        back_populates="work_order",
        sa_relationship_kwargs={"uselist": False},
    )


# =============================================================================
# 2. tasks 테이블 모델
# =============================================================================
class TaskBase(SQLModel):
    title: str = Field(max_length=200, description="작업 항목명")
    description: str = Field(description="작업 항목 설명")


class Task(TaskBase, table=True):
    __tablename__ = "tasks"

    id: str = Field(default_factory=new_id, primary_key=True, max_length=36)
    work_order_id: Optional[str] = Field(
        default=None,
        sa_column=Column(ForeignKey("work_orders.id", ondelete="CASCADE"), nullable=False, index=True),
        description="소속 작업지시서 ID (FK)"
    )
    created_at: Optional[datetime] = Field(
        default_factory=lambda: datetime.now(UTC),
        sa_column=Column(TIMESTAMP(timezone=True), server_default=func.now()),
        description="레코드 생성 일시"
    )

    work_order: Optional["WorkOrder"] = Relationship(back_populates="tasks")


# =============================================================================
# 3. work_order_parts 테이블 모델
# =============================================================================
class WorkOrderPart(SQLModel, table=True):
    __tablename__ = "work_order_parts"
    # 수량은 스키마 검증과 별개로 DB 에서도 양수를 강제합니다.
    __table_args__ = (CheckConstraint("quantity > 0", name="ck_work_order_parts_quantity_positive"),)

    id: str = Field(default_factory=new_id, primary_key=True, max_length=36)
    inventory_item_id: str = Field(
        sa_column=Column(ForeignKey("inventory_items.id", ondelete="RESTRICT"), nullable=False, index=True),
        description="재고 품목 ID (FK, 참조 전용)"
    )
    quantity: int = Field(description="사용 수량 (> 0)")
    work_order_id: Optional[str] = Field(
        default=None,
        sa_column=Column(ForeignKey("work_orders.id", ondelete="CASCADE"), nullable=False, index=True),
        description="소속 작업지시서 ID (FK)"
    )
    created_at: Optional[datetime] = Field(
        default_factory=lambda: datetime.now(UTC),
        sa_column=Column(TIMESTAMP(timezone=True), server_default=func.now()),
        description="레코드 생성 일시"
    )

    work_order: Optional["WorkOrder"] = Relationship(back_populates="parts")
    inventory_item: Optional["InventoryItem"] = Relationship(back_populates="work_order_parts")
