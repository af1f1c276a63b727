# app/domains/wo/schemas.py

"""
'wo' 도메인(작업지시서)의 API 데이터 전송 객체(DTO)를 정의하는 모듈입니다.

요청 스키마는 FastAPI 가 핸들러 실행 전에 검증하므로, 검증되지 않은 구조는
서비스/CRUD 계층에 도달하지 않습니다. 검증 실패는 400 응답으로 변환됩니다.
응답 스키마는 '...Read' 패턴을 사용하며 관련 엔티티를 조인하여 포함합니다.
"""

from typing import List, Optional
from datetime import datetime
from pydantic import Field

from app.domains.shared.schemas import CamelModel
from app.domains.bil.schemas import InvoiceRead
from app.domains.cus.schemas import CustomerRead, VehicleRead
from app.domains.inv.schemas import InventoryItemRead
from app.domains.usr.schemas import UserRead
from .models import WorkOrderStatus


# =============================================================================
# 1. 작업 항목 (Task) 스키마
# =============================================================================
class TaskCreate(CamelModel):
    title: str = Field(..., min_length=1, max_length=200)
    description: str = Field(..., min_length=1)


class TaskRead(CamelModel):
    id: str
    title: str
    description: str
    work_order_id: str
    created_at: Optional[datetime] = None


# =============================================================================
# 2. 작업지시서 부품 (WorkOrderPart) 스키마
# =============================================================================
# work_order_parts.quantity 는 32비트 INTEGER 컬럼입니다.
MAX_PART_QUANTITY = 2_147_483_647


class WorkOrderPartCreate(CamelModel):
    inventory_item_id: str = Field(..., min_length=1)
    # 양의 정수만 허용합니다 ("2", 2.0, true 같은 값은 거부).
    quantity: int = Field(..., gt=0, le=MAX_PART_QUANTITY, strict=True)


class WorkOrderPartsAdd(CamelModel):
    """부품 일괄 추가 요청. 빈 목록은 허용되지만 목록 자체는 필수입니다."""
    parts: List[WorkOrderPartCreate]


class WorkOrderPartRead(CamelModel):
    id: str
    inventory_item_id: str
    quantity: int
    work_order_id: str
    created_at: Optional[datetime] = None


class WorkOrderPartReadWithItem(WorkOrderPartRead):
    inventory_item: Optional[InventoryItemRead] = None


# =============================================================================
# 3. 작업지시서 (WorkOrder) 스키마
# =============================================================================
class WorkOrderCreate(CamelModel):
    description: str = Field(..., min_length=1)
    customer_id: str = Field(..., min_length=1)
    vehicle_id: str = Field(..., min_length=1)
    technician_id: str = Field(..., min_length=1)
    tasks: Optional[List[TaskCreate]] = None
    parts: Optional[List[WorkOrderPartCreate]] = None


class WorkOrderStatusUpdate(CamelModel):
    status: WorkOrderStatus


class WorkOrderRead(CamelModel):
    id: str
    description: str
    status: WorkOrderStatus
    company_id: str
    customer_id: str
    vehicle_id: str
    technician_id: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


# 상세 조회/생성/상태 변경 응답: 관련 엔티티를 모두 포함합니다.
class WorkOrderReadWithDetails(WorkOrderRead):
    customer: Optional[CustomerRead] = None
    vehicle: Optional[VehicleRead] = None
    technician: Optional[UserRead] = None
    tasks: List[TaskRead] = []
    parts: List[WorkOrderPartReadWithItem] = []
    invoice: Optional[InvoiceRead] = None
