# app/domains/wo/routers.py

"""
'wo' 도메인 (작업지시서 관리)과 관련된 API 엔드포인트를 정의하는 모듈입니다.

모든 엔드포인트는 인증된 사용자의 테넌트 범위(`TenantContext`) 안에서만 동작합니다.
다른 회사 소유의 작업지시서는 존재하지 않는 것과 동일하게 404 로 응답합니다.
"""

from typing import List
from fastapi import APIRouter, Depends, status
from sqlmodel.ext.asyncio.session import AsyncSession

# 핵심 의존성 (데이터베이스 세션, 테넌트 범위)
from app.core import dependencies as deps
from app.domains.shared.schemas import MessageResponse
from app.domains.usr.schemas import TenantContext

from . import schemas as wo_schemas
from .services import WorkOrderService

# APIRouter 인스턴스 생성
router = APIRouter(
    tags=["Work Order Management (작업지시서 관리)"],  # Swagger UI에 표시될 태그
    responses={
        401: {"model": MessageResponse, "description": "Not authenticated"},
        404: {"model": MessageResponse, "description": "Not found"},
    },  # 이 라우터의 공통 응답 정의 (오류 본문은 {"message": ...})
)


# =============================================================================
# 1. 작업지시서 (WorkOrder) API
# =============================================================================
@router.get(
    "",
    response_model=List[wo_schemas.WorkOrderReadWithDetails],
    summary="회사의 모든 작업지시서 조회",
)
async def read_work_orders(
    db: AsyncSession = Depends(deps.get_db_session),
    tenant: TenantContext = Depends(deps.get_current_tenant),
):
    """
    호출자 회사의 작업지시서 목록을 생성 순서대로 조회합니다.
    고객, 차량, 담당 정비사, 작업 항목, 부품(재고 품목 포함), 청구서가 함께 반환됩니다.
    """
    return await WorkOrderService(db).list_work_orders(tenant)


@router.get(
    "/{work_order_id}",
    response_model=wo_schemas.WorkOrderReadWithDetails,
    summary="특정 작업지시서 상세 조회",
)
async def read_work_order(
    work_order_id: str,
    db: AsyncSession = Depends(deps.get_db_session),
    tenant: TenantContext = Depends(deps.get_current_tenant),
):
    return await WorkOrderService(db).get_work_order(tenant, work_order_id)


@router.post(
    "",
    response_model=wo_schemas.WorkOrderReadWithDetails,
    status_code=status.HTTP_201_CREATED,
    summary="새 작업지시서 생성",
)
async def create_work_order(
    work_order_in: wo_schemas.WorkOrderCreate,
    db: AsyncSession = Depends(deps.get_db_session),
    tenant: TenantContext = Depends(deps.get_current_tenant),
):
    """
    새 작업지시서를 PENDING 상태로 생성합니다.
    - **description**, **customerId**, **vehicleId**, **technicianId**: 필수
    - **tasks**, **parts**: 선택. 작업지시서와 같은 트랜잭션으로 함께 저장됩니다.
    """
    return await WorkOrderService(db).create_work_order(tenant, work_order_in)


@router.patch(
    "/{work_order_id}/status",
    response_model=wo_schemas.WorkOrderReadWithDetails,
    summary="작업지시서 상태 변경",
)
async def update_work_order_status(
    work_order_id: str,
    status_in: wo_schemas.WorkOrderStatusUpdate,
    db: AsyncSession = Depends(deps.get_db_session),
    tenant: TenantContext = Depends(deps.get_current_tenant),
):
    """
    작업지시서 상태를 변경합니다 (PENDING, IN_PROGRESS, COMPLETED, CANCELLED).
    모든 상태 간 전이가 허용됩니다.
    """
    return await WorkOrderService(db).update_status(tenant, work_order_id, status_in.status)


# =============================================================================
# 2. 작업 항목 (Task) / 부품 (WorkOrderPart) 추가 API
# =============================================================================
@router.post(
    "/{work_order_id}/tasks",
    response_model=wo_schemas.TaskRead,
    status_code=status.HTTP_201_CREATED,
    summary="작업지시서에 작업 항목 추가",
)
async def add_work_order_task(
    work_order_id: str,
    task_in: wo_schemas.TaskCreate,
    db: AsyncSession = Depends(deps.get_db_session),
    tenant: TenantContext = Depends(deps.get_current_tenant),
):
    # 응답은 생성된 작업 항목만 포함합니다 (작업지시서 전체가 아님).
    return await WorkOrderService(db).add_task(tenant, work_order_id, task_in)


@router.post(
    "/{work_order_id}/parts",
    response_model=List[wo_schemas.WorkOrderPartRead],
    status_code=status.HTTP_201_CREATED,
    summary="작업지시서에 부품 일괄 추가",
)
async def add_work_order_parts(
    work_order_id: str,
    parts_in: wo_schemas.WorkOrderPartsAdd,
    db: AsyncSession = Depends(deps.get_db_session),
    tenant: TenantContext = Depends(deps.get_current_tenant),
):
    """
    작업지시서에 부품 목록을 추가합니다. 하나라도 유효하지 않으면 아무것도 저장되지 않습니다.
    빈 목록은 허용되며 빈 배열을 반환합니다.
    """
    return await WorkOrderService(db).add_parts(tenant, work_order_id, parts_in.parts)
