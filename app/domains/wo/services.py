# app/domains/wo/services.py

"""
작업지시서 수명 주기(생성, 상태 전이, 작업 항목/부품 추가)의 비즈니스 규칙을 처리하는 서비스 모듈입니다.

테넌트 범위는 요청 전역 상태가 아니라 `TenantContext` 인자로 모든 메서드에 명시적으로 전달되며,
데이터베이스 접근은 `crud.work_order` 를 통해서만 수행합니다.
"""

import logging
from typing import List, Sequence

from sqlmodel.ext.asyncio.session import AsyncSession

from app.core.exceptions import NotFoundError, ValidationError
from app.domains.usr.schemas import TenantContext
from . import crud as wo_crud
from . import models as wo_models
from . import schemas as wo_schemas

logger = logging.getLogger(__name__)

WORK_ORDER_NOT_FOUND = "Work order not found"


class WorkOrderService:
    """
    작업지시서 비즈니스 로직을 처리하는 서비스 클래스입니다.
    """

    def __init__(self, db: AsyncSession):
        """
        Args:
            db (AsyncSession): 요청 단위 데이터베이스 세션.
        """
        self.db = db
        self.crud = wo_crud.work_order

    async def list_work_orders(self, tenant: TenantContext) -> List[wo_models.WorkOrder]:
        return await self.crud.get_multi_by_company(self.db, company_id=tenant.company_id)

    async def get_work_order(self, tenant: TenantContext, work_order_id: str) -> wo_models.WorkOrder:
        db_obj = await self.crud.get_scoped(self.db, id=work_order_id, company_id=tenant.company_id)
        if db_obj is None:
            raise NotFoundError(WORK_ORDER_NOT_FOUND)
        return db_obj

    async def create_work_order(
        self, tenant: TenantContext, obj_in: wo_schemas.WorkOrderCreate
    ) -> wo_models.WorkOrder:
        """
        새 작업지시서를 PENDING 상태로 생성합니다.
        요청의 작업 항목/부품 목록은 그대로(생략 시 빈 목록) 함께 저장됩니다.

        고객, 차량, 담당 정비사는 모두 호출자 회사 소속이어야 합니다.

        Raises:
            ValidationError: 부품 수량이 허용 범위(1 ~ MAX_PART_QUANTITY)를 벗어난 경우.
            NotFoundError: 고객, 차량, 담당 정비사 중 하나가 호출자 회사에 없는 경우.
            PersistenceError: 트랜잭션이 실패한 경우 (저장된 행 없음).
        """
        _ensure_valid_quantities(obj_in.parts or [])
        return await self.crud.create_with_nested(
            self.db,
            obj_in=obj_in,
            company_id=tenant.company_id,
            status=wo_models.WorkOrderStatus.PENDING,
        )

    async def update_status(
        self, tenant: TenantContext, work_order_id: str, status: wo_models.WorkOrderStatus
    ) -> wo_models.WorkOrder:
        """
        작업지시서 상태를 변경합니다. 네 상태 사이의 모든 전이를 허용하며
        같은 상태로의 반복 요청도 동일한 결과를 반환합니다.
        """
        try:
            status = wo_models.WorkOrderStatus(status)
        except ValueError:
            raise ValidationError(f"Invalid status: {status}")

        db_obj = await self.crud.update_status(
            self.db, id=work_order_id, company_id=tenant.company_id, status=status
        )
        if db_obj is None:
            raise NotFoundError(WORK_ORDER_NOT_FOUND)
        return db_obj

    async def add_task(
        self, tenant: TenantContext, work_order_id: str, obj_in: wo_schemas.TaskCreate
    ) -> wo_models.Task:
        """작업지시서에 작업 항목을 추가하고 생성된 작업 항목만 반환합니다."""
        db_task = await self.crud.append_task(
            self.db, work_order_id=work_order_id, company_id=tenant.company_id, obj_in=obj_in
        )
        if db_task is None:
            raise NotFoundError(WORK_ORDER_NOT_FOUND)
        return db_task

    async def add_parts(
        self,
        tenant: TenantContext,
        work_order_id: str,
        parts: Sequence[wo_schemas.WorkOrderPartCreate],
    ) -> List[wo_models.WorkOrderPart]:
        """
        작업지시서에 부품을 일괄 추가합니다.
        재고 품목의 존재 여부 확인이나 재고 차감은 수행하지 않습니다 (재고 서비스 책임).
        """
        # 소유권 확인이 수량 검증보다 먼저입니다.
        if not await self.crud.exists_scoped(self.db, id=work_order_id, company_id=tenant.company_id):
            raise NotFoundError(WORK_ORDER_NOT_FOUND)
        _ensure_valid_quantities(parts)

        db_parts = await self.crud.append_parts(
            self.db, work_order_id=work_order_id, company_id=tenant.company_id, parts=parts
        )
        if db_parts is None:
            raise NotFoundError(WORK_ORDER_NOT_FOUND)
        return db_parts


def _ensure_valid_quantities(parts: Sequence[wo_schemas.WorkOrderPartCreate]) -> None:
    for index, part in enumerate(parts):
        if part.quantity <= 0:
            logger.debug("Rejected part %d with quantity %r", index, part.quantity)
            raise ValidationError(f"parts.{index}.quantity: Input should be greater than 0")
        if part.quantity > wo_schemas.MAX_PART_QUANTITY:
            logger.debug("Rejected part %d with quantity %r", index, part.quantity)
            raise ValidationError(
                f"parts.{index}.quantity: Input should be less than or equal to {wo_schemas.MAX_PART_QUANTITY}"
            )
