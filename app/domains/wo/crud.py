# app/domains/wo/crud.py

"""
'wo' 도메인(작업지시서)의 데이터베이스 상호작용 로직을 담당하는 모듈입니다.

모든 조회/수정은 company_id 조건을 포함한 '범위 지정 쿼리'로 수행합니다.
경로로 전달된 ID 만으로는 어떤 레코드도 읽거나 쓰지 않습니다.
작업지시서 + 작업 항목 + 부품처럼 여러 행을 쓰는 작업은 하나의 트랜잭션으로 처리하여
전부 반영되거나 전혀 반영되지 않도록 합니다.
"""

import logging
from typing import List, Optional, Sequence

from sqlalchemy import update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import selectinload
from sqlalchemy.sql import func
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core.exceptions import NotFoundError, PersistenceError
from app.domains.cus import models as cus_models
from app.domains.usr import models as usr_models
from . import models as wo_models
from . import schemas as wo_schemas

logger = logging.getLogger(__name__)


def _with_details(statement):
    """작업지시서 응답에 필요한 관련 엔티티를 함께 로드하도록 옵션을 추가합니다."""
    WorkOrder = wo_models.WorkOrder
    return statement.options(
        selectinload(WorkOrder.customer),
        selectinload(WorkOrder.vehicle),
        selectinload(WorkOrder.technician),
        selectinload(WorkOrder.tasks),
        selectinload(WorkOrder.parts).selectinload(wo_models.WorkOrderPart.inventory_item),
        selectinload(WorkOrder.invoice),
    ).execution_options(populate_existing=True)


class CRUDWorkOrder:
    """
    작업지시서(WorkOrder)와 하위 Task/WorkOrderPart 에 대한 CRUD 클래스입니다.
    모든 메서드는 세션과 테넌트(company_id)를 인자로 명시적으로 전달받습니다.
    """

    def __init__(self):
        self.model = wo_models.WorkOrder

    # -------------------------------------------------------------------------
    # 조회
    # -------------------------------------------------------------------------
    async def get_multi_by_company(self, db: AsyncSession, *, company_id: str) -> List[wo_models.WorkOrder]:
        """회사에 속한 모든 작업지시서를 관련 엔티티와 함께 조회합니다 (생성일시, ID 순)."""
        statement = _with_details(
            select(self.model)
            .where(self.model.company_id == company_id)
            .order_by(self.model.created_at, self.model.id)
        )
        result = await db.execute(statement)
        return list(result.scalars().all())

    async def get_scoped(self, db: AsyncSession, *, id: str, company_id: str) -> Optional[wo_models.WorkOrder]:
        """
        ID 와 회사가 모두 일치하는 작업지시서를 조회합니다.
        존재하지 않는 경우와 다른 회사 소유인 경우 모두 None 을 반환합니다.
        """
        statement = _with_details(
            select(self.model).where(self.model.id == id, self.model.company_id == company_id)
        )
        result = await db.execute(statement)
        return result.scalars().first()

    async def exists_scoped(self, db: AsyncSession, *, id: str, company_id: str) -> bool:
        """관련 엔티티 로드 없이 범위 지정된 작업지시서의 존재 여부만 확인합니다."""
        statement = select(self.model.id).where(self.model.id == id, self.model.company_id == company_id)
        result = await db.execute(statement)
        return result.scalar_one_or_none() is not None

    async def _lock_scoped(self, db: AsyncSession, *, id: str, company_id: str) -> Optional[str]:
        """
        하위 항목 추가 전에 범위 지정된 부모 행을 잠급니다 (SELECT ... FOR UPDATE).
        같은 트랜잭션 안에서 소유권 확인과 쓰기가 이루어집니다. SQLite 에서는 잠금이 무시됩니다.
        """
        statement = (
            select(self.model.id)
            .where(self.model.id == id, self.model.company_id == company_id)
            .with_for_update()
        )
        result = await db.execute(statement)
        return result.scalar_one_or_none()

    async def _find_foreign_reference(
        self, db: AsyncSession, *, obj_in: wo_schemas.WorkOrderCreate, company_id: str
    ) -> Optional[str]:
        """
        고객, 차량, 담당 정비사가 모두 같은 회사 소속인지 확인합니다.
        회사 범위에서 찾을 수 없는 첫 번째 참조의 이름을 반환하며, 모두 있으면 None.
        """
        references = (
            ("Customer", cus_models.Customer, obj_in.customer_id),
            ("Vehicle", cus_models.Vehicle, obj_in.vehicle_id),
            ("Technician", usr_models.User, obj_in.technician_id),
        )
        for label, model, ref_id in references:
            statement = select(model.id).where(model.id == ref_id, model.company_id == company_id)
            result = await db.execute(statement)
            if result.scalar_one_or_none() is None:
                return label
        return None

    # -------------------------------------------------------------------------
    # 생성
    # -------------------------------------------------------------------------
    async def create_with_nested(
        self,
        db: AsyncSession,
        *,
        obj_in: wo_schemas.WorkOrderCreate,
        company_id: str,
        status: wo_models.WorkOrderStatus = wo_models.WorkOrderStatus.PENDING,
    ) -> wo_models.WorkOrder:
        """
        작업지시서와 작업 항목/부품 행을 하나의 트랜잭션으로 생성합니다.
        일부만 저장되는 경우는 없으며, 실패 시 롤백 후 PersistenceError 를 발생시킵니다.
        다른 회사의 고객, 차량, 정비사를 참조하면 아무것도 쓰지 않고 NotFoundError 를 발생시킵니다.
        """
        db_obj = self.model(
            description=obj_in.description,
            status=status,
            company_id=company_id,
            customer_id=obj_in.customer_id,
            vehicle_id=obj_in.vehicle_id,
            technician_id=obj_in.technician_id,
            tasks=[wo_models.Task(title=t.title, description=t.description) for t in obj_in.tasks or []],
            parts=[
                wo_models.WorkOrderPart(inventory_item_id=p.inventory_item_id, quantity=p.quantity)
                for p in obj_in.parts or []
            ],
        )
        try:
            missing = await self._find_foreign_reference(db, obj_in=obj_in, company_id=company_id)
            if missing is None:
                db.add(db_obj)
                await db.commit()
        except SQLAlchemyError as e:
            await db.rollback()
            logger.error("Work order creation rolled back (company=%s): %s", company_id, e)
            raise PersistenceError("Failed to create work order") from e

        if missing is not None:
            await db.rollback()
            logger.info("Work order creation rejected (company=%s): %s not in company", company_id, missing)
            raise NotFoundError(f"{missing} not found")

        logger.info(
            "Work order %s created (company=%s, tasks=%d, parts=%d)",
            db_obj.id, company_id, len(db_obj.tasks), len(db_obj.parts),
        )
        return await self.get_scoped(db, id=db_obj.id, company_id=company_id)

    # -------------------------------------------------------------------------
    # 상태 변경
    # -------------------------------------------------------------------------
    async def update_status(
        self,
        db: AsyncSession,
        *,
        id: str,
        company_id: str,
        status: wo_models.WorkOrderStatus,
    ) -> Optional[wo_models.WorkOrder]:
        """
        id 와 company_id 를 모두 조건으로 하는 단일 UPDATE 문으로 상태를 변경합니다.
        조건에 맞는 행이 없으면 None 을 반환합니다 (존재하지 않음 / 다른 회사 소유).
        """
        statement = (
            update(self.model)
            .where(self.model.id == id, self.model.company_id == company_id)
            .values(status=status, updated_at=func.now())
        )
        try:
            result = await db.execute(statement)
            if result.rowcount == 0:
                await db.rollback()
                return None
            await db.commit()
        except SQLAlchemyError as e:
            await db.rollback()
            logger.error("Status update of work order %s failed: %s", id, e)
            raise PersistenceError("Failed to update work order status") from e

        logger.info("Work order %s status set to %s (company=%s)", id, status.value, company_id)
        return await self.get_scoped(db, id=id, company_id=company_id)

    # -------------------------------------------------------------------------
    # 하위 항목 추가
    # -------------------------------------------------------------------------
    async def append_task(
        self,
        db: AsyncSession,
        *,
        work_order_id: str,
        company_id: str,
        obj_in: wo_schemas.TaskCreate,
    ) -> Optional[wo_models.Task]:
        """소유권이 확인된 작업지시서에 작업 항목 1건을 추가합니다. 소유하지 않으면 None."""
        try:
            if await self._lock_scoped(db, id=work_order_id, company_id=company_id) is None:
                await db.rollback()
                return None
            db_task = wo_models.Task(
                title=obj_in.title,
                description=obj_in.description,
                work_order_id=work_order_id,
            )
            db.add(db_task)
            await db.commit()
        except SQLAlchemyError as e:
            await db.rollback()
            logger.error("Adding task to work order %s failed: %s", work_order_id, e)
            raise PersistenceError("Failed to add task") from e

        await db.refresh(db_task)
        return db_task

    async def append_parts(
        self,
        db: AsyncSession,
        *,
        work_order_id: str,
        company_id: str,
        parts: Sequence[wo_schemas.WorkOrderPartCreate],
    ) -> Optional[List[wo_models.WorkOrderPart]]:
        """
        소유권이 확인된 작업지시서에 부품 행들을 하나의 트랜잭션으로 추가합니다.
        하나라도 실패하면 전체를 롤백하며 기존 상태는 변경되지 않습니다. 소유하지 않으면 None.
        """
        try:
            if await self._lock_scoped(db, id=work_order_id, company_id=company_id) is None:
                await db.rollback()
                return None
            db_parts = [
                wo_models.WorkOrderPart(
                    inventory_item_id=part.inventory_item_id,
                    quantity=part.quantity,
                    work_order_id=work_order_id,
                )
                for part in parts
            ]
            db.add_all(db_parts)
            await db.commit()
        except SQLAlchemyError as e:
            await db.rollback()
            logger.error("Adding %d parts to work order %s rolled back: %s", len(parts), work_order_id, e)
            raise PersistenceError("Failed to add parts") from e

        for db_part in db_parts:
            await db.refresh(db_part)
        logger.info("Added %d parts to work order %s", len(db_parts), work_order_id)
        return db_parts


# CRUD 인스턴스 생성
work_order = CRUDWorkOrder()
