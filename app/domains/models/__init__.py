# app/domains/models/__init__.py

"""
이 파일은 모든 도메인의 SQLModel 모델들을 한 곳에서 중앙 관리하여,
다른 모듈에서 쉽게 임포트할 수 있도록 하는 역할을 합니다.
SQLModel.metadata가 모든 테이블을 인식하도록 보장합니다 (Alembic, 테스트용 테이블 생성).
"""

# corp (Company)
from app.domains.corp.models import Company

# usr (User, UserRole)
from app.domains.usr.models import User, UserRole

# cus (Customer, Vehicle)
from app.domains.cus.models import Customer, Vehicle

# inv (InventoryItem)
from app.domains.inv.models import InventoryItem

# bil (Invoice)
from app.domains.bil.models import Invoice

# wo (WorkOrder, Task, WorkOrderPart)
from app.domains.wo.models import WorkOrder, WorkOrderStatus, Task, WorkOrderPart


#  `from app.domains.models import *` 구문으로 임포트될 모델 목록 정의
__all__ = [
    # corp
    "Company",
    # usr
    "User", "UserRole",
    # cus
    "Customer", "Vehicle",
    # inv
    "InventoryItem",
    # bil
    "Invoice",
    # wo
    "WorkOrder", "WorkOrderStatus", "Task", "WorkOrderPart",
]
