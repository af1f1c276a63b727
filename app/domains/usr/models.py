# app/domains/usr/models.py

"""
'usr' 도메인의 데이터베이스 ORM 모델을 정의하는 모듈입니다.

사용자(User)는 회사(Company)에 소속되며, 인증된 세션의 주체이자
작업지시서의 담당 정비사(technician)로 참조됩니다.
비밀번호 해시 및 로그인은 자격 증명 서비스의 책임이므로 여기서는 다루지 않습니다.
"""

from typing import Optional, List, TYPE_CHECKING
from datetime import datetime, UTC
from enum import Enum
from sqlmodel import Field, Relationship, SQLModel, Column
from sqlalchemy import ForeignKey
from sqlalchemy.sql import func
from sqlalchemy.types import TIMESTAMP

from app.utils.ids import new_id

# 다른 도메인의 모델을 참조해야 할 경우
# TYPE_CHECKING을 사용하여 순환 임포트 문제를 방지합니다.
if TYPE_CHECKING:
    from app.domains.corp.models import Company
    from app.domains.wo.models import WorkOrder


# =============================================================================
# 사용자 역할
# =============================================================================
class UserRole(str, Enum):
    """
    사용자 역할을 정의하는 문자열 Enum 클래스입니다.
    DB 에는 역할 이름 문자열로 저장됩니다.
    """
    ADMIN = "ADMIN"              # 회사 관리자
    MANAGER = "MANAGER"          # 정비소 매니저
    TECHNICIAN = "TECHNICIAN"    # 정비사


# =============================================================================
# users 테이블 모델
# =============================================================================
class UserBase(SQLModel):
    """
    users 테이블의 기본 속성을 정의하는 SQLModel Base 클래스입니다.
    """
    email: str = Field(max_length=255, sa_column_kwargs={"unique": True}, description="로그인 이메일")
    first_name: str = Field(max_length=100, description="이름")
    last_name: str = Field(max_length=100, description="성")
    role: UserRole = Field(default=UserRole.TECHNICIAN, description="사용자 역할 (권한)")
    is_active: bool = Field(default=True, description="계정 활성 여부")


class User(UserBase, table=True):
    """
    users 테이블에 매핑되는 SQLModel ORM 클래스입니다.
    """
    __tablename__ = "users"

    id: str = Field(default_factory=new_id, primary_key=True, max_length=36, description="사용자 고유 ID")
    company_id: str = Field(
        sa_column=Column(
            ForeignKey("companies.id", onupdate="CASCADE", ondelete="RESTRICT"),
            nullable=False,
            index=True,
        ),
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

    # 관계 정의:
    company: Optional["Company"] = Relationship(back_populates="users")
    assigned_work_orders: List["WorkOrder"] = Relationship(back_populates="technician")
