# app/domains/corp/models.py

"""
'corp' 도메인의 ORM 모델을 정의하는 모듈입니다.
회사(Company)는 테넌트의 루트이며, 다른 모든 레코드는 company_id 로 격리됩니다.
회사 레코드의 생성/수정은 이 서비스의 범위 밖이며 여기서는 참조용 테이블만 정의합니다.
"""

from typing import Optional, List, TYPE_CHECKING
from datetime import datetime, UTC
from sqlmodel import Field, Relationship, SQLModel, Column
from sqlalchemy.sql import func
from sqlalchemy.types import TIMESTAMP

from app.utils.ids import new_id

# 순환 참조 방지를 위해 TYPE_CHECKING 블록 내에서만 임포트합니다.
if TYPE_CHECKING:
    from app.domains.usr.models import User


class Company(SQLModel, table=True):
    """
    companies 테이블 모델입니다. 하나의 회사가 하나의 테넌트입니다.
    """
    __tablename__ = "companies"

    id: str = Field(default_factory=new_id, primary_key=True, max_length=36, description="회사 고유 ID")
    name: str = Field(index=True, max_length=100, description="회사명")
    email: Optional[str] = Field(default=None, max_length=255, description="대표 이메일")
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

    users: List["User"] = Relationship(back_populates="company")
