# app/domains/usr/schemas.py

"""
'usr' 도메인의 API 데이터 전송 객체(DTO)를 정의하는 모듈입니다.
작업지시서 응답에 포함되는 담당 정비사 정보에 사용됩니다.
"""

from pydantic import BaseModel

from app.domains.shared.schemas import CamelModel
from . import models as usr_models


class UserRead(CamelModel):
    """
    사용자 정보 조회를 위한 스키마.
    인증 관련 민감한 정보는 포함하지 않습니다.
    """
    id: str
    email: str
    first_name: str
    last_name: str
    role: usr_models.UserRole
    company_id: str


class TenantContext(BaseModel):
    """인증된 요청의 테넌트 범위 (회사 ID 와 사용자 ID)."""
    company_id: str
    user_id: str
