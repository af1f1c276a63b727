# app/core/security.py

"""
애플리케이션의 보안 관련 유틸리티 함수 및 의존성 주입을 정의하는 모듈입니다.

- JWT(JSON Web Token) 생성 및 검증.
- OAuth2 Bearer 스키마를 사용하여 현재 사용자와 테넌트(회사) 범위 획득.

로그인/회원가입/비밀번호 해싱은 자격 증명 서비스의 책임입니다.
이 모듈은 그 서비스가 발급한 토큰을 검증하고, 동일한 토큰 형식을 생성하는 함수만 제공합니다.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import jwt, JWTError
from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core.config import settings
from app.core.database import get_session
from app.domains.usr import models as usr_models
from app.domains.usr.schemas import TenantContext

from app import API_PREFIX

logger = logging.getLogger(__name__)


# --- OAuth2 스키마 설정 ---
# 토큰 발급은 외부 자격 증명 서비스의 엔드포인트이며, Swagger UI 표시용으로만 사용됩니다.
oauth2_scheme = OAuth2PasswordBearer(tokenUrl=f"{API_PREFIX}/auth/login")


# --- JWT 토큰 생성 및 검증 ---
def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    """
    Access Token 을 생성합니다. 'sub' 클레임에는 사용자 ID 를 담습니다.
    """
    to_encode = data.copy()
    if expires_delta:
        expire = datetime.now(timezone.utc) + expires_delta
    else:
        expire = datetime.now(timezone.utc) + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, settings.SECRET_KEY.get_secret_value(), algorithm=settings.ALGORITHM)


def decode_access_token(token: str) -> Optional[str]:
    """토큰을 검증하고 사용자 ID('sub')를 반환합니다. 유효하지 않으면 None."""
    try:
        payload = jwt.decode(token, settings.SECRET_KEY.get_secret_value(), algorithms=[settings.ALGORITHM])
    except JWTError as e:
        logger.debug("JWT rejected: %s", e)
        return None
    user_id = payload.get("sub")
    return str(user_id) if user_id else None


async def get_current_user_from_token(
    token: str = Depends(oauth2_scheme),
    db: AsyncSession = Depends(get_session),
) -> usr_models.User:
    """
    JWT 토큰을 디코딩하고 검증하여 현재 사용자를 데이터베이스에서 가져옵니다.
    """
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )
    user_id = decode_access_token(token)
    if user_id is None:
        raise credentials_exception

    # 데이터베이스에서 사용자 조회
    statement = select(usr_models.User).where(usr_models.User.id == user_id)
    result = await db.execute(statement)
    user = result.scalars().one_or_none()
    if user is None:
        raise credentials_exception
    return user


def get_current_active_user(
    current_user: usr_models.User = Depends(get_current_user_from_token),
) -> usr_models.User:
    """
    현재 인증된 활성 사용자를 반환합니다.
    비활성화된 계정은 유효한 자격 증명이 아닌 것으로 취급합니다 (401).
    """
    if not current_user.is_active:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Could not validate credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return current_user


def get_current_tenant(
    current_user: usr_models.User = Depends(get_current_active_user),
) -> TenantContext:
    """
    인증된 사용자로부터 요청의 테넌트 범위(회사 ID, 사용자 ID)를 도출합니다.
    모든 작업지시서 엔드포인트는 이 의존성을 거쳐야만 실행됩니다.
    """
    return TenantContext(company_id=current_user.company_id, user_id=current_user.id)
