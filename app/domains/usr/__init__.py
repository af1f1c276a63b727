# app/domains/usr/__init__.py

"""
FastAPI 애플리케이션의 'usr' 도메인 패키지입니다.

'usr' 도메인은 회사에 소속된 사용자(관리자, 매니저, 정비사)를 정의하며,
인증된 세션으로부터 테넌트 범위(TenantContext)를 도출하는 데 사용됩니다.

주요 서브모듈:
- `models.py`: users 테이블에 매핑되는 SQLModel 정의와 UserRole.
- `schemas.py`: 사용자 조회 스키마 및 TenantContext.
"""

__title__ = "Repair Shop User Domain"
__description__ = "Company users, technicians and the tenant context of a request."
__version__ = "0.1.0"
__all__ = []
