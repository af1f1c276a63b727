# app/domains/corp/__init__.py

"""
FastAPI 애플리케이션의 'corp' 도메인 패키지입니다.

'corp' 도메인은 테넌트 단위인 회사(Company) 레코드를 정의합니다.
회사 CRUD 는 외부 협력 서비스의 책임이며, 이 패키지는 다른 도메인이
company_id 로 참조하는 테이블 모델만 제공합니다.

주요 서브모듈:
- `models.py`: companies 테이블에 매핑되는 SQLModel 정의.
"""

__title__ = "Repair Shop Company Domain"
__description__ = "Tenant (company) records referenced by every other domain."
__version__ = "0.1.0"
__all__ = []
