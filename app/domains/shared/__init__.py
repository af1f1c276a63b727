# app/domains/shared/__init__.py

"""
FastAPI 애플리케이션의 'shared' 도메인 패키지입니다.

'shared' 도메인은 특정 비즈니스 도메인에 속하지 않고
여러 도메인이 공통으로 사용하는 스키마 기반 클래스(camelCase 직렬화 규칙,
오류 응답 형태)를 제공합니다.

주요 서브모듈:
- `schemas.py`: CamelModel, MessageResponse.
"""

__title__ = "Repair Shop Shared Domain"
__description__ = "Common schema base classes shared by all domains."
__version__ = "0.1.0"
__all__ = []
