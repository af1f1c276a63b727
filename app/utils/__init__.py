# app/utils/__init__.py

"""
FastAPI 애플리케이션의 'utils' 패키지입니다.

특정 비즈니스 도메인에 속하지 않는 범용 유틸리티 함수들을 포함합니다.

주요 서브모듈:
- `ids.py`: 레코드 기본 키로 사용하는 문자열 UUID 생성.
"""

# 패키지 메타데이터
__title__ = "Work Order Application Utilities"
__description__ = "Provides common, reusable utility functions for the application."
__version__ = "0.1.0"
__all__ = []
