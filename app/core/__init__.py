# app/core/__init__.py

"""
FastAPI 애플리케이션의 핵심 구성 요소 패키지입니다.

주요 서브모듈은 다음과 같습니다:

- `config.py`: 애플리케이션의 설정 및 환경 변수 관리 (Pydantic Settings).
- `database.py`: 데이터베이스 엔진/세션 관리 (SQLModel 및 AsyncSQLAlchemy).
- `exceptions.py`: 공통 예외 계층과 {"message": ...} 오류 응답 핸들러.
- `logger.py`: 로깅 설정.
- `security.py`: JWT 검증과 테넌트 범위 도출.
- `dependencies.py`: FastAPI의 의존성 주입 시스템에서 사용될 공통 의존성 함수들.
"""

__title__ = "Work Order Core"
__description__ = "Core components for the work order FastAPI application."
__version__ = "0.1.0"
__all__ = []
