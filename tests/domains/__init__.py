# tests/domains/__init__.py

"""
FastAPI 애플리케이션의 도메인별 테스트 스위트 패키지입니다.

- `test_wo_n.py`: 작업지시서 HTTP 엔드포인트 통합 테스트.
- `test_wo_services.py`: 작업지시서 서비스/CRUD 계층 테스트.
"""

__title__ = "Work Order Domain Tests"
__version__ = "0.1.0"
__all__ = []
