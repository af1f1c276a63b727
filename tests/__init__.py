# tests/__init__.py

"""
FastAPI 애플리케이션의 테스트 스위트 패키지입니다.

- `conftest.py`: 테스트 데이터베이스, 테넌트/사용자/고객/재고 픽스처, 인증 클라이언트 팩토리.
- `domains/`: 도메인별 API 및 서비스 테스트.
- `test_main.py`, `test_core.py`, `test_scripts.py`: 애플리케이션 셸, core 패키지, CLI 스크립트 테스트.
"""

__title__ = "Work Order API Tests"
__version__ = "0.1.0"
__all__ = []
