# app/core/dependencies.py

"""
FastAPI 애플리케이션의 의존성 주입(Dependency Injection)을 정의하는 모듈입니다.

- 데이터베이스 세션 관리 (get_db_session).
- 현재 인증된 사용자 및 테넌트 범위 획득 (get_current_active_user, get_current_tenant).
"""

# 실제 데이터베이스 세션 제너레이터 임포트
from app.core.database import get_session as get_main_app_session

# 인증/테넌트 관련 의존성은 security.py 에 정의되어 있으며 여기서 다시 노출합니다.
# flake8: noqa
from app.core.security import (
    create_access_token,
    oauth2_scheme,
    get_current_user_from_token,
    get_current_active_user,
    get_current_tenant,
)


# --- 데이터베이스 세션 의존성 주입 ---
# 인증 의존성(get_current_user_from_token)과 같은 callable 이므로 요청당 세션은 하나만 열립니다.
get_db_session = get_main_app_session
