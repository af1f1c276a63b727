# app/utils/ids.py

"""모든 테이블이 공유하는 텍스트 식별자 생성 유틸리티입니다."""

import uuid


def new_id() -> str:
    """UUID4 문자열 식별자를 생성합니다."""
    return str(uuid.uuid4())
