# app/domains/shared/schemas.py

"""
여러 도메인이 공통으로 사용하는 Pydantic 스키마 기반 클래스를 정의하는 모듈입니다.

API 의 JSON 필드명은 camelCase(예: customerId), 파이썬 속성명은 snake_case(예: customer_id)를
사용합니다. 모든 요청/응답 스키마는 `CamelModel` 을 상속하여 이 규칙을 공유합니다.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """
    camelCase 별칭을 사용하는 스키마의 기본 클래스입니다.
    - 요청 본문은 camelCase 와 snake_case 모두 허용합니다 (populate_by_name).
    - ORM 객체의 속성에서 데이터를 가져와 응답 스키마를 구성합니다 (from_attributes).
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class MessageResponse(BaseModel):
    """모든 오류 응답의 본문 형태입니다."""
    message: str
