# app/domains/cus/schemas.py

"""
'cus' 도메인(고객 및 차량)의 조회용 DTO 를 정의하는 모듈입니다.
작업지시서 응답에 조인되어 포함됩니다.
"""

from typing import Optional

from app.domains.shared.schemas import CamelModel


class CustomerRead(CamelModel):
    id: str
    first_name: str
    last_name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    company_id: str


class VehicleRead(CamelModel):
    id: str
    make: str
    model: str
    year: Optional[int] = None
    vin: Optional[str] = None
    license_plate: Optional[str] = None
    customer_id: str
