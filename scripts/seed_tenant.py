# flake8: noqa
# scripts/seed_tenant.py

"""
개발 환경용 테넌트(회사)와 관리자 사용자를 생성하고,
API 호출에 사용할 수 있는 Bearer 토큰을 출력하는 CLI 스크립트입니다.

사용 예:
    python -m scripts.seed_tenant --company "Acme Auto" --email admin@acme.example.com
"""

import asyncio
from datetime import timedelta

import typer
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core.config import settings
from app.core.database import Database, create_db_and_tables, import_all_models
from app.core.security import create_access_token
from app.domains.corp.models import Company
from app.domains.usr.models import User, UserRole

import_all_models()

cli = typer.Typer()


async def create_tenant(db: AsyncSession, company_name: str, email: str, first_name: str, last_name: str) -> User | None:
    """
    회사와 관리자 사용자를 생성합니다. 같은 이메일의 사용자가 있으면 None 을 반환합니다.
    """
    result = await db.execute(select(User).where(User.email == email))
    if result.scalars().first():
        print(f"오류: 이미 존재하는 이메일입니다: {email}")
        return None

    company = Company(name=company_name, email=email)
    db.add(company)
    await db.flush()

    user = User(
        email=email,
        first_name=first_name,
        last_name=last_name,
        role=UserRole.ADMIN,
        company_id=company.id,
    )
    db.add(user)
    await db.flush()
    print(f"회사 '{company_name}' ({company.id}) 와 관리자 {email} 가 생성되었습니다.")
    return user


@cli.command()
def main(
    company: str = typer.Option(
        ..., '--company', '-c',
        prompt="회사명을 입력하세요",
        help="생성할 회사(테넌트)의 이름입니다."
    ),
    email: str = typer.Option(
        ..., '--email', '-e',
        prompt="관리자 이메일을 입력하세요",
        help="생성할 관리자 계정의 이메일 주소입니다."
    ),
    first_name: str = typer.Option("Admin", '--first-name', help="관리자의 이름입니다."),
    last_name: str = typer.Option("User", '--last-name', help="관리자의 성입니다."),
    token_days: int = typer.Option(1, '--token-days', help="출력할 개발용 토큰의 유효 기간(일)입니다."),
    create_tables: bool = typer.Option(False, '--create-tables', help="테이블이 없으면 먼저 생성합니다 (개발용)."),
):
    """
    개발용 테넌트와 관리자를 생성하고 Bearer 토큰을 출력합니다.
    """
    if token_days < 1:
        print("오류: 토큰 유효 기간은 1일 이상이어야 합니다.")
        raise typer.Abort()

    async def run_creation() -> User | None:
        database = Database.from_settings(settings)
        try:
            if create_tables:
                await create_db_and_tables(database.engine)
            async with database.session() as db:
                return await create_tenant(db, company, email, first_name, last_name)
        finally:
            await database.dispose()

    user = asyncio.run(run_creation())
    if user is None:
        raise typer.Exit(code=1)

    token = create_access_token(data={"sub": user.id}, expires_delta=timedelta(days=token_days))
    print(f"Authorization: Bearer {token}")


if __name__ == "__main__":
    cli()
