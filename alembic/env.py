import os
import sys
from logging.config import fileConfig

from sqlalchemy import engine_from_config, pool
from alembic import context

# 프로젝트 루트를 path에 추가 (alembic 명령을 어디서 실행해도 pethealth import 가능)
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from pethealth.core.config import settings
from pethealth.models import Base

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

# autogenerate 비교 대상: pets, weight_entries, events, pet_events, vaccinations, medications
target_metadata = Base.metadata

# alembic.ini의 sqlalchemy.url 대신 settings(DB_URL / DB_HOST / 로컬 SQLite) 사용
DATABASE_URL = settings.DATABASE_URL


def _configure_kwargs(dialect_name: str) -> dict:
    return {
        "target_metadata": target_metadata,
        "compare_type": True,
        # SQLite는 ALTER TABLE 제약이 있어 batch 모드로 테이블을 재생성
        "render_as_batch": dialect_name == "sqlite",
    }


def run_migrations_offline():
    """DB 연결 없이 SQL 스크립트만 출력"""
    context.configure(
        url=DATABASE_URL,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        **_configure_kwargs(DATABASE_URL.split(":", 1)[0].split("+", 1)[0]),
    )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online():
    section = config.get_section(config.config_ini_section, {})
    section["sqlalchemy.url"] = DATABASE_URL

    connectable = engine_from_config(section, prefix="sqlalchemy.", poolclass=pool.NullPool)

    with connectable.connect() as connection:
        context.configure(connection=connection, **_configure_kwargs(connection.dialect.name))

        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
