"""Alembic environment for the CatchUp News API schema.

Usage (from the repository root):
    alembic upgrade head
    alembic revision --autogenerate -m "describe change"
    alembic downgrade -1
"""

from logging.config import fileConfig

from alembic import context
from sqlalchemy import create_engine, pool

from catchup.db.models import Base
from catchup.settings import get_settings

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata


def get_url() -> str:
    """Return a synchronous driver URL derived from the application settings."""

    url = get_settings().resolved_database_url
    # psycopg 3 serves both sync and async engines; aiosqlite needs the stdlib driver.
    return url.replace("sqlite+aiosqlite://", "sqlite://", 1)


def run_migrations_offline() -> None:
    context.configure(
        url=get_url(),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    connectable = create_engine(get_url(), poolclass=pool.NullPool)

    with connectable.connect() as connection:
        context.configure(
            connection=connection,
            target_metadata=target_metadata,
            compare_type=True,
            compare_server_default=True,
        )

        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
