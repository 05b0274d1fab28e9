"""Alembic environment for the ``blobs`` key/value table.

Migrations run on a blocking connection; the configured async URL is mapped
to its sync driver (the SQLite default drops ``+aiosqlite``).
"""

from logging.config import fileConfig

from alembic import context
from sqlalchemy import create_engine, pool

from techdispatch.adapters.persistence.database import Base, sync_database_url
from techdispatch.adapters.persistence.models import BlobModel  # noqa: F401 — register the blobs table
from techdispatch.config import settings

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata

# DATABASE_URL wins over alembic.ini
database_url = sync_database_url(settings.database_url)
config.set_main_option("sqlalchemy.url", database_url)


def _configure(**kwargs) -> None:
    # SQLite cannot ALTER most constraints in place
    context.configure(
        target_metadata=target_metadata,
        render_as_batch=database_url.startswith("sqlite"),
        **kwargs,
    )


def run_migrations_offline() -> None:
    """Emit the blobs DDL as SQL without a database connection."""
    _configure(url=database_url, literal_binds=True, dialect_opts={"paramstyle": "named"})
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    connectable = create_engine(database_url, poolclass=pool.NullPool)
    try:
        with connectable.connect() as connection:
            _configure(connection=connection)
            with context.begin_transaction():
                context.run_migrations()
    finally:
        connectable.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
