"""Alembic migration environment for the rsvp table.

The target URL is whatever the caller put on the Alembic Config
(``sqlalchemy.url``), falling back to ``settings.DATABASE_URL``.
"""
from logging.config import fileConfig

from alembic import context
from sqlalchemy import create_engine, pool

from rsvp_service.config import settings
from rsvp_service.database import Base
from rsvp_service.models.rsvp import RSVP  # noqa: F401

config = context.config

if config.config_file_name is not None:
    # Leave the application's loggers alone when migrating from inside it
    fileConfig(config.config_file_name, disable_existing_loggers=False)

database_url = config.get_main_option("sqlalchemy.url") or settings.DATABASE_URL


def _configure(**kwargs) -> None:
    context.configure(target_metadata=Base.metadata, render_as_batch=True, **kwargs)
    with context.begin_transaction():
        context.run_migrations()


if context.is_offline_mode():
    _configure(url=database_url, literal_binds=True, dialect_opts={"paramstyle": "named"})
else:
    engine = create_engine(database_url, poolclass=pool.NullPool)
    with engine.connect() as connection:
        _configure(connection=connection)
    engine.dispose()
