"""Alembic environment for the person database.

``personapi db upgrade`` always passes ``sqlalchemy.url``; running alembic
by hand falls back to the API's configured database.
"""

from alembic import context
from sqlalchemy import create_engine, pool

from personapi.db.connect import resolve_db_uri
from personapi.db.models import Base

database_url = context.config.get_main_option("sqlalchemy.url") or resolve_db_uri()


def _migrate(**configure_kwargs) -> None:
    context.configure(target_metadata=Base.metadata, render_as_batch=True, **configure_kwargs)
    with context.begin_transaction():
        context.run_migrations()


if context.is_offline_mode():
    _migrate(url=database_url, literal_binds=True)
else:
    engine = create_engine(database_url, poolclass=pool.NullPool)
    with engine.connect() as connection:
        _migrate(connection=connection)
