from app.db.base_class import Base
from app.db.session import (
    STORAGE_ERRORS,
    async_session,
    create_tables,
    engine,
    get_db,
)

__all__ = [
    "STORAGE_ERRORS",
    "Base",
    "async_session",
    "create_tables",
    "engine",
    "get_db",
]
