__all__ = (
    "DatabaseClient",
    "db_client",
)

from .app import DatabaseClient, db_client
