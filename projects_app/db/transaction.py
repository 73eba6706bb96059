"""
Transaction Helper Module

Explicit begin/commit/rollback over a SQLAlchemy connection, plus a way to
read the identifier generated by the most recent insert on that connection.
"""
from sqlalchemy import text
from sqlalchemy.engine import Connection

from projects_app.core.exceptions import PersistenceError

# Dialect name -> statement returning the last generated key on this connection
_LAST_INSERT_ID_SQL = {
    "mysql": "SELECT LAST_INSERT_ID()",
    "mariadb": "SELECT LAST_INSERT_ID()",
    "sqlite": "SELECT last_insert_rowid()",
}


class TransactionHelper:
    """Transaction primitives shared by the stores."""

    def begin(self, conn: Connection) -> None:
        """Start an explicit transaction; nothing commits until commit()."""
        if not conn.in_transaction():
            conn.begin()

    def commit(self, conn: Connection) -> None:
        conn.commit()

    def rollback(self, conn: Connection) -> None:
        """Discard everything since begin(). A no-op when nothing is pending."""
        conn.rollback()

    def last_inserted_id(self, conn: Connection, table: str) -> int:
        """
        Return the key generated by the most recent insert into ``table``.

        Args:
            conn: The connection that issued the insert
            table: Name of the table inserted into; its key column is ``<table>_id``

        Returns:
            int: The generated identifier

        Raises:
            PersistenceError: If the dialect is unsupported or no key was generated
        """
        dialect = conn.dialect.name

        if dialect == "postgresql":
            value = conn.execute(
                text("SELECT currval(pg_get_serial_sequence(:table, :column))"),
                {"table": table, "column": f"{table}_id"},
            ).scalar()
        elif dialect in _LAST_INSERT_ID_SQL:
            value = conn.execute(text(_LAST_INSERT_ID_SQL[dialect])).scalar()
        else:
            raise PersistenceError(f"Cannot read generated keys on dialect '{dialect}'")

        if value is None or int(value) == 0:
            raise PersistenceError(f"No identifier was generated for table '{table}'")
        return int(value)
