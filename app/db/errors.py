from sqlalchemy.exc import IntegrityError


def is_unique_violation(exc: IntegrityError, table: str, column: str) -> bool:
    """True when ``exc`` is a UNIQUE failure on ``table.column``.

    Matches the SQLite text (``UNIQUE constraint failed: restaurants.name``) and
    the PostgreSQL default constraint name (``restaurants_name_key``).
    """
    message = str(exc.orig).lower()
    if "unique" not in message:
        return False
    return f"{table}.{column}" in message or f"{table}_{column}_key" in message
