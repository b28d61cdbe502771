from typing import Any

import psycopg


def describe_database_error(exc: psycopg.Error) -> dict[str, Any]:
    """Full diagnostic payload of a database error, for the error response."""
    diag = exc.diag
    return {
        "message": diag.message_primary or str(exc) or type(exc).__name__,
        "code": exc.sqlstate,
        "details": diag.message_detail,
        "hint": diag.message_hint,
    }
