from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from .connection import DatabaseConnection


@contextmanager
def transaction(conn_factory: DatabaseConnection) -> Iterator:
    """Dictionary cursor on a fresh connection.

    Commits when the block finishes, rolls back if it raises.
    """

    conn = conn_factory.connect()
    cur = None
    try:
        cur = conn.cursor(dictionary=True)
        yield cur
    except BaseException:
        conn.rollback()
        raise
    else:
        conn.commit()
    finally:
        if cur is not None:
            cur.close()
        conn.close()
