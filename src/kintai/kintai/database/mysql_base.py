from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Dict, List, Optional

import mysql.connector
from mysql.connector import errorcode

from ..core.exceptions import DomainError, StoreError, StoreTimeoutError
from .connection import DatabaseConnection

logger = logging.getLogger(__name__)

# MySQL error numbers that mean a store call ran out of time.
TIMEOUT_ERRNOS = frozenset(
    {
        errorcode.ER_LOCK_WAIT_TIMEOUT,
        errorcode.CR_SERVER_LOST,
        3024,  # ER_QUERY_TIMEOUT (max_execution_time exceeded)
    }
)


def is_duplicate_key(exc: BaseException) -> bool:
    return isinstance(exc, mysql.connector.IntegrityError) and getattr(exc, "errno", None) == errorcode.ER_DUP_ENTRY


def is_missing_reference(exc: BaseException) -> bool:
    return (
        isinstance(exc, mysql.connector.IntegrityError)
        and getattr(exc, "errno", None) == errorcode.ER_NO_REFERENCED_ROW_2
    )


def translate_store_error(exc: mysql.connector.Error) -> StoreError:
    if getattr(exc, "errno", None) in TIMEOUT_ERRNOS:
        return StoreTimeoutError("store call timed out")
    return StoreError("store operation failed")


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    """Transactional scope: commit on clean exit, rollback on any exception.

    Driver errors surface as StoreError/StoreTimeoutError; domain errors raised
    inside the block propagate unchanged after the rollback.
    """

    try:
        conn = conn_factory.connect()
    except mysql.connector.Error as exc:
        logger.exception("could not open store connection")
        raise translate_store_error(exc) from exc

    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except DomainError:
        _safe_rollback(conn)
        raise
    except mysql.connector.Error as exc:
        _safe_rollback(conn)
        logger.exception("store operation failed, transaction rolled back")
        raise translate_store_error(exc) from exc
    except Exception:
        _safe_rollback(conn)
        raise
    finally:
        conn.close()


def _safe_rollback(conn) -> None:
    try:
        conn.rollback()
    except mysql.connector.Error:
        # The connection is already gone; the server discards the transaction.
        logger.warning("rollback failed on a broken connection")


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])
