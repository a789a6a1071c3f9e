"""
SQLite implementation of the customer DAO.

All queries use parameterized statements.  Each call opens its own
connection through ``core.db.get_cursor`` and runs a single
statement, so no transaction spans more than one operation.
"""

from __future__ import annotations

import logging
import sqlite3
from typing import List, Optional

from customer_api.app.core.db import get_cursor
from customer_api.app.core.exceptions import DuplicateResourceError
from customer_api.app.dao.base import UPDATABLE_COLUMNS, CustomerDao
from customer_api.app.schemas.customer import (
    Customer,
    CustomerRegistrationRequest,
    CustomerUpdateRequest,
)

logger = logging.getLogger(__name__)


def map_customer_row(row: sqlite3.Row) -> Customer:
    """Convert a database row to a ``Customer`` schema instance."""
    return Customer(
        id=row["id"],
        name=row["name"],
        email=row["email"],
        age=row["age"],
    )


class SQLiteCustomerDao(CustomerDao):
    """Customer store backed by the ``customer`` table."""

    def __init__(self, db_path: str) -> None:
        self._db_path = db_path

    def select_all_customers(self) -> List[Customer]:
        with get_cursor(self._db_path) as cursor:
            rows = cursor.execute(
                "SELECT id, name, email, age FROM customer ORDER BY id"
            ).fetchall()
        return [map_customer_row(row) for row in rows]

    def select_customer_by_id(self, customer_id: int) -> Optional[Customer]:
        with get_cursor(self._db_path) as cursor:
            row = cursor.execute(
                "SELECT id, name, email, age FROM customer WHERE id = ?",
                (customer_id,),
            ).fetchone()
        if not row:
            return None
        return map_customer_row(row)

    def exists_customer_with_email(self, email: str) -> bool:
        with get_cursor(self._db_path) as cursor:
            row = cursor.execute(
                "SELECT COUNT(id) AS count FROM customer WHERE email = ?",
                (email,),
            ).fetchone()
        return row["count"] > 0

    def exists_customer_with_id(self, customer_id: int) -> bool:
        with get_cursor(self._db_path) as cursor:
            row = cursor.execute(
                "SELECT COUNT(id) AS count FROM customer WHERE id = ?",
                (customer_id,),
            ).fetchone()
        return row["count"] > 0

    def insert_customer(self, customer: CustomerRegistrationRequest) -> int:
        try:
            with get_cursor(self._db_path) as cursor:
                cursor.execute(
                    "INSERT INTO customer (name, email, age) VALUES (?, ?, ?)",
                    (customer.name, customer.email, customer.age),
                )
                customer_id = cursor.lastrowid
        except sqlite3.IntegrityError as e:
            raise DuplicateResourceError("email already taken") from e
        logger.debug("Inserted customer row %s", customer_id)
        return customer_id

    def update_customer(self, customer_id: int, changes: CustomerUpdateRequest) -> None:
        values = changes.supplied_changes()
        columns = [column for column in UPDATABLE_COLUMNS if column in values]
        if not columns:
            return
        # Column names come from UPDATABLE_COLUMNS, never from the request.
        assignments = ", ".join(f"{column} = ?" for column in columns)
        params = [values[column] for column in columns] + [customer_id]
        try:
            with get_cursor(self._db_path) as cursor:
                cursor.execute(f"UPDATE customer SET {assignments} WHERE id = ?", params)
                affected = cursor.rowcount
        except sqlite3.IntegrityError as e:
            raise DuplicateResourceError("email already taken") from e
        logger.debug("Updated customer row %s (%s), %s row(s) affected", customer_id, ", ".join(columns), affected)

    def delete_customer(self, customer_id: int) -> None:
        with get_cursor(self._db_path) as cursor:
            cursor.execute("DELETE FROM customer WHERE id = ?", (customer_id,))
            affected = cursor.rowcount
        logger.debug("Deleted customer row %s, %s row(s) affected", customer_id, affected)
