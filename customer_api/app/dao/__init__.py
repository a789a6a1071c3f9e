"""
Data-access layer for customers.

``CustomerDao`` defines the contract; ``SQLiteCustomerDao`` and
``InMemoryCustomerDao`` implement it and ``CustomerDaoFactory`` picks
one by name.
"""

from .base import CustomerDao
from .factory import CustomerDaoFactory
from .memory_dao import InMemoryCustomerDao
from .sqlite_dao import SQLiteCustomerDao, map_customer_row

__all__ = [
    "CustomerDao",
    "CustomerDaoFactory",
    "InMemoryCustomerDao",
    "SQLiteCustomerDao",
    "map_customer_row",
]
