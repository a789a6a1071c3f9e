"""
Customer DAO factory.
"""
from typing import Any, Dict
import inspect
import logging

from .base import CustomerDao
from .memory_dao import InMemoryCustomerDao
from .sqlite_dao import SQLiteCustomerDao

logger = logging.getLogger(__name__)


class CustomerDaoFactory:
    """Builds a customer DAO from its configured name."""

    _daos = {
        "sqlite": SQLiteCustomerDao,
        "memory": InMemoryCustomerDao,
    }

    @classmethod
    def create(cls, dao_type: str, config: Dict[str, Any]) -> CustomerDao:
        """
        Create a DAO instance.

        Args:
            dao_type: DAO name (``sqlite``, ``memory``)
            config: keyword arguments for the DAO constructor

        Returns:
            CustomerDao: the configured DAO

        Raises:
            ValueError: unknown DAO name, or ``config`` does not match
                the DAO constructor
        """
        if dao_type not in cls._daos:
            raise ValueError(
                f"Unsupported customer DAO: {dao_type} "
                f"(expected one of: {', '.join(cls.get_supported_daos())})"
            )

        dao_class = cls._daos[dao_type]

        # Check the arguments up front so errors raised inside the
        # constructor itself are not mistaken for bad configuration.
        try:
            inspect.signature(dao_class).bind(**config)
        except TypeError as e:
            logger.error("Bad configuration for %s customer DAO: %s", dao_type, e)
            raise ValueError(f"Invalid configuration for {dao_type} customer DAO: {e}") from e

        return dao_class(**config)

    @classmethod
    def get_supported_daos(cls) -> list:
        return sorted(cls._daos.keys())
