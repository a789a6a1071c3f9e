from __future__ import annotations

import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from customer_api.app.core.config import Settings
from customer_api.app.core.db import init_db
from customer_api.app.dao import InMemoryCustomerDao, SQLiteCustomerDao
from customer_api.app.main import create_app
from customer_api.app.services.customer_service import CustomerService


@pytest.fixture()
def db_path(tmp_path: Path) -> str:
    path = str(tmp_path / "customers.sqlite3")
    init_db(path)
    return path


@pytest.fixture()
def sqlite_dao(db_path: str) -> SQLiteCustomerDao:
    return SQLiteCustomerDao(db_path)


@pytest.fixture(params=["sqlite", "memory"])
def customer_dao(request, tmp_path: Path):
    if request.param == "memory":
        return InMemoryCustomerDao()
    path = str(tmp_path / "service.sqlite3")
    init_db(path)
    return SQLiteCustomerDao(path)


@pytest.fixture()
def service(customer_dao) -> CustomerService:
    return CustomerService(customer_dao)


@pytest.fixture()
def client(tmp_path: Path):
    settings = Settings(database_url=str(tmp_path / "api.sqlite3"), customer_dao="sqlite")
    app = create_app(settings)
    with TestClient(app) as test_client:
        yield test_client
