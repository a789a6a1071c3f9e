"""
Main entrypoint for the Customer API.

This module assembles the FastAPI application, sets up logging, builds
the customer store and service and includes versioned routers.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``.  Run it with uvicorn,
e.g.::

    uvicorn customer_api.app.main:app --reload
"""

import logging
from typing import Optional

from fastapi import FastAPI

from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.db import get_database_path, init_db
from .core.logging_config import setup_logging
from .dao import CustomerDao, CustomerDaoFactory
from .services.customer_service import CustomerService

logger = logging.getLogger(__name__)


def build_customer_dao(app_settings: Settings) -> CustomerDao:
    """Create the customer DAO selected by ``app_settings.customer_dao``."""
    config = {}
    if app_settings.customer_dao == "sqlite":
        config["db_path"] = get_database_path(app_settings.database_url)
    return CustomerDaoFactory.create(app_settings.customer_dao, config)


def create_app(
    app_settings: Optional[Settings] = None,
    customer_dao: Optional[CustomerDao] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    app_settings : Optional[Settings]
        Configuration to use; defaults to the environment-driven
        module settings.
    customer_dao : Optional[CustomerDao]
        Store to use instead of the one selected by configuration.

    Returns
    -------
    FastAPI
        A configured FastAPI instance ready to be served.
    """
    app_settings = app_settings or default_settings
    setup_logging(app_settings.log_level, app_settings.log_file)

    app = FastAPI(
        title=app_settings.project_name,
        version=app_settings.api_version,
        debug=app_settings.debug,
    )

    uses_sqlite = customer_dao is None and app_settings.customer_dao == "sqlite"
    if customer_dao is None:
        customer_dao = build_customer_dao(app_settings)
    app.state.customer_service = CustomerService(customer_dao)

    # Mount versioned routes under /api/v1.
    app.include_router(v1_router, prefix="/api/v1")

    @app.on_event("startup")
    async def startup_event() -> None:
        if uses_sqlite:
            db_path = get_database_path(app_settings.database_url)
            init_db(db_path)
            logger.info("Customer database ready at %s", db_path)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
