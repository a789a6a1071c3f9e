"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables, with defaults for every field.  Override them
via the environment (or construct ``Settings`` explicitly in tests and
pass it to ``create_app``).
"""

import os
from dataclasses import dataclass, field
from typing import Optional


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = field(default_factory=lambda: os.getenv("PROJECT_NAME", "Customer API"))
    api_version: str = field(default_factory=lambda: os.getenv("API_VERSION", "1.0.0"))
    debug: bool = field(
        default_factory=lambda: os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    )
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    log_file: Optional[str] = field(default_factory=lambda: os.getenv("LOG_FILE") or None)

    # Path to the SQLite database file.  Relative paths are resolved
    # against the project root by ``core.db.get_database_path``.
    database_url: str = field(default_factory=lambda: os.getenv("DATABASE_URL", "customers.db"))

    # Which customer store backs the service: ``sqlite`` or ``memory``.
    customer_dao: str = field(default_factory=lambda: os.getenv("CUSTOMER_DAO", "sqlite"))

    # Bind address used by ``run.py``.
    api_host: str = field(default_factory=lambda: os.getenv("API_HOST", "0.0.0.0"))
    api_port: int = field(default_factory=lambda: int(os.getenv("API_PORT", "8000")))


# Instantiated once so other modules can import it.  ``create_app``
# accepts an explicit ``Settings`` instance, which takes precedence.
settings = Settings()
