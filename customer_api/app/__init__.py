"""
Application package initializer.

The application is split into layers: ``api`` (HTTP routing),
``services`` (business rules), ``dao`` (persistence), ``schemas``
(pydantic payloads) and ``core`` (configuration, logging, database
helpers and exceptions).  Versioning is handled by grouping routers
under the ``api/<version>/`` hierarchy.
"""
