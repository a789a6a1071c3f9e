"""
Service layer abstraction.

Each service encapsulates business logic for a domain and talks to
storage only through a DAO, so the store can be swapped without
changing API handlers.
"""
