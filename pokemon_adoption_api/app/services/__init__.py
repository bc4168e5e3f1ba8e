"""
Service layer abstraction.

Each service encapsulates business logic for a domain and talks to
the SQLite store through ``core.db``.  API handlers stay thin and only
translate between HTTP and service calls.
"""
