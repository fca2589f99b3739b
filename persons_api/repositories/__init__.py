"""
Persistence adapters.

Services depend on the repository classes in this package rather than
touching SQLAlchemy sessions directly.
"""
