"""
High-level use cases for the Persons API.

Each service module orchestrates repositories/adapters to implement business
rules (seed import, person lookup, person creation). Routers call these
services instead of touching the database directly.
"""
