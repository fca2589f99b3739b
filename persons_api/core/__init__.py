"""
Core utilities shared across the Persons API.

This package hosts configuration helpers (env vars, paths, feature flags) and
cross-cutting concerns such as logging setup. Services and routers should read
settings from here instead of touching os.environ directly.
"""
