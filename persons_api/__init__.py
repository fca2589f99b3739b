"""Persons API: CRUD service for persons seeded from a CSV file."""
