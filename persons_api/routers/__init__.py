"""
FastAPI routers grouped by resource.

Each module exposes an APIRouter that is included in the application built by
persons_api.app.create_app.
"""
