"""
Top‑level router for the API.

Aggregates the domain routers; ``main`` mounts it under ``/api``.
"""

from fastapi import APIRouter

from .endpoints import flight_registrations

router = APIRouter()

# The flight registration router defines its own "/register-flight" paths.
router.include_router(flight_registrations.router, tags=["flight registrations"])
