"""
Top‑level router for version 1 of the catalog API.

When a new resource is added, include its router here.
"""

from fastapi import APIRouter

from .endpoints import health, products, users

router = APIRouter()

router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(users.router, prefix="/users", tags=["users"])
router.include_router(products.router, prefix="/products", tags=["products"])
