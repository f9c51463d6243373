"""
Health check endpoint.

The simulator has no database or broker behind it, so being able to
answer at all is the whole check. Load balancers and container
orchestrators still expect the endpoint to exist.
"""

from fastapi import APIRouter

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check() -> dict:
    return {"status": "healthy"}
