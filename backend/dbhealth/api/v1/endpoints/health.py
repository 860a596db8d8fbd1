"""
Health check endpoint.
Returns database connectivity status.
"""

from fastapi import APIRouter, Depends

from dbhealth.controllers.health_controller import HealthController
from dbhealth.deps.di_container import Container, get_container
from dbhealth.schemas.health import HealthResponse

router = APIRouter()


def get_health_controller(container: Container = Depends(get_container)) -> HealthController:
    """Build a health controller from the application container."""
    return container.health_controller()


@router.get("/health", response_model=HealthResponse, response_model_exclude_none=True)
async def get_health(
    controller: HealthController = Depends(get_health_controller),
) -> HealthResponse:
    """
    Health check endpoint.
    Always answers 200; database failures are reported in the body.
    """
    return await controller.get_health()
