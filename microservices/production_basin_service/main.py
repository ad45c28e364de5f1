"""
Production Basin Service Main Application

FastAPI application for production basin user assignment.
Port: 3340
"""

import logging
import os
from contextlib import asynccontextmanager
from typing import Any, Optional, Type

from fastapi import Depends, FastAPI, HTTPException, Request, status
from fastapi.responses import JSONResponse

from core.config import load_settings
from core.errors import PlatformError, ShapeError
from core.logger import setup_from_config

from .factory import SERVICE_NAME, ProductionBasinServiceFactory
from .models import AssignmentResponse, FieldError, HealthResponse
from .production_basin_service import ProductionBasinService
from .protocols import (
    AssignmentNotAuthorizedError,
    ProductionBasinServiceError,
    UnassignmentNotAuthorizedError,
)

logger = logging.getLogger(__name__)

SERVICE_PORT = int(os.getenv("SERVICE_PORT", "3340"))
SERVICE_VERSION = "1.0.0"

# Roles allowed to change basin membership
BASIN_MANAGER_ROLES = ("technical_admin", "basin_admin")

# Global factory instance
factory: Optional[ProductionBasinServiceFactory] = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager"""
    global factory

    settings = load_settings()
    setup_from_config(settings.logging, SERVICE_NAME)
    logger.info(f"Starting {SERVICE_NAME} on port {SERVICE_PORT}")

    factory = ProductionBasinServiceFactory(settings)
    await factory.initialize()

    yield

    logger.info(f"Shutting down {SERVICE_NAME}")
    await factory.close()
    factory = None


app = FastAPI(
    title="Production Basin Service",
    description="Assignment of users to production basins",
    version=SERVICE_VERSION,
    lifespan=lifespan,
)


# ====================
# Exception Handlers
# ====================


@app.exception_handler(PlatformError)
async def platform_error_handler(request: Request, exc: PlatformError):
    if exc.status >= 500:
        logger.error(f"{exc.code}: {exc.message}")
    return JSONResponse(status_code=exc.status, content=exc.to_dict())


# ====================
# Dependencies
# ====================


def get_service() -> ProductionBasinService:
    """Get production basin service from factory"""
    if not factory:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Service not initialized",
        )
    return factory.service


def basin_manager_required(error: Type[ProductionBasinServiceError], message: str):
    """Role comes from the gateway (X-User-Role); only basin managers pass"""

    def require_basin_manager(request: Request) -> str:
        role = request.headers.get("X-User-Role", "")
        if role not in BASIN_MANAGER_ROLES:
            raise error(message)
        return role

    return require_basin_manager


require_assign_role = basin_manager_required(
    AssignmentNotAuthorizedError,
    "Vous n'êtes pas autorisé à assigner des utilisateurs à ce bassin",
)
require_unassign_role = basin_manager_required(
    UnassignmentNotAuthorizedError,
    "Vous n'êtes pas autorisé à désassigner des utilisateurs de ce bassin",
)


async def read_json_body(request: Request) -> Any:
    try:
        return await request.json()
    except ValueError:
        raise ShapeError(
            "Données de validation invalides",
            errors=[FieldError(
                field="body",
                message="Le corps de la requête doit être du JSON valide",
                rule="json",
            )],
        )


# ====================
# Health Endpoints
# ====================


@app.get("/health", response_model=HealthResponse, tags=["Health"])
async def health_check():
    """Health check endpoint"""
    dependencies = {}
    if factory:
        try:
            db_healthy = await factory.repository.health_check()
            dependencies["postgres"] = "healthy" if db_healthy else "unhealthy"
        except Exception:
            dependencies["postgres"] = "unhealthy"

    return HealthResponse(
        status="healthy",
        service=SERVICE_NAME,
        port=SERVICE_PORT,
        version=SERVICE_VERSION,
        dependencies=dependencies,
    )


# ====================
# Assignment Endpoints
# ====================


@app.post(
    "/api/v1/production-basins/{basin_id}/assign-users",
    response_model=AssignmentResponse,
    tags=["Production Basins"],
)
async def assign_users(
    basin_id: str,
    body: Any = Depends(read_json_body),
    role: str = Depends(require_assign_role),
    service: ProductionBasinService = Depends(get_service),
):
    """Assign users to a production basin"""
    basin = await service.assign_users(basin_id, body)
    return AssignmentResponse(
        code="PRODUCTION_BASIN_USERS_ASSIGNED",
        message="Utilisateurs assignés au bassin de production avec succès",
        data={"basin": basin.model_dump(by_alias=True)},
    )


@app.post(
    "/api/v1/production-basins/{basin_id}/unassign-users",
    response_model=AssignmentResponse,
    tags=["Production Basins"],
)
async def unassign_users(
    basin_id: str,
    body: Any = Depends(read_json_body),
    role: str = Depends(require_unassign_role),
    service: ProductionBasinService = Depends(get_service),
):
    """Remove users from a production basin"""
    basin = await service.unassign_users(basin_id, body)
    return AssignmentResponse(
        code="PRODUCTION_BASIN_USERS_UNASSIGNED",
        message="Utilisateurs désassignés du bassin de production avec succès",
        data=basin.model_dump(by_alias=True),
    )


# ====================
# Main Entry Point
# ====================


def main():
    """Run the service"""
    import uvicorn

    settings = load_settings()
    uvicorn.run(
        "microservices.production_basin_service.main:app",
        host=settings.default_host,
        port=SERVICE_PORT,
        log_level="debug" if settings.debug else "info",
    )


if __name__ == "__main__":
    main()
