# patron_api/adapters/api/routers/health.py
from typing import Dict

import structlog
from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, Response, status

from patron_api.core.ports.patron_repository import PatronRepository
from patron_api.shared.container import Container

logger = structlog.get_logger()

router = APIRouter(prefix="/health", tags=["System"])

@router.get("/live", status_code=status.HTTP_200_OK)
async def liveness_probe():
    """
    K8s Liveness Probe.
    Returns 200 OK if the service is operational.
    """
    return {"status": "ok", "service": "patron-api"}

@router.get("/ready", status_code=status.HTTP_200_OK)
@inject
async def readiness_probe(
    response: Response,
    repo: PatronRepository = Depends(Provide[Container.patron_repository]),
) -> Dict[str, str]:
    """
    K8s Readiness Probe.
    Returns 503 Service Unavailable while the database is unreachable.
    """
    health_status = {"database": "down"}

    try:
        if await repo.health_check():
            health_status["database"] = "up"
    except Exception as e:
        logger.error("health_check_failed", component="database", error=str(e))

    if not all(value == "up" for value in health_status.values()):
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
        logger.warning("readiness_probe_failed", status=health_status)

    return health_status
