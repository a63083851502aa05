import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from ..services.health import HealthService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("")
def health_check():
    try:
        return HealthService.check_health()
    except Exception as e:
        logger.exception("Health check failed")
        return JSONResponse(status_code=500, content={"success": False, "message": str(e)})
