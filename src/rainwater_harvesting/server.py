"""
HTTP endpoints for rainwater harvesting design.

Exposes the calculation endpoint and a health check, mapping the error
taxonomy onto HTTP status codes.
"""

import logging
from typing import Any, Optional

import uvicorn
from fastapi import Body, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from . import __version__
from .core import RainfallUnavailableError, ValidationError
from .services import DesignService

RAINFALL_UNAVAILABLE_MESSAGE = "Rainfall data not available for location"


def create_app(
    service: DesignService,
    service_name: str = "rainwater-harvesting",
    logger: Optional[logging.Logger] = None
) -> FastAPI:
    """Create the FastAPI application around a design service."""
    log = logger or logging.getLogger(__name__)

    app = FastAPI(
        title=service_name,
        version=__version__,
        description="Rainwater harvesting feasibility and design calculator"
    )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=400,
            content={"success": False, "message": "Request body must be valid JSON"}
        )

    @app.get("/health")
    def health():
        return {"status": "ok", "service": service_name, "version": __version__}

    # Plain def: FastAPI runs it in the threadpool, the rainfall fetch blocks
    @app.post("/api/calc")
    def calculate(payload: Any = Body(default=None)):
        try:
            result = service.run(payload)
        except ValidationError as e:
            return JSONResponse(
                status_code=400,
                content={"success": False, "message": str(e), "errors": e.errors}
            )
        except RainfallUnavailableError:
            return JSONResponse(
                status_code=404,
                content={"success": False, "message": RAINFALL_UNAVAILABLE_MESSAGE}
            )
        except Exception as e:
            log.error(f"Calculation failed: {e}", exc_info=True)
            return JSONResponse(
                status_code=500,
                content={"success": False, "message": "Internal error"}
            )

        return JSONResponse(content=result.to_dict())

    return app


def run_server(
    service: DesignService,
    host: str = "0.0.0.0",
    port: int = 10000,
    log_level: str = "INFO",
    logger: Optional[logging.Logger] = None
) -> None:
    """Serve the application with uvicorn until interrupted."""
    log = logger or logging.getLogger(__name__)
    app = create_app(service, logger=log)

    log.info(f"Starting HTTP server on {host}:{port}")

    uvicorn.run(
        app,
        host=host,
        port=port,
        log_level=log_level.lower(),
        access_log=True
    )
