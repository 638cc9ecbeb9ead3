"""
REST API main application.
Entry point for the FastAPI REST server.
"""

from fastapi import FastAPI
from fastapi.responses import JSONResponse
from sqlalchemy import text

from rest_api.core import (
    lifespan,
    configure_cors,
    register_middlewares,
    register_exception_handlers,
)
from rest_api.routers.customers import router as customers_router
from rest_api.routers.products import router as products_router
from shared.config.settings import settings
from shared.infrastructure.db import SessionLocal


app = FastAPI(
    title="CRUD REST API",
    description="Generic CRUD endpoints with a uniform notification error contract",
    version="0.1.0",
    lifespan=lifespan,
)

configure_cors(app)
register_middlewares(app)
register_exception_handlers(app)


# =============================================================================
# Health Check
# =============================================================================


@app.get(f"{settings.api_prefix}/health")
def health_check():
    """Basic health check endpoint."""
    return {
        "status": "healthy",
        "service": "rest-api",
        "environment": settings.environment,
    }


@app.get(f"{settings.api_prefix}/health/detailed")
def detailed_health_check():
    """
    Detailed health check that verifies connectivity to the database.
    Returns 503 when a dependency is down.
    """
    checks = {
        "service": "rest-api",
        "environment": settings.environment,
        "dependencies": {},
    }
    all_healthy = True

    try:
        with SessionLocal() as db:
            db.execute(text("SELECT 1"))
        checks["dependencies"]["database"] = {"status": "healthy"}
    except Exception as e:
        checks["dependencies"]["database"] = {"status": "unhealthy", "error": str(e)}
        all_healthy = False

    checks["status"] = "healthy" if all_healthy else "degraded"

    if not all_healthy:
        return JSONResponse(content=checks, status_code=503)

    return checks


# =============================================================================
# Include Routers
# =============================================================================

app.include_router(customers_router)
app.include_router(products_router)


# =============================================================================
# Development entry point
# =============================================================================

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "rest_api.main:app",
        host="0.0.0.0",
        port=settings.rest_api_port,
        reload=True,
    )
