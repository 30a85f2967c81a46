"""
RentalFlow API - Main Application
FastAPI application with CORS, error handling, middleware, and logging
"""
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
import logging
from datetime import datetime, timezone
import traceback


from app.api.routes import (
    properties_router,
    tenants_router,
    payments_router,
    expenses_router,
    deposits_router,
    reports_router,
    audit_router,
)
from app.core.config import settings
from app.core.exceptions import RentalFlowError
from app.database import test_connection, init_db, close_db_connection


# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


# Initialize FastAPI app
app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description=settings.PROJECT_DESCRIPTION,
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json"
)


# ==================== MIDDLEWARE ====================


# Compression: GZip responses
app.add_middleware(GZipMiddleware, minimum_size=1000)


# CORS: the SPA runs on its own origin
allowed_origins = list(dict.fromkeys([settings.FRONTEND_URL, *settings.ALLOWED_ORIGINS]))

app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["*"],
    max_age=3600,
)


# ==================== ROUTERS ====================


app.include_router(properties_router, prefix=f"{settings.API_PREFIX}/properties", tags=["Properties"])
app.include_router(tenants_router, prefix=f"{settings.API_PREFIX}/tenants", tags=["Tenants"])
app.include_router(payments_router, prefix=f"{settings.API_PREFIX}/payments", tags=["Payments"])
app.include_router(expenses_router, prefix=f"{settings.API_PREFIX}/expenses", tags=["Expenses"])
app.include_router(deposits_router, prefix=f"{settings.API_PREFIX}/deposits", tags=["Deposits"])
app.include_router(reports_router, prefix=f"{settings.API_PREFIX}/reports", tags=["Reports"])
app.include_router(audit_router, prefix=f"{settings.API_PREFIX}/audit", tags=["Audit"])


# ==================== ERROR HANDLERS ====================


@app.exception_handler(RentalFlowError)
async def rentalflow_exception_handler(request: Request, exc: RentalFlowError):
    """Domain errors: validation, not found, occupied unit, persistence"""
    log = logger.error if exc.status_code >= 500 else logger.warning
    log(f"{type(exc).__name__} on {request.method} {request.url.path}: {exc.detail}")
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "success": False,
            "detail": exc.detail,
            "errors": exc.errors,
        }
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Malformed request bodies/params are reported like any other validation error"""
    errors = [
        {
            "field": ".".join(str(part) for part in error["loc"] if part not in ("body", "path", "query")),
            "message": error["msg"],
        }
        for error in exc.errors()
    ]
    logger.warning(f"Validation error on {request.url}: {errors}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "success": False,
            "detail": "Validation error",
            "errors": errors
        }
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    """Handle all unhandled exceptions"""
    logger.error(f"Unhandled exception: {exc}\n{traceback.format_exc()}")

    # Don't expose internal errors in production
    error_message = str(exc) if settings.DEBUG else "Internal server error"

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "success": False,
            "detail": error_message,
            "timestamp": _now()
        }
    )


# ==================== HEALTH & STATUS ENDPOINTS ====================


@app.get("/", tags=["System"])
async def root():
    """Root endpoint - API information"""
    return {
        "success": True,
        "message": f"Welcome to {settings.PROJECT_NAME}",
        "version": settings.VERSION,
        "docs": "/api/docs",
        "status": "operational",
    }


@app.get("/health", tags=["System"])
def health_check():
    """Health check endpoint for monitoring"""
    connection_ok = test_connection()
    return {
        "success": True,
        "status": "healthy" if connection_ok else "degraded",
        "database": "connected" if connection_ok else "disconnected",
        "timestamp": _now(),
    }


# ==================== STARTUP & SHUTDOWN ====================


@app.on_event("startup")
async def startup_event():
    """Run on application startup"""
    logger.info("=" * 70)
    logger.info(f"Starting {settings.PROJECT_NAME} v{settings.VERSION}")
    logger.info("=" * 70)

    if not test_connection():
        logger.warning("[WARN] Database connection failed - continuing in degraded mode")
    if not init_db():
        logger.warning("[WARN] Database init returned False - tables may not exist")

    logger.info("[OK] Application startup complete!")


@app.on_event("shutdown")
async def shutdown_event():
    """Run on application shutdown"""
    logger.info("Shutting down application...")
    close_db_connection()
    logger.info("Application shutdown complete")


# ==================== REQUEST LOGGING ====================


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log all incoming requests"""
    if request.url.path == "/health":
        return await call_next(request)

    start_time = datetime.now(timezone.utc)
    client = request.client.host if request.client else "-"
    logger.info(f">> {request.method} {request.url.path} - {client}")

    try:
        response = await call_next(request)
        duration = (datetime.now(timezone.utc) - start_time).total_seconds()
        logger.info(f"<< {request.method} {request.url.path} - {response.status_code} ({duration:.2f}s)")
        return response
    except Exception as e:
        duration = (datetime.now(timezone.utc) - start_time).total_seconds()
        logger.error(f"[ERROR] {request.method} {request.url.path} - Error: {str(e)} ({duration:.2f}s)")
        raise
