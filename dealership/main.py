"""
FastAPI application entry point.
Includes request logging, error handlers mapping to {"error": ...}, and all routers.
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from dealership.routers import health, parts, sales, subtypes, users, vehicle_parts, vehicles
from dealership.database import create_tables
from dealership.config import settings
from dealership.errors import DealershipError
from dealership.utils.logger import get_logger
import time

logger = get_logger(__name__)

app = FastAPI(
    title="Dealership Inventory & Sales API",
    description="Vehicles, parts, customers and sales for a single dealership.",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

# ── CORS (browser client) ────────────────────────────────────────────────────
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ── Request Timing Middleware ────────────────────────────────────────────────
@app.middleware("http")
async def log_requests(request: Request, call_next):
    start = time.time()
    response = await call_next(request)
    duration = round((time.time() - start) * 1000, 2)
    logger.debug(f"{request.method} {request.url.path} → {response.status_code} ({duration}ms)")
    return response


# ── Error Handlers ───────────────────────────────────────────────────────────
@app.exception_handler(DealershipError)
async def dealership_error_handler(request: Request, exc: DealershipError):
    if exc.status_code >= 500:
        logger.error(f"{type(exc).__name__} on {request.url.path}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    problems = []
    for err in exc.errors():
        field = ".".join(str(part) for part in err["loc"][1:]) or err["loc"][0]
        problems.append(f"{field}: {err['msg']}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "; ".join(problems)},
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled exception on {request.url.path}: {exc}", exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": str(exc)},
    )


# ── Routers ──────────────────────────────────────────────────────────────────
app.include_router(users.router,           prefix="/api", tags=["Users"])
app.include_router(vehicles.router,        prefix="/api", tags=["Vehicles"])
app.include_router(subtypes.cars_router,   prefix="/api", tags=["Cars"])
app.include_router(subtypes.sedans_router, prefix="/api", tags=["Sedans"])
app.include_router(subtypes.suvs_router,   prefix="/api", tags=["SUVs"])
app.include_router(subtypes.trucks_router, prefix="/api", tags=["Trucks"])
app.include_router(parts.router,           prefix="/api", tags=["Parts"])
app.include_router(vehicle_parts.router,   prefix="/api", tags=["Vehicle Parts"])
app.include_router(sales.router,           prefix="/api", tags=["Sales"])
app.include_router(health.router,          prefix="/api", tags=["Health"])


# ── Startup ───────────────────────────────────────────────────────────────────
@app.on_event("startup")
async def startup():
    logger.info("Dealership backend starting up...")
    create_tables()
    logger.info("Database tables ready")
    if not settings.admin_login_enabled:
        logger.warning("ADMIN_EMAIL / ADMIN_PASSWORD not set, admin login disabled")
    logger.info(f"Listening on http://{settings.BACKEND_IP}:{settings.BACKEND_PORT}")
    logger.info("API docs at /docs")


@app.on_event("shutdown")
async def shutdown():
    logger.info("Dealership backend shutting down...")
