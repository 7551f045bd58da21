"""FastAPI application entry point."""
import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from rsvp_service.config import settings
from rsvp_service.database import Base, engine
from rsvp_service.errors import InvalidRSVPError, RecordNotFoundError, StorageError
from rsvp_service.routers import rsvps
from rsvp_service.schemas.rsvp import CacheStats
from rsvp_service.services.rsvp_cache import rsvp_cache

# Import all models so Base.metadata knows about them
from rsvp_service.models.rsvp import RSVP  # noqa: F401

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="RSVP Service",
    description="Event RSVP CRUD with a read-through cache for single-RSVP reads",
    version="0.1.0",
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS.split(","),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register routers
app.include_router(rsvps.router, prefix="/rsvps", tags=["RSVPs"])


@app.exception_handler(RecordNotFoundError)
def record_not_found_handler(request: Request, exc: RecordNotFoundError):
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": "RSVP not found"})


@app.exception_handler(StorageError)
def storage_error_handler(request: Request, exc: StorageError):
    logger.error("%s %s failed: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Storage failure"},
    )


@app.exception_handler(InvalidRSVPError)
def invalid_rsvp_handler(request: Request, exc: InvalidRSVPError):
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"detail": jsonable_encoder(exc.errors)},
    )


@app.on_event("startup")
def on_startup():
    """Create database tables on startup (for SQLite dev mode)."""
    if settings.DATABASE_URL.startswith("sqlite"):
        Base.metadata.create_all(bind=engine)


@app.get("/health")
def health_check():
    return {"status": "ok"}


@app.get("/cache/stats", response_model=CacheStats)
def cache_stats():
    """Hit/miss/eviction counters of the single-RSVP cache."""
    return rsvp_cache.stats()
