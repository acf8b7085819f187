"""Main module for the FastAPI application."""
from contextlib import asynccontextmanager
from fastapi import Depends, FastAPI, HTTPException, status
from redis.exceptions import RedisError
from .config import settings
from .models import DistanceRequest, DistanceResponse
from .service import DistanceService
from .cache import cache_manager
from .logger import logger


# Service de distance (dépend du cache Redis)
distance_service: DistanceService = DistanceService(cache=cache_manager)
# Alias `service` pour les tests qui patchent `main.service`
service = distance_service


@asynccontextmanager
async def lifespan(_app: FastAPI):
    """Handle FastAPI startup and shutdown events."""
    logger.info("Starting up DistancePy API...")

    try:
        await cache_manager.ping()
        logger.info("Redis cache connected successfully.")
    except RedisError as e:
        logger.error("Failed to connect to Redis: {error}", error=e)

    yield

    logger.info("Shutting down DistancePy API...")
    await cache_manager.close()
    logger.info("Redis connection closed.")


app = FastAPI(
    title=settings.APP_NAME,
    lifespan=lifespan
)


def get_service() -> DistanceService:
    """Dépendance FastAPI pour obtenir l'instance du service de distance."""
    return service


@app.post("/distance", response_model=DistanceResponse)
async def distance(req: DistanceRequest, svc: DistanceService = Depends(get_service)):
    """POST /distance endpoint."""
    try:
        logger.info(
            "Received request: a={a!r} b={b!r} options={options}",
            a=req.a, b=req.b, options=req.options.model_dump()
        )
        return await svc.compute(a=req.a, b=req.b, options=req.options)
    except Exception as e:
        logger.exception("Error processing distance request")
        raise HTTPException(status_code=500, detail={"error": str(e)}) from e


@app.get("/")
def root():
    """Root endpoint to check API status."""
    return {"status": "ok", "message": "DistancePy API is running 🚀"}


@app.get("/health", status_code=status.HTTP_200_OK, tags=["Monitoring"])
async def health_check():
    """
    Health check endpoint.

    Checks connectivity to Redis.
    Returns 200 OK if it is reachable, otherwise 503 Service Unavailable.
    """
    services_status = {"redis": "ok"}
    try:
        await cache_manager.ping()
    except RedisError:
        services_status["redis"] = "error"
        logger.error("Health check failed: Redis connection error.")

    if "error" in services_status.values():
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=services_status)

    return services_status
