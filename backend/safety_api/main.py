import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi.errors import RateLimitExceeded

from safety_api.core.config import get_settings
from safety_api.core.exceptions import register_exception_handlers
from safety_api.core.logging_config import setup_logging
from safety_api.core.middleware import CorrelationIDMiddleware, RequestLoggingMiddleware
from safety_api.core.rate_limit import limiter, rate_limit_exceeded_handler
from safety_api.core.redis import close_redis, init_redis
from safety_api.routers import health, moderation

settings = get_settings()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    setup_logging()
    logger.info("Starting %s...", settings.app_name)
    await init_redis()
    logger.info("Redis connection initialized")
    yield
    logger.info("Shutting down %s...", settings.app_name)
    await close_redis()
    logger.info("Redis connection closed")


app = FastAPI(
    title=settings.app_name,
    description="Rule-based content safety screening for messages, profiles and reviews",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_middleware(RequestLoggingMiddleware)
# Added last so it runs first and the ID is set for every other layer
app.add_middleware(CorrelationIDMiddleware)

# Rate limiting (slowapi + Redis)
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

# Global exception handlers (domain exceptions → HTTP responses)
register_exception_handlers(app)

# Include routers
app.include_router(health.router, tags=["Health"])
app.include_router(
    moderation.router, prefix=f"{settings.api_prefix}/moderation", tags=["Moderation"]
)
