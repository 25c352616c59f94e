import logging
import os
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Any, AsyncGenerator, Dict

from dotenv import load_dotenv
from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.ext.asyncio import AsyncSession

from contest.database import close_db, get_db, init_db
from contest.routers.exports import router as exports_router
from contest.routers.participants import router as participants_router
from contest.routers.registration import router as registration_router
from contest.routers.scores import router as scores_router
from contest.services.list_participants_service import ListParticipantsService

# Load environment variables
load_dotenv()

# Environment variable parsing
ENV = os.getenv("ENV")
ENV_IS_PROD = ENV == "prod"
COMMIT_HASH = os.getenv("COMMIT_HASH")
if not COMMIT_HASH and ENV_IS_PROD:
    raise ValueError("COMMIT_HASH is required for production environments")

APP_ADDR = os.getenv("HOST", "0.0.0.0")
APP_PORT = int(os.getenv("PORT", "8000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "*").split(",")
    if origin.strip()
]

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Handle application startup and shutdown."""
    # Startup
    await init_db()
    logger.info("Contest service started (environment=%s)", ENV)
    yield
    # Shutdown
    await close_db()


app = FastAPI(
    title="Contest Registration Service",
    description="Participant registration, scoring and leaderboard API",
    version=COMMIT_HASH or "dev",
    lifespan=lifespan,
)

# The registration popup is embedded on other sites
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(registration_router, prefix="/api", tags=["registration"])
app.include_router(
    participants_router, prefix="/api/participants", tags=["participants"]
)
app.include_router(scores_router, prefix="/api", tags=["scores"])
app.include_router(exports_router, prefix="/api", tags=["exports"])


@app.get("/api/health")
async def health_check(db: AsyncSession = Depends(get_db)) -> Dict[str, Any]:
    """Health check endpoint with participant counts."""
    service = ListParticipantsService(db)
    try:
        participant_count = await service.count_participants()
        scored_participants = await service.count_scored_participants()
        db_status = "connected"
    except Exception:
        logger.exception("Health check could not reach the database")
        participant_count = None
        scored_participants = None
        db_status = "disconnected"

    return {
        "status": "healthy" if db_status == "connected" else "degraded",
        "participantCount": participant_count,
        "scoredParticipants": scored_participants,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "database": db_status,
        "environment": ENV,
        "version": COMMIT_HASH,
    }


# If run directly, start the server
if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=APP_ADDR, port=APP_PORT)
