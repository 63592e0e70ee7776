from dotenv import load_dotenv

# Load environment variables before config is read
load_dotenv()

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from palette_harmony.config import config
from palette_harmony.schemas import HealthResponse
from palette_harmony.api.v1 import router as v1_router
from palette_harmony.utils.logging import get_logger

logger = get_logger()

app = FastAPI(
    title="Palette Harmony",
    description="Color conversion, sorting and harmony suggestions over user color collections",
    version=config.VERSION
)

allowed_origins = config.allowed_origins()
if allowed_origins:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"]
    )

app.include_router(v1_router)

logger.info("Palette Harmony service initialized", extra={
    "service": config.SERVICE_NAME,
    "version": config.VERSION,
    "metrics_enabled": config.METRICS_ENABLED
})


@app.get("/healthz", response_model=HealthResponse)
async def healthz():
    """Service health check."""
    return HealthResponse(ok=True, version=config.VERSION, service=config.SERVICE_NAME)
