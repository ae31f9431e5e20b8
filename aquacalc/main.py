from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging

from .config import settings
from .database import engine, Base
from .routers import calculators, preferences, feeding_logs, reports

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("aquacalc")

# Create tables
Base.metadata.create_all(bind=engine)

app = FastAPI(
    title="AquaCalc",
    description="Aquaculture calculators: water, fish, feed, health, environment and business tools",
    version="1.0.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# API routes
app.include_router(calculators.router, prefix="/api")
app.include_router(preferences.router, prefix="/api")
app.include_router(feeding_logs.router, prefix="/api")
app.include_router(reports.router, prefix="/api")

logger.info(f"{settings.APP_NAME} started with {len(calculators.catalog())} calculators")


@app.get("/health")
def health():
    return {"status": "ok", "app": settings.APP_NAME}
