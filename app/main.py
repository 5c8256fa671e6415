"""
Main FastAPI application for the credit paywall service.
Serves health, pricing catalogue, and metrics.
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import settings
from app.core.logging import configure_logging
from app.api.routes import health, pricing
from app.paywall.config import (
    HEADER_ACCESS_LEVEL,
    HEADER_LOCK_REASON,
    HEADER_PREVIEW,
    HEADER_PREVIEW_PERCENT,
)
from app.utils.metrics import router as metrics_router


configure_logging()

app = FastAPI(
    title="Credit Paywall API",
    description="Pricing catalogue and health for the credit paywall",
    version="1.0.0",
)

# CORS
origins = [o.strip() for o in settings.cors_origins.split(",") if o.strip()]
if not origins:
    origins = ["http://localhost:3000", "http://127.0.0.1:3000", "http://localhost:80"]
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=[HEADER_PREVIEW, HEADER_PREVIEW_PERCENT, HEADER_ACCESS_LEVEL, HEADER_LOCK_REASON],
)

# Routers
app.include_router(health.router, tags=["health"])
app.include_router(pricing.router)
app.include_router(metrics_router)
