"""
Receipt Points Service — FastAPI application entry-point.
"""
import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import settings
from app.database import Base, engine

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s  %(name)-30s  %(levelname)-5s  %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: ensure data dir + tables exist
    os.makedirs(settings.DATA_DIR, exist_ok=True)
    # Import models so Base.metadata knows about them
    import app.models  # noqa: F401
    Base.metadata.create_all(bind=engine)
    logger.info(
        "Database tables ready (%s), receipt store: %s",
        settings.DATABASE_URL,
        settings.RECEIPT_STORE,
    )
    yield
    logger.info("Shutting down")


app = FastAPI(
    title="Receipt Points",
    description="Receipt → validation → loyalty points",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def invalid_receipt_body(request: Request, exc: RequestValidationError):
    # Unbindable receipts get the same answer as receipts that fail scoring
    if request.url.path == "/receipts/process":
        logger.warning("Rejected receipt body: %s", exc.errors())
        return JSONResponse(status_code=400, content={"detail": INVALID_RECEIPT})
    return await request_validation_exception_handler(request, exc)


@app.get("/")
async def root():
    return {"service": "Receipt Points", "version": "0.1.0", "status": "running"}


@app.get("/health")
async def health_check():
    return {"status": "healthy"}


# ── Register API router ──────────────────────────────────────────────────
from app.routers.receipts import INVALID_RECEIPT, router as receipts_router  # noqa: E402

app.include_router(receipts_router, tags=["Receipts"])
