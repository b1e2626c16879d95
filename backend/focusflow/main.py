"""FastAPI application entrypoint.

Responsibilities kept minimal:
  * App / lifespan initialization (logging, schema)
  * Router registration (auth plus the /rpc operations)
  * Cross-cutting concerns: metrics middleware & exception handlers

Run locally from the repository root with:

    uvicorn focusflow.main:app --app-dir backend --reload
"""

from contextlib import asynccontextmanager
from datetime import datetime, timezone
import logging
import os
from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from prometheus_client import Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST

from .api.auth import router as auth_router
from .api.inbox import router as inbox_router
from .api.daily_reviews import router as daily_reviews_router
from .api.weekly_tasks import router as weekly_tasks_router
from .api.automation_tasks import router as automation_tasks_router
from .api.dashboard import router as dashboard_router
from .db.session import ensure_tables
from .errors import BaseAppException, InternalServerError
from .logging_setup import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):  # pragma: no cover - simple startup path
    setup_logging()
    ensure_tables()
    logger.info("focusflow api ready")
    yield


# --- Optional .env loading (opt-in via APP_LOAD_DOTENV) ---
if os.getenv("APP_LOAD_DOTENV") in {"1", "true", "TRUE", "yes", "on"}:  # pragma: no cover
    from dotenv import load_dotenv
    # Respect existing env (override=False). Default search walks up from CWD.
    load_dotenv(override=False)

app = FastAPI(title="FocusFlow API", version="0.1.0", lifespan=lifespan)

# --- Metrics setup ---
REQUEST_COUNT = Counter(
    "focusflow_requests_total", "Total HTTP requests", ["method", "path", "status"]
)
REQUEST_LATENCY = Histogram(
    "focusflow_request_latency_seconds", "Latency of HTTP requests", ["method", "path"]
)

# --- CORS (for local frontend dev) ---
cors_origins_env = os.getenv("CORS_ALLOW_ORIGINS")
if cors_origins_env:
    allow_origins = [o.strip() for o in cors_origins_env.split(",") if o.strip()]
else:
    allow_origins = ["http://localhost:3000"]

app.add_middleware(
    CORSMiddleware,
    allow_origins=allow_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --- Register routers once ---
app.include_router(auth_router)
app.include_router(inbox_router)
app.include_router(daily_reviews_router)
app.include_router(weekly_tasks_router)
app.include_router(automation_tasks_router)
app.include_router(dashboard_router)


@app.middleware("http")
async def metrics_middleware(request: Request, call_next):
    path = request.url.path
    method = request.method
    # operation names are a fixed set; keep label cardinality bounded
    path_label = path if any(getattr(r, "path", None) == path for r in request.app.routes) else "other"
    with REQUEST_LATENCY.labels(method=method, path=path_label).time():
        try:
            response: Response = await call_next(request)
        except Exception:
            REQUEST_COUNT.labels(method=method, path=path_label, status="500").inc()
            raise
    REQUEST_COUNT.labels(method=method, path=path_label, status=str(response.status_code)).inc()
    return response


@app.get("/metrics")
def metrics():  # pragma: no cover - external scrape
    return Response(generate_latest(), media_type=CONTENT_TYPE_LATEST)


@app.get("/healthz")
async def health():
    return {"status": "ok"}


@app.get("/rpc/healthcheck")
def healthcheck():
    return {"status": "ok", "timestamp": datetime.now(timezone.utc).isoformat()}


@app.exception_handler(BaseAppException)
async def app_exception_handler(request: Request, exc: BaseAppException):
    if exc.http_status >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.http_status, content={"detail": exc.to_detail()})


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"detail": InternalServerError().to_detail()})
