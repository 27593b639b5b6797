"""FastAPI entry point: logging, middleware, error handlers and API routers."""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from coursereview.config import settings
from coursereview.database import Base, engine
import coursereview.models  # noqa: F401 - registers model metadata
from coursereview.middleware.error_handlers import register_exception_handlers
from coursereview.routers import auth, catalog, subjects, reviews, versions

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(
    title="Course Review",
    description="Course reviews with a change history for fields, subjects and reviews",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Register all routers
app.include_router(auth.router)
app.include_router(catalog.router)
app.include_router(subjects.router)
app.include_router(reviews.router)
app.include_router(versions.router)


@app.on_event("startup")
def ensure_schema():
    Base.metadata.create_all(bind=engine)


@app.get(f"{settings.API_PREFIX}/health")
def health_check():
    return {"status": "ok", "service": "Course Review"}
