import logging

from fastapi import FastAPI

from exam_portal.core.config import LOG_LEVEL
from exam_portal.core.logging_middleware import LoggingMiddleware
from exam_portal.db.init_db import init_db
from exam_portal.routers.faculty_dashboard import router as faculty_dashboard_router
from exam_portal.routers.results import router as results_router
from exam_portal.routers.scripts import router as scripts_router

logging.basicConfig(level=LOG_LEVEL)

app = FastAPI(title="Exam Grading Portal")

# Middleware
app.add_middleware(LoggingMiddleware)


# Health check
@app.get("/health")
def health():
    return {"status": "ok"}


# Startup event: build the in-memory store and load the roster
@app.on_event("startup")
def on_startup():
    init_db()


# Include routers
app.include_router(scripts_router, prefix="/scripts", tags=["scripts"])
app.include_router(results_router, tags=["results"])

# Faculty dashboard + subject directory (routes define full paths)
app.include_router(faculty_dashboard_router)
