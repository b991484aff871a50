from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging

from config.settings import settings

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
# quiet chatty libraries
logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
logging.getLogger("httpx").setLevel(logging.WARNING)


# ✅ middlewares
from middlewares.timing import TimingMiddleware
from middlewares.error_handler import add_error_handlers

# ✅ database
from database.db import init_db

# ✅ routers
from routers import (
    students, teachers, classes, subjects,
    scores, attendance, comments,
    grading,  # ← stateless grading core
    reports,  # ← class report / report card / dashboard
)

app = FastAPI(
    title=settings.APP_TITLE,
    description=settings.APP_DESCRIPTION,
    version=settings.APP_VERSION,
)

# ✅ CORS (frontend)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ✅ request latency (X-Latency-Ms response header)
app.add_middleware(TimingMiddleware)

# ✅ global error handlers (one JSON error envelope)
add_error_handlers(app)

# ✅ /v1 prefixed routers
app.include_router(students.router,   prefix="/v1")
app.include_router(teachers.router,   prefix="/v1")
app.include_router(classes.router,    prefix="/v1")
app.include_router(subjects.router,   prefix="/v1")
app.include_router(scores.router,     prefix="/v1")
app.include_router(attendance.router, prefix="/v1")
app.include_router(comments.router,   prefix="/v1")
app.include_router(grading.router,    prefix="/v1")
app.include_router(reports.router,    prefix="/v1")


@app.on_event("startup")
def _create_tables():
    init_db()


# ✅ health check
@app.get("/health")
def health_check():
    return {"status": "ok", "message": "API is running"}

# ✅ root
@app.get("/")
def root():
    return {"message": f"{settings.APP_TITLE} v{settings.APP_VERSION}"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
