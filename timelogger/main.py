# timelogger/main.py

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import os
import logging

from timelogger.api.home import router as home_router
from timelogger.api.names import router as names_router
from timelogger.api.project import router as project_router
from timelogger.api.task import router as task_router
from timelogger.api.time_record import router as time_record_router
from timelogger.api.timer import router as timer_router

from timelogger.core.settings import settings
from timelogger.core.exceptions import BaseAppException, ValidationFailed
from timelogger.database import SessionLocal, engine, init_db
from timelogger.initial_data import seed_database
from timelogger.schemas.response import ErrorItem, HealthStatus

# Logging
logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger("uvicorn.error")

app = FastAPI(
    title="Timelogger API",
    version="1.0.0",
    description="Projects, tasks and time registration",
)

# Middlewares
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["Location"],
)

# Routers
app.include_router(project_router)
app.include_router(task_router)
app.include_router(time_record_router)
app.include_router(timer_router)
app.include_router(names_router)
app.include_router(home_router)

@app.get("/health", tags=["Health"], response_model=HealthStatus)
def health():
    return HealthStatus()

@app.on_event("startup")
async def startup_event():
    logger.info("Starting Timelogger API")
    init_db()
    if settings.SEED_DATABASE:
        db = SessionLocal()
        try:
            seed_database(db)
        finally:
            db.close()

@app.on_event("shutdown")
async def shutdown_event():
    logger.info("Stopping Timelogger API")
    engine.dispose()

@app.exception_handler(BaseAppException)
async def app_exception_handler(request: Request, exc: BaseAppException):
    return JSONResponse(status_code=exc.status_code, content=exc.to_payload())

def _field_name(loc) -> str:
    # ("body", "projectId") -> "ProjectId"; list indexes are skipped
    parts = [str(p) for p in loc if not isinstance(p, int)]
    name = parts[-1] if parts else "Request"
    return name[:1].upper() + name[1:]

@app.exception_handler(RequestValidationError)
async def request_validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = [ErrorItem(name=_field_name(e.get("loc", ())), error=e.get("msg", "Invalid value")) for e in exc.errors()]
    logger.info(f"Malformed request {request.method} {request.url.path}: {[e.name for e in errors]}")
    return JSONResponse(status_code=ValidationFailed.status_code, content=ValidationFailed(errors).to_payload())

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "timelogger.main:app",
        host="0.0.0.0",
        port=int(os.getenv("PORT", 8000)),
        reload=settings.DEBUG,
    )
