import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from . import __version__
from .config import CORS_ORIGINS, LOG_LEVEL
from .database import create_tables
from .errors import NotFoundError, StorageError, ValidationError
from .logging_setup import setup_logging
from .routers import tasks

logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title="Task Tracker API",
    description="Single-tenant task list: create, list, complete and delete tasks",
    version=__version__,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(tasks.router, prefix="/api", tags=["tasks"])


@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
    return JSONResponse(
        status_code=422,
        content={"detail": jsonable_encoder(exc.errors) or str(exc)},
    )


@app.exception_handler(NotFoundError)
async def not_found_error_handler(request: Request, exc: NotFoundError):
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"detail": str(exc)},
    )


@app.exception_handler(StorageError)
async def storage_error_handler(request: Request, exc: StorageError):
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Storage failure"},
    )


# Create tables on startup
@app.on_event("startup")
def on_startup():
    setup_logging(LOG_LEVEL)
    create_tables()
    logger.info("Task Tracker API started")

@app.get("/")
def read_root():
    return {"message": "Task Tracker API"}

@app.get("/health")
def health_check():
    return {"status": "healthy"}
