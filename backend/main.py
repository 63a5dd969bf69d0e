from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from database import engine, wait_for_database
from init_db import init_database
from api import areas, personas
from config.settings import settings
from constants import ServerConfig
from utils.error_handlers import ApiError, api_error_handler, validation_error_handler
from utils.logging_utils import configure_logging, set_logging_context, clear_logging_context
import logging
import sys
import uuid

# Configure logging (console, plus a rotating file when LOG_DIR is set)
LOG_FILE = configure_logging(settings.log_level, settings.log_dir)

logger = logging.getLogger(__name__)
logger.info(f"Logging initialized: {LOG_FILE or 'console only'}")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown events"""
    # Startup
    logger.info(f"Starting {ServerConfig.SERVICE_NAME} v{ServerConfig.VERSION}...")

    # Fails startup with DatabaseConnectionError once retries are exhausted
    wait_for_database(engine, settings.db_max_retries, settings.db_retry_delay)

    migrations = init_database(engine)
    logger.info(f"✅ Database schema ready ({migrations} column migration(s) applied)")

    yield

    # Shutdown
    logger.info("Shutting down...")
    engine.dispose()
    logger.info("Shutdown complete")


app = FastAPI(
    title="Areas y Personas API",
    description="API for managing organizational areas and the personas assigned to them",
    version=ServerConfig.VERSION,
    lifespan=lifespan
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_exception_handler(ApiError, api_error_handler)
app.add_exception_handler(RequestValidationError, validation_error_handler)


@app.middleware("http")
async def logging_context_middleware(request: Request, call_next):
    """Bind request id, method and path to every log record of the request"""
    request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
    set_logging_context(request_id=request_id, method=request.method, path=request.url.path)
    try:
        response = await call_next(request)
        response.headers["X-Request-ID"] = request_id
        logger.info(f"{request.method} {request.url.path} -> {response.status_code}")
        return response
    finally:
        clear_logging_context()


# Include routers
app.include_router(areas.router, prefix=ServerConfig.API_PREFIX, tags=["areas"])
app.include_router(personas.router, prefix=ServerConfig.API_PREFIX, tags=["personas"])


@app.get(f"{ServerConfig.API_PREFIX}/health")
def health_check():
    """Health check endpoint"""
    return {
        "status": "ok",
        "service": ServerConfig.SERVICE_NAME,
        "version": ServerConfig.VERSION
    }


@app.get("/")
def root():
    """Root endpoint - API only mode"""
    return {
        "message": "Areas y Personas API",
        "docs": "/docs",
        "health": f"{ServerConfig.API_PREFIX}/health"
    }


if __name__ == "__main__":
    import uvicorn
    import socket

    # Check if port is available
    def is_port_in_use(port: int) -> bool:
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
            try:
                s.bind((settings.host, port))
                return False
            except OSError:
                return True

    if is_port_in_use(settings.port):
        logger.error(f"❌ Port {settings.port} is already in use!")
        logger.error(f"   To fix: Run 'lsof -ti:{settings.port} | xargs kill -9'")
        sys.exit(1)

    logger.info(f"🚀 Starting {ServerConfig.SERVICE_NAME} on http://{settings.host}:{settings.port}...")
    uvicorn.run(app, host=settings.host, port=settings.port)
