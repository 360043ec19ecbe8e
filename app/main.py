from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException
from sqlalchemy.exc import SQLAlchemyError
from contextlib import asynccontextmanager
from typing import Optional
from app.config import Settings, get_settings
from app.database import create_engine_from_settings, create_session_factory, init_db
from app.core.errors import ApiError
from app.core.security import CredentialGate
from app.core.uploads import PhotoStorage
from app.api.v1 import auth, drivers, works
import logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown events"""
    # Startup
    await init_db(app.state.engine)
    yield
    # Shutdown
    await app.state.engine.dispose()


def register_exception_handlers(app: FastAPI):
    """Every error leaves the API as {"error": message}"""

    @app.exception_handler(ApiError)
    async def api_error_handler(request: Request, exc: ApiError):
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        fields = ", ".join(
            ".".join(str(part) for part in err["loc"] if part != "body") or "body"
            for err in exc.errors()
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": f"Invalid request: {fields}"},
        )

    @app.exception_handler(SQLAlchemyError)
    async def store_error_handler(request: Request, exc: SQLAlchemyError):
        # Details go to the log only
        logger.error(f"Database error on {request.method} {request.url.path}", exc_info=exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "DB error"},
        )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application with its own engine, credential gate and photo storage"""
    settings = settings or get_settings()
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = FastAPI(
        title="Driver Management API",
        description="Drivers and their daily work sessions",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.engine = create_engine_from_settings(settings)
    app.state.session_factory = create_session_factory(app.state.engine)
    app.state.credential_gate = CredentialGate.from_settings(settings)
    app.state.photo_storage = PhotoStorage(settings.UPLOAD_DIR)

    cors_origins = settings.cors_origins
    if settings.ENVIRONMENT == "development":
        logger.info(f"CORS allowed origins: {cors_origins}")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_credentials="*" not in cors_origins,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=1000)

    register_exception_handlers(app)

    @app.get("/", response_class=PlainTextResponse)
    async def root():
        """Root endpoint"""
        return "Driver Management API"

    @app.get("/health")
    async def health_check():
        """Health check endpoint"""
        return {
            "status": "healthy",
            "environment": settings.ENVIRONMENT
        }

    app.include_router(auth.router, prefix="/api/auth", tags=["Authentication"])
    app.include_router(drivers.router, prefix="/api/drivers", tags=["Drivers"])
    app.include_router(works.router, prefix="/api/works", tags=["Work Sessions"])

    # Uploaded profile photos, no auth
    upload_dir = app.state.photo_storage.ensure_dir()
    app.mount("/uploads", StaticFiles(directory=upload_dir), name="uploads")

    return app


def run():
    """Console entry point: serve on HOST:PORT"""
    import uvicorn

    settings = get_settings()
    uvicorn.run(create_app(settings), host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
