# app/main.py
import time
from contextlib import asynccontextmanager
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api.api import api_router
from app.core.config import Settings, settings as default_settings
from app.core.exceptions import AppError
from app.core.logging import logger
from app.db.session import Database

REQUEST_LOCATIONS = ("body", "query", "path", "header", "cookie")


class SecurityHeadersMiddleware:
    def __init__(self, app):
        self.app = app

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        async def send_with_headers(message):
            if message["type"] == "http.response.start":
                message.setdefault("headers", [])
                message["headers"].extend([
                    (b"x-content-type-options", b"nosniff"),
                    (b"x-frame-options", b"DENY"),
                    (b"referrer-policy", b"no-referrer"),
                ])
            await send(message)

        await self.app(scope, receive, send_with_headers)


def format_validation_errors(errors) -> List[Dict[str, Any]]:
    """Flatten pydantic errors into [{field, message}] with camelCase field paths."""
    formatted = []
    for error in errors:
        loc = list(error.get("loc", ()))
        if loc and loc[0] in REQUEST_LOCATIONS:
            loc = loc[1:] or loc
        formatted.append({
            "field": ".".join(str(part) for part in loc),
            "message": error.get("msg", "Invalid value"),
        })
    return formatted


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=400,
            content={"message": "Validation error", "errors": format_validation_errors(exc.errors())},
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        message = exc.detail if exc.status_code != 404 else "Route not found"
        return JSONResponse(status_code=exc.status_code, content={"message": message}, headers=exc.headers)

    # Called directly by SlowAPIMiddleware, which expects a plain function
    @app.exception_handler(RateLimitExceeded)
    def rate_limit_handler(request: Request, exc: RateLimitExceeded):
        logger.warning(f"Rate limit exceeded: {request.client.host if request.client else 'unknown'}")
        return JSONResponse(
            status_code=429,
            content={"message": "Too many requests from this IP, please try again later."},
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.opt(exception=exc).error(f"Unhandled exception on {request.method} {request.url.path}")
        return JSONResponse(status_code=500, content={"message": "Internal server error"})


def create_app(app_settings: Optional[Settings] = None, database: Optional[Database] = None) -> FastAPI:
    app_settings = app_settings or default_settings
    database = database or Database(app_settings.SQLALCHEMY_DATABASE_URI)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        database.init()
        if app_settings.SEED_DATABASE:
            from app.db.init_db import init_db
            db = database.session()
            try:
                init_db(db)
            finally:
                db.close()
        logger.info(f"{app_settings.PROJECT_NAME} started ({app_settings.ENVIRONMENT})")
        yield
        database.shutdown()

    app = FastAPI(
        title=app_settings.PROJECT_NAME,
        openapi_url=f"{app_settings.API_PREFIX}/openapi.json",
        lifespan=lifespan,
    )
    app.state.db = database

    limiter = Limiter(
        key_func=get_remote_address,
        default_limits=[app_settings.RATE_LIMIT],
        enabled=app_settings.RATE_LIMIT_ENABLED,
    )
    app.state.limiter = limiter

    register_exception_handlers(app)

    app.add_middleware(SlowAPIMiddleware)
    app.add_middleware(SecurityHeadersMiddleware)

    # Set up CORS
    if app_settings.BACKEND_CORS_ORIGINS:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=[str(origin) for origin in app_settings.BACKEND_CORS_ORIGINS],
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    # Add logging middleware
    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start_time = time.time()
        response = await call_next(request)
        process_time = time.time() - start_time
        logger.info(f"Request: {request.method} {request.url.path} - Status: {response.status_code} - Time: {process_time:.2f}s")
        return response

    @app.get("/healthcheck")
    @limiter.exempt
    def healthcheck():
        return {"ok": True}

    app.include_router(api_router, prefix=app_settings.API_PREFIX)
    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn
    logger.info(f"Starting {default_settings.PROJECT_NAME} in development mode")
    uvicorn.run("app.main:app", host="0.0.0.0", port=8000, reload=True)
