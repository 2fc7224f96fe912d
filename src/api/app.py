import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response

from src.app.services.feedback_tracker import FeedbackTracker

from .error import ClientError, ServerError

logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
    "Access-Control-Allow-Methods": "GET, POST, DELETE, OPTIONS",
}


def _error_body(code: str, message: str, extra: dict) -> dict:
    body = {"error": message, "code": code}
    body.update({key: value for key, value in extra.items() if value is not None})
    return jsonable_encoder(body)


async def handle_client_error(request: Request, exc: ClientError):
    logger.warning(f"Client error: {exc.base_error.code} {exc.base_error.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(exc.base_error.code, exc.base_error.message, exc.extra),
    )


async def handle_server_error(request: Request, exc: ServerError):
    logger.error(f"Server error: {exc.base_error.code} {exc.base_error.message}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_error_body(exc.base_error.code, exc.base_error.message, exc.extra),
    )


async def handle_validation_error(request: Request, exc: RequestValidationError):
    logger.warning(f"Invalid request to {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_error_body(
            "INVALID_REQUEST", "Invalid request body", {"details": exc.errors()}
        ),
    )


async def handle_unexpected_error(request: Request, exc: Exception):
    # Runs outside the CORS middleware
    logger.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_error_body("INTERNAL_ERROR", "Internal server error", {}),
        headers=CORS_HEADERS,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    app.state.feedback_tracker.clear()


def create_app(ApplicationConfig) -> FastAPI:
    logging.basicConfig(
        level=ApplicationConfig.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = FastAPI(title="Tenant Site API", version="0.1.0", lifespan=lifespan)
    app.state.feedback_tracker = FeedbackTracker()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ApplicationConfig.CORS_ORIGINS,
        allow_credentials=ApplicationConfig.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def track_api_errors(request: Request, call_next):
        tracker: FeedbackTracker = request.app.state.feedback_tracker
        try:
            response = await call_next(request)
        except Exception as exc:
            tracker.record_api_error(str(request.url), request.method, str(exc) or "Server error")
            raise
        if response.status_code >= 400 and "/feedback/" not in request.url.path:
            tracker.record_api_error(
                str(request.url), request.method, f"HTTP {response.status_code}", response.status_code
            )
        return response

    if ApplicationConfig.ENABLE_LOGGING_MIDDLEWARE:

        @app.middleware("http")
        async def log_requests(request: Request, call_next):
            started = time.perf_counter()
            response = await call_next(request)
            elapsed_ms = (time.perf_counter() - started) * 1000
            logger.info(
                f"{request.method} {request.url.path} -> {response.status_code} ({elapsed_ms:.1f}ms)"
            )
            return response

    # Outermost middleware: OPTIONS never reaches the routers
    @app.middleware("http")
    async def answer_preflight(request: Request, call_next):
        if request.method == "OPTIONS":
            return Response(
                status_code=status.HTTP_200_OK,
                headers={**CORS_HEADERS, "Content-Type": "application/json"},
            )
        return await call_next(request)

    from src.api.routes import (
        admin_login,
        checkout,
        feedback,
        health_check,
        notifications,
        parsing,
        portal,
        registration,
        site,
    )

    prefix = ApplicationConfig.API_PREFIX
    app.include_router(health_check.router, prefix=prefix, tags=["Health"])
    app.include_router(registration.router, prefix=prefix)
    app.include_router(checkout.router, prefix=prefix)
    app.include_router(notifications.router, prefix=prefix)
    app.include_router(portal.router, prefix=prefix)
    app.include_router(parsing.router, prefix=prefix)
    app.include_router(admin_login.router, prefix=prefix)
    app.include_router(site.router, prefix=prefix)
    app.include_router(feedback.router, prefix=prefix)

    app.add_exception_handler(ClientError, handle_client_error)
    app.add_exception_handler(ServerError, handle_server_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)

    return app
