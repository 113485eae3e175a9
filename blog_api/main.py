from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import Response
from starlette.exceptions import HTTPException as StarletteHTTPException
from blog_api.api.api import api_router
from blog_api.core.config import get_settings
from blog_api.core.errors import ApiError, to_api_error
from blog_api.db.database import create_tables
from blog_api.schemas.response import error_response
import logging
import json
import time
import traceback
import uuid

SENSITIVE_HEADERS = {"authorization", "cookie", "x-api-key"}

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events"""
    settings = get_settings()
    logging.basicConfig(level=settings.log_level)
    logger.info(f"Starting blog API (env={settings.app_env})")
    create_tables()
    yield

logger = logging.getLogger("fastapi")

app = FastAPI(title="Blog Public API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().allowed_origins,
    allow_methods=["GET", "POST", "PATCH", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
    max_age=86400,
)


def _redact(headers) -> dict:
    return {k: ("***" if k.lower() in SENSITIVE_HEADERS else v) for k, v in headers.items()}


@app.middleware("http")
async def log_requests(request: Request, call_next):
    request_id = request.headers.get("x-request-id") or str(uuid.uuid4())
    request.state.request_id = request_id
    logger.debug(f"Incoming request {request.method} {request.url.path} [{request_id}] headers={_redact(request.headers)}")

    started = time.perf_counter()
    body = await request.body()
    request_info = {
        "request_id": request_id,
        "url": str(request.url),
        "method": request.method,
        "headers": _redact(request.headers),
        "body": body.decode(errors="replace") if body else None,
        "query_params": dict(request.query_params)
    }

    try:
        # execute the request
        response = await call_next(request)
    except Exception as e:
        logger.error(
            f"Request failed with exception\n"
            f"Request: {json.dumps(request_info, indent=2)}\n"
            f"Error: {str(e)}\n"
            f"Traceback: {traceback.format_exc()}"
        )
        error = to_api_error(e)
        response = error_response(error.message, error.status_code)
        response.headers["X-Request-ID"] = request_id
        return response

    duration_ms = (time.perf_counter() - started) * 1000
    if response.status_code >= 400:
        response_body = b""
        async for chunk in response.body_iterator:
            response_body += chunk

        log = logger.error if response.status_code >= 500 else logger.warning
        log(
            f"Request failed with status {response.status_code} in {duration_ms:.1f}ms\n"
            f"Request: {json.dumps(request_info, indent=2)}\n"
            f"Response: {response_body.decode(errors='replace')}\n"
        )
        response = Response(
            content=response_body,
            status_code=response.status_code,
            headers=dict(response.headers),
            media_type=response.media_type
        )
    else:
        logger.info(f"{request.method} {request.url.path} -> {response.status_code} in {duration_ms:.1f}ms [{request_id}]")

    response.headers["X-Request-ID"] = request_id
    return response


@app.exception_handler(ApiError)
async def api_error_handler(request: Request, exc: ApiError):
    return error_response(exc.message, exc.status_code)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Malformed query parameters or request bodies"""
    messages = []
    for error in exc.errors():
        name = ".".join(str(part) for part in error.get("loc", ()) if part not in ("query", "path"))
        messages.append(f"{name}: {error.get('msg')}" if name else str(error.get("msg")))
    return error_response(", ".join(messages) or "Invalid request", 400)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return error_response(str(exc.detail), exc.status_code, headers=getattr(exc, "headers", None))


# register the API router
app.include_router(api_router)
