import logging
import time
from datetime import datetime

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from .core.config import Config
from .core.exceptions import BindingError
from .core.http import raw_query_from_request
from .core.middleware import binding_exception_handler, global_exception_handler, log_requests
from .services.student_operations import OPERATIONS, catalogue, run_operation

logger = logging.getLogger(__name__)


def handle_operation(name: str, request: Request) -> dict:
    """Bind the request's query for one operation and return the result view."""
    result = run_operation(name, raw_query_from_request(request))
    return result.to_dict()


# Initialize FastAPI
app = FastAPI(title="Request Parameter Binding API")

# CORS setup
ALLOWED_ORIGINS = Config.allowed_origins()

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "OPTIONS"],
    allow_headers=["*"],
)

@app.middleware("http")
async def _log_requests(request, call_next):
    return await log_requests(request, call_next)

@app.exception_handler(BindingError)
async def _binding_exception_handler(request, exc):
    return await binding_exception_handler(request, exc)

@app.exception_handler(Exception)
async def _global_exception_handler(request, exc):
    return await global_exception_handler(request, exc)


@app.get("/basic")
async def basic_binding(request: Request):
    """Required `sno` and `sname`, bound to arguments `no` and `name`."""
    return handle_operation("basic", request)


@app.get("/implicit")
async def implicit_binding(request: Request):
    """Required `sno` and `sname`, bound under their own names."""
    return handle_operation("implicit", request)


@app.get("/optional")
async def optional_param(request: Request):
    """Required nullable `sno`, optional `sname`."""
    return handle_operation("optional", request)


@app.get("/wrapper")
async def wrapper_vs_primitive(request: Request):
    """Optional nullable `age`: null when missing, never 0."""
    return handle_operation("wrapper", request)


@app.get("/default")
async def default_values(request: Request):
    """`sno` defaults to 0 and `sname` to Guest."""
    return handle_operation("default", request)


@app.get("/multi")
async def multiple_values(request: Request):
    """Repeated `city` bound as array, list and set."""
    return handle_operation("multi", request)


@app.get("/duplicate")
async def duplicate_test(request: Request):
    """Repeated `city` bound as list (keeps duplicates) and set (drops them)."""
    return handle_operation("duplicate", request)


@app.get("/csv")
async def csv_values(request: Request):
    """Repeated `city` bound to a plain string is joined with commas."""
    return handle_operation("csv", request)


@app.get("/mixed")
async def mixed_case(request: Request):
    """Defaulted `sno`, required `sname`, optional nullable `age`."""
    return handle_operation("mixed", request)


@app.get("/health")
async def health_check():
    """Basic health and configuration checks for the API."""
    health_start_time = time.time()

    try:
        Config.validate()
        health_duration = time.time() - health_start_time

        return {
            "status": "healthy",
            "service": "request-param-binding-api",
            "operations": len(OPERATIONS),
            "environment": Config.ENVIRONMENT,
            "timestamp": datetime.now().isoformat(),
            "response_time_ms": round(health_duration * 1000, 2)
        }
    except Exception as e:
        health_duration = time.time() - health_start_time
        logger.error(f"Health check failed: {str(e)} - Duration: {health_duration:.1f}s")

        return {
            "status": "unhealthy",
            "service": "request-param-binding-api",
            "timestamp": datetime.now().isoformat(),
            "error": str(e),
            "response_time_ms": round(health_duration * 1000, 2)
        }


@app.get("/")
async def root():
    """Return basic API information and the binding scenarios."""

    return {
        "service": "Request Parameter Binding API",
        "version": "1.0",
        "endpoints": {op.name: op.path for op in OPERATIONS.values()},
        "operations": catalogue(),
        "timestamp": datetime.now().isoformat(),
        "description": "Binds URL query parameters to typed arguments and reports the bound values"
    }
