from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from slowapi.errors import RateLimitExceeded
from starlette.middleware.cors import CORSMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from timing_asgi import TimingMiddleware  # type: ignore
from timing_asgi.integrations import StarletteScopeToName  # type: ignore

from comparison_center.core import config
from comparison_center.core.database.engine import init_db
from comparison_center.core.errors import ComparisonCenterError, ErrorKind
from comparison_center.core.metrics import METRIC_NAME, RequestMetrics
from comparison_center.core.rate_limit import limiter
from comparison_center.core.schemas import ErrorResponse
from comparison_center.features.comparisons.routes import router as comparison_router
from comparison_center.features.custom_options.routes import router as custom_option_router
from comparison_center.features.objects.routes import router as object_router
from comparison_center.utils import get_logger


log = get_logger(__name__)
log.info("Initializing server")


@asynccontextmanager
async def lifespan(_app: FastAPI):
    """Initialize database on application startup."""
    log.info("Initializing database...")
    await init_db()
    log.info("Database initialized successfully")
    yield


app = FastAPI(
    title="Comparison Center",
    description="Catalog of comparisons, their objects and custom option values",
    version="0.1.0",
    docs_url="/docs" if config.ENABLE_DOCS else None,
    redoc_url="/redoc" if config.ENABLE_DOCS else None,
    openapi_url="/openapi.json" if config.ENABLE_DOCS else None,
    lifespan=lifespan,
)
app.state.limiter = limiter

STATUS_BY_KIND = {
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.ALREADY_EXISTS: 400,
    ErrorKind.VALIDATION: 400,
    ErrorKind.UNAVAILABLE: 503,
}


metrics = RequestMetrics()
app.add_middleware(TimingMiddleware, client=metrics, metric_namer=StarletteScopeToName("main", app))

if config.ENABLE_DOCS:
    log.warning("Docs enabled")
if config.ALLOW_ORIGIN:
    log.warning("Setting allow origin to %s", config.ALLOW_ORIGIN)
    origins = [config.ALLOW_ORIGIN]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(_request: Request, exc: RequestValidationError):
    errors = dict()
    for error in exc.errors():
        if "loc" not in error or "msg" not in error:
            continue
        key = error["loc"][-1]
        if key == "__root__":
            key = "root"
        errors[key] = error["msg"]
    log.info("Request validation error %s", errors)
    return JSONResponse(status_code=400, content=jsonable_encoder(errors))


@app.exception_handler(ComparisonCenterError)
async def comparison_center_exception_handler(request: Request, exc: ComparisonCenterError):
    status_code = STATUS_BY_KIND[exc.kind]
    if exc.kind == ErrorKind.UNAVAILABLE:
        log.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    else:
        log.info("%s %s rejected: %s", request.method, request.url.path, exc.message)
    body = ErrorResponse(error=exc.kind.value, detail=exc.message)
    return JSONResponse(status_code=status_code, content=body.model_dump())


@app.exception_handler(RateLimitExceeded)
def rate_limit_exceeded_handler(_request: Request, _exc: RateLimitExceeded) -> Response:
    return JSONResponse({"error": "You are going too fast"}, status_code=429)


@app.get("/")
async def root():
    """Root endpoint - API health check."""
    return {
        "message": "Comparison Center API",
        "version": "0.1.0",
        "status": "online",
        "docs": "/docs" if config.ENABLE_DOCS else None,
        "features": {
            "comparisons": "Named comparisons with an ordered list of custom options",
            "custom_options": "Reusable attributes objects can be compared on",
            "objects": "Rated entries of a comparison with per-option values and a photo",
        }
    }


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}


@app.get("/metrics")
async def request_metrics():
    """Request duration summaries by route and status."""
    return {METRIC_NAME: metrics.snapshot()}


app.include_router(comparison_router, prefix="/comparisons", tags=["comparisons"])
app.include_router(custom_option_router, prefix="/custom-options", tags=["custom-options"])
app.include_router(object_router, prefix="/objects", tags=["objects"])
