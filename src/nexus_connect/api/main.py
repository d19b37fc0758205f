import logging
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from mangum import Mangum
from starlette.exceptions import HTTPException as StarletteHTTPException

from nexus_connect.api import routers
from nexus_connect.core.config import settings
from nexus_connect.core.logging_config import configure_logging
from nexus_connect.models.submission import MISSION_TYPES

configure_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


app = FastAPI(
    title="Nexus Connect API",
    root_path=settings.ROOT_PATH
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

def _field_path(loc) -> str:
    # Drop the request section and the union tag pydantic adds for the mission type
    parts = [str(p) for p in loc if p not in ("body",) + MISSION_TYPES]
    return ".".join(parts)

@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    details = [
        {"field": _field_path(error.get("loc", ())), "message": error.get("msg", "")}
        for error in exc.errors()
    ]
    return JSONResponse(
        status_code=400,
        content={"error": "Validation error", "details": details}
    )

@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None)
    )

@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=exc)
    return JSONResponse(
        status_code=500,
        content={"error": "Internal server error"}
    )

@app.get("/")
def read_root():
    return {"message": "Welcome to the Nexus Connect API"}


app.include_router(routers.router)

handler = Mangum(app)
