import logging

from fastapi import FastAPI
from fastapi.openapi.utils import get_openapi

from resume_analyzer.core.config import settings
from resume_analyzer.api.routes.parse import router as parse_router

logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

SERVICE_NAME = "resume-analyzer"

OPENAPI_TAGS = [
    {"name": "parse", "description": "Upload a PDF or TXT resume and get the analyzed document back"},
    {"name": "health", "description": "Liveness and service info"},
]

app = FastAPI(
    title=settings.PROJECT_NAME,
    description=(
        "Rule-based resume analysis. Splits a resume into typed sections, recovers contact "
        "details, scores each detected skill by the context it appears in, and rates the "
        "document's completeness from 0 to 100."
    ),
    version=settings.PROJECT_VERSION,
    openapi_tags=OPENAPI_TAGS,
)

app.include_router(parse_router)
logger.info(
    f"{settings.PROJECT_NAME} {settings.PROJECT_VERSION} ready "
    f"(parse timeout {settings.PARSE_TIMEOUT_SECONDS}s, cache {'on' if settings.RESULT_CACHE_ENABLED else 'off'})"
)

@app.get("/", tags=["health"])
def root():
    return {"service": SERVICE_NAME, "version": settings.PROJECT_VERSION, "status": "running"}

@app.get("/health", tags=["health"])
def health():
    return {"status": "ok"}

def custom_openapi():
    """OpenAPI schema built once, with the tags listed in OPENAPI_TAGS order."""
    if app.openapi_schema:
        return app.openapi_schema
    app.openapi_schema = get_openapi(
        title=f"{settings.PROJECT_NAME} API",
        version=settings.PROJECT_VERSION,
        description=app.description,
        routes=app.routes,
        tags=OPENAPI_TAGS,
    )
    return app.openapi_schema

app.openapi = custom_openapi
