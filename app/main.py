from fastapi import FastAPI
from fastapi.openapi.utils import get_openapi
from app.api.routes.analyze import router as analyze_router
from app.api.routes.parse import router as parse_router
from app.core.config import settings
from app.core.logging_config import setup_logging

setup_logging(settings.LOG_LEVEL)

app = FastAPI(
    title="Resume Parser (Confidence-Scored Extraction)",
    description="Deterministic resume parsing engine that structures plain resume text into personal info, experience, education and skills, each with confidence scores and validation issues",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json"
)

app.include_router(parse_router)
app.include_router(analyze_router)

@app.get("/", tags=["health"])
def root():
    return {"service": settings.APP_NAME, "status": "running"}

@app.get("/health", tags=["health"])
def health():
    return {"status": "ok"}

def custom_openapi():
    """Generate OpenAPI schema with custom settings."""
    if app.openapi_schema:
        return app.openapi_schema
    openapi_schema = get_openapi(
        title="Resume Parser API",
        version="0.1.0",
        description="Resume parsing API with confidence scoring and validation",
        routes=app.routes,
    )
    app.openapi_schema = openapi_schema
    return app.openapi_schema

app.openapi = custom_openapi
