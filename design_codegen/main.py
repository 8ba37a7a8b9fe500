"""
Main application entry point - FastAPI app instance and configuration.
Run with: uvicorn design_codegen.main:app --reload
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from design_codegen.core.config import settings
from design_codegen.monitoring.logger import configure_logging
from design_codegen.routers import classes, generation, normalize, prompts, scene

configure_logging("DEBUG" if settings.DEBUG else settings.LOG_LEVEL)

# ---------------------------------------------------------------------------
# CREATE FASTAPI APPLICATION
# ---------------------------------------------------------------------------
app = FastAPI(
    title=settings.APP_NAME,
    docs_url="/docs",
    redoc_url="/redoc",
)

# ---------------------------------------------------------------------------
# CORS MIDDLEWARE
# ---------------------------------------------------------------------------
# Design-tool plugin UIs run in a sandboxed iframe with a "null" origin.
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

# ---------------------------------------------------------------------------
# REGISTER ROUTERS
# ---------------------------------------------------------------------------
# scene.router: /scene/analyze, /scene/style-info
# normalize.router: /normalize/html, /normalize/scss
# classes.router: /classes/markup, /classes/stylesheet
# prompts.router: /prompts/html, /prompts/scss
# generation.router: /generation/html, /generation/scss
app.include_router(scene.router)
app.include_router(normalize.router)
app.include_router(classes.router)
app.include_router(prompts.router)
app.include_router(generation.router)


# ---------------------------------------------------------------------------
# HEALTH CHECK ENDPOINT
# ---------------------------------------------------------------------------
@app.get("/health", tags=["health"])
def health_check():
    """
    Simple health check endpoint.

    Returns:
        {"status": "ok"}
    """
    return {"status": "ok"}
