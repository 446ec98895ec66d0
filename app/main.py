from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.openapi.utils import get_openapi
from fastapi.responses import HTMLResponse, JSONResponse
from loguru import logger

from hlvideo.config.settings import HLVConfig
from hlvideo.exceptions import ValidationException
from hlvideo.utils.logging_config import log_manager
from app.routers import brief, media

config = HLVConfig()
log_manager.configure(config.logging)
log_manager.enable_console()

APOLOGY_PAGE = """<!doctype html>
<html lang="ru">
<head><meta charset="utf-8"><title>High Level Video</title></head>
<body style="min-height:100vh;background:#000;color:#fff;display:flex;align-items:center;justify-content:center;font-family:sans-serif">
  <div style="max-width:32rem;text-align:center;padding:1.5rem">
    <h1>Упс, что-то пошло не так</h1>
    <p style="color:rgba(255,255,255,.7)">Страница не загрузилась из-за ошибки в интерфейсе. Мы уже записали её в журнал.</p>
  </div>
</body>
</html>
"""

app = FastAPI(
    title="High Level Video API",
    description="Brief relay and adaptive media endpoints for the High Level Video landing page",
    version=config.app_version,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json"
)
app.state.config = config

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(brief.router)
app.include_router(media.router)


@app.exception_handler(ValidationException)
async def validation_exception_handler(request: Request, exc: ValidationException):
    return JSONResponse({"ok": False, "error": str(exc)}, status_code=400)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    """Last-resort boundary: API callers get an opaque failure, pages get a static apology."""
    logger.opt(exception=exc).error(f"Unhandled error on {request.method} {request.url.path}: {exc}")
    if request.url.path.startswith("/api/"):
        return JSONResponse({"ok": False}, status_code=500)
    return HTMLResponse(APOLOGY_PAGE, status_code=500)


def custom_openapi():
    """Generate custom OpenAPI schema."""
    if app.openapi_schema:
        return app.openapi_schema

    openapi_schema = get_openapi(
        title="High Level Video API",
        version=config.app_version,
        description="""
        # High Level Video

        - **Brief**: relay a contact-form brief to the studio's inbox
        - **Media**: resolve video sources, autoplay and preload for a client environment
        """,
        routes=app.routes,
        tags=[
            {
                "name": "brief",
                "description": "Contact-form submission"
            },
            {
                "name": "media",
                "description": "Adaptive video source selection"
            }
        ]
    )

    app.openapi_schema = openapi_schema
    return app.openapi_schema


app.openapi = custom_openapi


@app.get("/", tags=["root"])
async def root():
    """Root endpoint providing API information."""
    return {
        "message": "High Level Video API",
        "version": config.app_version,
        "docs_url": "/docs",
        "redoc_url": "/redoc",
        "openapi_url": "/openapi.json"
    }


@app.get("/health", tags=["health"])
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "service": "hlvideo"}


@app.get("/providers", tags=["providers"])
async def get_supported_providers():
    """Get information about supported providers."""
    from hlvideo.providers.factory import provider_factory

    return {
        "supported_providers": provider_factory.get_supported_providers(),
        "message": "These are the currently supported providers for each service type"
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app.main:app", host="0.0.0.0", port=8000)
