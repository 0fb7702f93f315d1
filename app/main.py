import logging
import logging.config

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from app.config import LOCALE_NAMES, load_config
from app.routers.metadata import limiter, router as metadata_router
from app.routers.schema import router as schema_router
from app.routers.site import router as site_router
from app.routers.validate import router as validate_router

logging.config.dictConfig(
    {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "json": {
                "format": '{"time": "%(asctime)s", "level": "%(levelname)s", "logger": "%(name)s", "message": "%(message)s"}',
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "json",
            },
        },
        "root": {"level": "INFO", "handlers": ["console"]},
    }
)

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Polyglot SEO – Metadata & Structured Data API",
    description=(
        "Generates locale-aware page metadata (canonical, hreflang, Open Graph, "
        "Twitter Card) and Schema.org JSON-LD for a multilingual site."
    ),
    version="1.0.0",
)

# Invalid configuration raises ConfigurationError at import time
app.state.site_config = load_config()

# Rate-limiting state
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)


@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled exception for %s", request.url)
    return JSONResponse(status_code=500, content={"detail": "An unexpected error occurred."})


app.include_router(metadata_router)
app.include_router(schema_router)
app.include_router(site_router)
app.include_router(validate_router)


@app.get("/", summary="Health check")
async def root() -> dict:
    config = app.state.site_config
    return {
        "message": "Hello from Polyglot SEO",
        "origin": config.origin,
        "locales": {locale.value: LOCALE_NAMES[locale] for locale in config.locales},
        "default_locale": config.default_locale.value,
    }
