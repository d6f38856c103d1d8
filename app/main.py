import logging

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi import _rate_limit_exceeded_handler
import sentry_sdk

from app.api.v1.health import router as health_router
from app.api.v1.chat import router as chat_router
from app.api.v1.recommend import router as recommend_router
from app.api.v1.resume import router as resume_router
from app.api.v1.site import router as site_router
from app.core.cors import cors_allow_credentials, cors_allow_origin_regex, cors_allowed_origins
from app.core.errors import ApiError, api_error_handler, unhandled_error_handler, validation_error_handler
from app.core.rate_limit import limiter
from app.core.config import settings
from app.core.lifespan import lifespan
from app.core.state import AppState, build_app_state

logging.basicConfig(level=settings.log_level, format="%(message)s")
if settings.sentry_dsn:
    sentry_sdk.init(dsn=settings.sentry_dsn)


def create_app(state: AppState | None = None) -> FastAPI:
    application = FastAPI(title="Portfolio API", version="0.1.0", lifespan=lifespan)
    application.state.portfolio = state or build_app_state()

    application.add_middleware(
        CORSMiddleware,
        allow_origins=cors_allowed_origins(),
        allow_origin_regex=cors_allow_origin_regex(),
        allow_credentials=cors_allow_credentials(),
        allow_methods=["*"],
        allow_headers=["*"],
    )
    application.state.limiter = limiter
    application.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
    application.add_exception_handler(ApiError, api_error_handler)
    application.add_exception_handler(RequestValidationError, validation_error_handler)
    application.add_exception_handler(Exception, unhandled_error_handler)
    application.add_middleware(SlowAPIMiddleware)

    application.include_router(health_router, prefix="/v1", tags=["Health"])
    application.include_router(recommend_router, prefix="/v1", tags=["Recommendations"])
    application.include_router(resume_router, prefix="/v1", tags=["Resume"])
    application.include_router(chat_router, prefix="/v1", tags=["Chat"])
    application.include_router(site_router, prefix="/v1", tags=["Site"])
    return application


app = create_app()
