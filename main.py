import logging

import uvicorn
from fastapi import FastAPI

from language_redirect.config import Settings, get_settings
from language_redirect.dependencies import (
    build_language_preset_resolver,
    build_locale_detector,
    build_preset_source,
    get_language_preset_resolver,
    get_preset_source,
)
from language_redirect.exception_handlers import register_exception_handlers
from language_redirect.middleware.language_redirect import LanguageRedirectMiddleware
from language_redirect.middleware.logging import StructuredLoggingMiddleware, setup_structured_logging
from language_redirect.routes import languages

logger = logging.getLogger(__name__)


def create_app(app_settings: Settings | None = None) -> FastAPI:
    """Create the FastAPI application.

    Without custom settings the process-wide cached collaborators are used.
    """
    if app_settings is None:
        app_settings = get_settings()
        preset_source = get_preset_source()
        resolver = get_language_preset_resolver()
    else:
        preset_source = build_preset_source(app_settings)
        resolver = build_language_preset_resolver(
            app_settings,
            detector=build_locale_detector(app_settings),
            preset_source=preset_source,
        )

    app = FastAPI(
        title=app_settings.app_name,
        description="Redirects the bare homepage to the visitor's language",
        debug=app_settings.debug,
        version=app_settings.app_version,
    )

    app.state.settings = app_settings
    app.state.preset_source = preset_source
    app.state.resolver = resolver

    register_exception_handlers(app)

    # Starlette runs middleware last-added first: access logging wraps the redirect
    app.add_middleware(
        LanguageRedirectMiddleware,
        resolver=resolver,
        fe_language_cookie_name=app_settings.fe_language_cookie_name,
    )
    app.add_middleware(StructuredLoggingMiddleware)

    app.include_router(languages.router)

    if app_settings.debug:
        logger.info(f"Running in {app_settings.environment} mode")

    return app


app = create_app()


if __name__ == "__main__":
    settings = get_settings()
    setup_structured_logging(settings.log_level, json_format=settings.log_json, log_file=settings.log_file)
    uvicorn.run(app, host="0.0.0.0", port=8000, log_config=None)
