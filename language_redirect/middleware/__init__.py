from .language_redirect import LanguageRedirectMiddleware, build_redirect, should_handle
from .logging import StructuredLoggingMiddleware, setup_structured_logging

__all__ = [
    "LanguageRedirectMiddleware",
    "StructuredLoggingMiddleware",
    "build_redirect",
    "setup_structured_logging",
    "should_handle",
]
