"""API routers for the Easy Plant Life site."""

from plantlife.api.routes_blog import router as blog_router
from plantlife.api.routes_forms import router as forms_router
from plantlife.api.routes_health import router as health_router
from plantlife.api.routes_seo import router as seo_router

__all__ = [
    "blog_router",
    "forms_router",
    "health_router",
    "seo_router",
]
