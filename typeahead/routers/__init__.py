"""HTTP routers for Typeahead Service."""
from . import health_router, typeahead_router

__all__ = ["health_router", "typeahead_router"]
