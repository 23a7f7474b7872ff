"""API route handlers."""

from .matches import router as matches_router
from .recompute import router as recompute_router
from .startups import router as startups_router
