# =============================================================================
# app/routers/ - Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by feature:
# - health.py: Health check endpoints
# - pages.py: Server-rendered species pages
# - species.py: Species JSON API
#
# Each router is mounted in main.py with a URL prefix.
# =============================================================================

from . import health
from . import pages
from . import species

__all__ = [
    "health",
    "pages",
    "species",
]
