# =============================================================================
# app/ - FastAPI Application Package
# =============================================================================
# This package contains the species catalog web application:
# - main.py: App entry point, middleware setup, error handlers
# - config.py: Environment variable loading and settings
# - auth/: Session resolution from Supabase access tokens
# - routers/: Pages and API endpoints organized by feature
# - views/: Species card and list components
# - templates/: Jinja2 page templates
#
# The app layer is thin - it handles HTTP concerns and delegates
# business logic to the core/ package.
# =============================================================================
