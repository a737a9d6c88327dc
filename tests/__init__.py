# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the Species Catalog:
# - test_models.py: Unit tests for Pydantic model validation
# - test_species_service.py: Species CRUD and ownership rules
# - test_species_card.py: Card view state, author lookup and delete flow
# - test_auth.py: Access token verification and session endpoints
# - test_pages.py: Server-rendered pages
# - test_api.py: Species JSON API and health checks
#
# Run tests with: pytest
# =============================================================================
