# =============================================================================
# lib/utils.py - Shared Utilities
# =============================================================================
# Common utilities used across the application.
# =============================================================================

from uuid import UUID


def normalize_id(value: str | int | UUID) -> str | int:
    """
    Normalize an identifier for use in a query filter.

    UUID objects become their string form; strings and integers pass through.

    Example:
        author = normalize_id(uuid_obj)  # "550e8400-..."
        species_id = normalize_id(42)    # 42
    """
    return str(value) if isinstance(value, UUID) else value


def is_not_found_error(error: Exception) -> bool:
    """
    Check whether a PostgREST error means "no rows" for a single() query.
    """
    return "PGRST116" in str(error)
