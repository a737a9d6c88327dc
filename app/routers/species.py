# =============================================================================
# app/routers/species.py - Species API Endpoints
# =============================================================================
# JSON endpoints for the species catalog. All endpoints require a session
# (Bearer token or session cookie). Only the author of a species may
# update or delete it.
# =============================================================================

from typing import Annotated

from fastapi import APIRouter, Depends, Path, status

from app.auth import AuthUser, get_current_user
from core.models.species import Species, SpeciesCreate, SpeciesUpdate
from core.services.species_service import SpeciesService

router = APIRouter()


@router.get("", response_model=list[Species])
async def list_species(
    user: AuthUser = Depends(get_current_user),
):
    """
    List all species, newest identifier first.

    Returns an empty list if the catalog can't be read.
    """
    return SpeciesService.list_species()


@router.post("", response_model=Species, status_code=status.HTTP_201_CREATED)
async def create_species(
    request: SpeciesCreate,
    user: AuthUser = Depends(get_current_user),
):
    """Add a species authored by the current user."""
    return SpeciesService.create_species(request, author_id=user.id)


@router.get("/{species_id}", response_model=Species)
async def get_species(
    species_id: Annotated[int, Path(description="Species ID")],
    user: AuthUser = Depends(get_current_user),
):
    """Get one species."""
    return SpeciesService.get_species(species_id)


@router.patch("/{species_id}", response_model=Species)
async def update_species(
    species_id: Annotated[int, Path(description="Species ID")],
    request: SpeciesUpdate,
    user: AuthUser = Depends(get_current_user),
):
    """Edit a species. Author only."""
    return SpeciesService.update_species(species_id, request, user_id=user.id)


@router.delete("/{species_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_species(
    species_id: Annotated[int, Path(description="Species ID")],
    user: AuthUser = Depends(get_current_user),
):
    """
    Delete a species. Author only.

    On failure the error `detail` is the message shown to the user.
    """
    SpeciesService.delete_species(species_id, user_id=user.id)
