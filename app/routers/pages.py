# =============================================================================
# app/routers/pages.py - Server-Rendered Pages
# =============================================================================
# HTML pages of the species catalog.
#
# Endpoints:
# - GET /: Landing page (where signed-out visitors are sent)
# - GET /species: Species list, newest first (signed-in only)
# - POST /species: Add-species form target (signed-in only)
# - GET /species/{species_id}: Species details (signed-in only)
#
# Errors on these routes are rendered as HTML, not the API's JSON body.
# =============================================================================

import asyncio
import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Path, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse

from app.auth import AuthSession, get_session_optional
from app.exceptions import InvalidSpeciesError, SpeciesCatalogException, SpeciesNotFoundError
from app.templating import templates
from app.views.species_card import DELETE_CONFIRMATION, DELETE_ERROR_PREFIX
from app.views.species_list import build_species_cards
from core.models.species import Kingdom
from core.services.profile_service import ProfileService
from core.services.species_service import SpeciesService, parse_species_create

logger = logging.getLogger(__name__)

router = APIRouter()

HOME_PATH = "/"


def _redirect_home(status_code: int = status.HTTP_307_TEMPORARY_REDIRECT) -> RedirectResponse:
    return RedirectResponse(HOME_PATH, status_code=status_code)


def _error_page(request: Request, error: SpeciesCatalogException) -> HTMLResponse:
    return templates.TemplateResponse(
        request,
        "error.html",
        {"error": error},
        status_code=error.status_code,
    )


@router.get("/", response_class=HTMLResponse)
async def home_page(
    request: Request,
    session: AuthSession | None = Depends(get_session_optional),
):
    """Render the landing page."""
    return templates.TemplateResponse(request, "home.html", {"session": session})


@router.get("/species", response_class=HTMLResponse)
async def species_list_page(
    request: Request,
    session: AuthSession | None = Depends(get_session_optional),
):
    """
    Render the species list.

    Signed-out visitors are redirected home before anything is queried.
    """
    if session is None:
        return _redirect_home()

    cards = await build_species_cards(session)

    response = templates.TemplateResponse(
        request,
        "species/list.html",
        {
            "session": session,
            "cards": cards,
            "kingdoms": list(Kingdom),
            "delete_confirmation": DELETE_CONFIRMATION,
            "delete_error_prefix": DELETE_ERROR_PREFIX,
        },
    )

    # The page is rendered; the cards have no more work to do
    for card in cards:
        card.unmount()

    return response


@router.post("/species")
async def add_species(
    request: Request,
    session: AuthSession | None = Depends(get_session_optional),
):
    """
    Create a species from the add-species form, then go back to the list.

    Signed-out visitors are sent home with a GET (303).
    """
    if session is None:
        return _redirect_home(status.HTTP_303_SEE_OTHER)

    form = await request.form()
    try:
        data = parse_species_create(dict(form))
    except InvalidSpeciesError as e:
        logger.info(f"Rejected add-species form: {e.details.get('fields')}")
        return _error_page(request, e)

    await asyncio.to_thread(SpeciesService.create_species, data, session.user.id)

    return RedirectResponse("/species", status_code=status.HTTP_303_SEE_OTHER)


@router.get("/species/{species_id}", response_class=HTMLResponse)
async def species_detail_page(
    request: Request,
    species_id: Annotated[int, Path(description="Species ID")],
    session: AuthSession | None = Depends(get_session_optional),
):
    """Render the full details of one species."""
    if session is None:
        return _redirect_home()

    try:
        species = await asyncio.to_thread(SpeciesService.get_species, species_id)
    except SpeciesNotFoundError as e:
        return _error_page(request, e)

    author_name = ""
    if species.author:
        profile = await asyncio.to_thread(ProfileService.get_profile, species.author)
        author_name = profile.display_name if profile else ""

    return templates.TemplateResponse(
        request,
        "species/detail.html",
        {"session": session, "species": species, "author_name": author_name},
    )
