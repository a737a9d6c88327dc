# =============================================================================
# core/models/species.py - Species Schemas
# =============================================================================
# These models define the contract for species records:
# - Kingdom: Enum of taxonomic kingdoms a species can belong to
# - Species: A row of the species table as returned by Supabase
# - SpeciesCreate: Input when adding a new species
# - SpeciesUpdate: Partial input when the author edits a species
#
# A species is owned by its author; only the author may edit or delete it.
# =============================================================================

from enum import Enum

from pydantic import BaseModel, Field, field_validator


class Kingdom(str, Enum):
    """Taxonomic kingdom of a species."""
    ANIMALIA = "Animalia"
    PLANTAE = "Plantae"
    FUNGI = "Fungi"
    PROTISTA = "Protista"
    ARCHAEA = "Archaea"
    BACTERIA = "Bacteria"


class Species(BaseModel):
    """
    A species record.

    Example:
        {
            "id": 5,
            "scientific_name": "Panthera leo",
            "common_name": "Lion",
            "kingdom": "Animalia",
            "total_population": 20000,
            "description": "The lion is a large cat...",
            "image": "https://example.com/lion.jpg",
            "author": "550e8400-e29b-41d4-a716-446655440000"
        }
    """

    # Unique identifier, also the list ordering key
    id: int = Field(
        ...,
        description="Unique species identifier"
    )

    scientific_name: str = Field(
        ...,
        description="Binomial scientific name"
    )

    common_name: str | None = Field(
        default=None,
        description="Common (vernacular) name"
    )

    kingdom: Kingdom | None = Field(
        default=None,
        description="Taxonomic kingdom"
    )

    total_population: int | None = Field(
        default=None,
        description="Estimated total population"
    )

    description: str | None = Field(
        default=None,
        description="Free-text description"
    )

    image: str | None = Field(
        default=None,
        description="URL of an image of the species"
    )

    # Foreign key to profiles.id
    author: str | None = Field(
        default=None,
        description="ID of the user who created this species"
    )

    model_config = {"from_attributes": True}


class SpeciesCreate(BaseModel):
    """
    Schema for adding a new species.

    The author is never taken from the request; it is set to the
    signed-in user by the service layer.
    """

    scientific_name: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Binomial scientific name"
    )

    common_name: str | None = Field(default=None, max_length=255)
    kingdom: Kingdom = Field(..., description="Taxonomic kingdom")
    total_population: int | None = Field(default=None, ge=0)
    description: str | None = Field(default=None)
    image: str | None = Field(default=None, description="Image URL")

    @field_validator("scientific_name")
    @classmethod
    def strip_scientific_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("scientific_name must not be blank")
        return value

    @field_validator("common_name", "total_population", "description", "image", mode="before")
    @classmethod
    def blank_to_none(cls, value):
        # HTML forms submit empty strings for untouched inputs
        if isinstance(value, str) and not value.strip():
            return None
        return value


class SpeciesUpdate(BaseModel):
    """
    Schema for editing a species.

    Only the fields that are set are written.
    """

    scientific_name: str | None = Field(default=None, min_length=1, max_length=255)
    common_name: str | None = Field(default=None, max_length=255)
    kingdom: Kingdom | None = None
    total_population: int | None = Field(default=None, ge=0)
    description: str | None = None
    image: str | None = None
