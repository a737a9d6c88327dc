# =============================================================================
# tests/test_models.py - Pydantic Model Tests
# =============================================================================
# Unit tests for species and profile models to ensure:
# - Valid rows are accepted and parsed correctly
# - Invalid input raises ValidationError
# - Form-style blank strings are normalized
#
# Run with: pytest tests/test_models.py -v
# =============================================================================

import pytest
from pydantic import ValidationError

from core.models import Kingdom, Profile, Species, SpeciesCreate, SpeciesUpdate


class TestSpecies:
    """Tests for Species model."""

    def test_parses_supabase_row(self, sample_species_rows):
        """Test creating a Species from a full row."""
        species = Species.model_validate(sample_species_rows[0])

        assert species.id == 7
        assert species.scientific_name == "Panthera leo"
        assert species.kingdom == Kingdom.ANIMALIA
        assert species.total_population == 20000

    def test_optional_fields_default_to_none(self):
        """Test that only id and scientific_name are required."""
        species = Species(id=1, scientific_name="Homo sapiens")

        assert species.common_name is None
        assert species.description is None
        assert species.image is None
        assert species.author is None

    def test_stored_negative_population_is_readable(self):
        """Test that a stored row with a bad population still parses."""
        species = Species(id=1, scientific_name="X", total_population=-1)

        assert species.total_population == -1

    def test_create_rejects_negative_population(self):
        """Test that new species can't have a negative population."""
        with pytest.raises(ValidationError):
            SpeciesCreate(scientific_name="X", kingdom="Animalia", total_population=-1)

    def test_rejects_unknown_kingdom(self):
        """Test that kingdom must be one of the enum values."""
        with pytest.raises(ValidationError):
            Species(id=1, scientific_name="X", kingdom="Minerals")


class TestSpeciesCreate:
    """Tests for SpeciesCreate model."""

    def test_valid_create(self):
        data = SpeciesCreate(scientific_name="  Canis lupus ", kingdom="Animalia")

        assert data.scientific_name == "Canis lupus"
        assert data.kingdom == Kingdom.ANIMALIA

    def test_blank_scientific_name_rejected(self):
        with pytest.raises(ValidationError):
            SpeciesCreate(scientific_name="   ", kingdom="Animalia")

    def test_kingdom_required(self):
        with pytest.raises(ValidationError):
            SpeciesCreate(scientific_name="Canis lupus")

    def test_blank_form_values_become_none(self):
        """Test that empty form inputs are stored as null."""
        data = SpeciesCreate.model_validate({
            "scientific_name": "Canis lupus",
            "kingdom": "Animalia",
            "common_name": "",
            "total_population": "",
            "description": " ",
            "image": "",
        })

        assert data.common_name is None
        assert data.total_population is None
        assert data.description is None
        assert data.image is None

    def test_form_population_string_is_parsed(self):
        data = SpeciesCreate.model_validate({
            "scientific_name": "Canis lupus",
            "kingdom": "Animalia",
            "total_population": "250000",
        })

        assert data.total_population == 250000


class TestSpeciesUpdate:
    """Tests for SpeciesUpdate model."""

    def test_only_set_fields_are_dumped(self):
        update = SpeciesUpdate(common_name="Grey wolf")

        assert update.model_dump(exclude_unset=True) == {"common_name": "Grey wolf"}


class TestProfile:
    """Tests for Profile model."""

    def test_display_name_defaults_to_empty(self):
        profile = Profile(id="abc")

        assert profile.display_name == ""
