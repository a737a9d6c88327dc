# =============================================================================
# tests/test_supabase_client.py - Supabase Wrapper Tests
# =============================================================================
# Checks the query chains built by SupabaseClient against a mocked client.
# =============================================================================

from unittest.mock import MagicMock, patch

import pytest

from lib.supabase_client import SupabaseClient, SupabaseClientError


@pytest.fixture
def client():
    """A mocked supabase.Client installed as the singleton."""
    mock = MagicMock()
    with patch.object(SupabaseClient, "_instance", mock):
        yield mock


class TestSpeciesQueries:

    def test_list_orders_by_id_descending(self, client):
        query = client.table.return_value.select.return_value.order.return_value
        query.execute.return_value.data = [{"id": 2}, {"id": 1}]

        rows = SupabaseClient.fetch_species_list()

        client.table.assert_called_once_with("species")
        client.table.return_value.select.assert_called_once_with("*")
        client.table.return_value.select.return_value.order.assert_called_once_with("id", desc=True)
        assert rows == [{"id": 2}, {"id": 1}]

    def test_list_failure_is_wrapped(self, client):
        client.table.side_effect = RuntimeError("network down")

        with pytest.raises(SupabaseClientError) as exc_info:
            SupabaseClient.fetch_species_list()

        assert exc_info.value.code == "FETCH_SPECIES_FAILED"

    def test_fetch_missing_species_returns_none(self, client):
        chain = client.table.return_value.select.return_value.eq.return_value.single.return_value
        chain.execute.side_effect = Exception("{'code': 'PGRST116'}")

        assert SupabaseClient.fetch_species(99) is None

    def test_delete_matches_id(self, client):
        SupabaseClient.delete_species(5)

        client.table.return_value.delete.return_value.match.assert_called_once_with({"id": 5})

    def test_delete_failure_is_wrapped(self, client):
        client.table.return_value.delete.return_value.match.return_value.execute.side_effect = (
            Exception("permission denied")
        )

        with pytest.raises(SupabaseClientError) as exc_info:
            SupabaseClient.delete_species(5)

        assert exc_info.value.code == "DELETE_SPECIES_FAILED"
        assert "permission denied" in exc_info.value.message
        assert exc_info.value.details["error"] == "permission denied"
        assert exc_info.value.backend_error == "permission denied"

    def test_error_without_backend_text_falls_back_to_message(self):
        error = SupabaseClientError(message="timeout")

        assert error.backend_error == "timeout"


class TestProfileQueries:

    def test_selects_single_row_by_id(self, client):
        chain = client.table.return_value.select.return_value.eq.return_value.single.return_value
        chain.execute.return_value.data = {"display_name": "Jane"}

        row = SupabaseClient.fetch_profile("u1", columns="display_name")

        client.table.assert_called_once_with("profiles")
        client.table.return_value.select.assert_called_once_with("display_name")
        client.table.return_value.select.return_value.eq.assert_called_once_with("id", "u1")
        assert row == {"display_name": "Jane"}

    def test_no_row_is_an_error(self, client):
        chain = client.table.return_value.select.return_value.eq.return_value.single.return_value
        chain.execute.side_effect = Exception("PGRST116: no rows")

        with pytest.raises(SupabaseClientError) as exc_info:
            SupabaseClient.fetch_profile("u1")

        assert exc_info.value.code == "PROFILE_NOT_FOUND"
