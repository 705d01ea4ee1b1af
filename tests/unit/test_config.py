"""Unit tests for client options."""

from __future__ import annotations

import pytest

from sonora.webapi.config import DEFAULT_LIMIT, MAX_IDS_PER_REQUEST, ClientOptions


class TestClientOptions:
    """Test ClientOptions."""

    def test_defaults(self):
        options = ClientOptions()

        assert options.api_root == "https://api.spotify.com/v1"
        assert options.default_limit == DEFAULT_LIMIT == 50
        assert options.allow_bulk_requests is False
        assert MAX_IDS_PER_REQUEST == 50

    def test_api_root_strips_trailing_slash(self):
        assert ClientOptions(base_url="https://api.test/").api_root == "https://api.test/v1"

    def test_no_default_limit(self):
        assert ClientOptions(default_limit=None).default_limit is None

    @pytest.mark.parametrize("kwargs", [{"default_limit": 0}, {"timeout": 0}, {"timeout": -1.0}])
    def test_invalid_values(self, kwargs):
        with pytest.raises(ValueError):
            ClientOptions(**kwargs)
