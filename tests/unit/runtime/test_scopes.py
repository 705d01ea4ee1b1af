"""Unit tests for the local scope guard."""

from __future__ import annotations

import pytest

from sonora.webapi.core import MissingScopeError, Scope
from sonora.webapi.runtime.scopes import ScopeGuard, require_scopes


class TestRequireScopes:
    """Test require_scopes."""

    def test_all_granted(self):
        require_scopes(
            {Scope.USER_LIBRARY_READ, Scope.USER_LIBRARY_MODIFY},
            {Scope.USER_LIBRARY_READ},
        )

    def test_empty_requirement_always_passes(self):
        require_scopes(set(), set())

    def test_missing_scope(self):
        with pytest.raises(MissingScopeError) as exc_info:
            require_scopes(
                {Scope.USER_LIBRARY_READ},
                {Scope.USER_LIBRARY_READ, Scope.USER_LIBRARY_MODIFY},
            )

        assert exc_info.value.missing == frozenset({Scope.USER_LIBRARY_MODIFY})
        assert exc_info.value.any_of is False
        assert "user-library-modify" in str(exc_info.value)

    def test_any_of_satisfied_by_one(self):
        require_scopes(
            {Scope.PLAYLIST_MODIFY_PRIVATE},
            {Scope.PLAYLIST_MODIFY_PUBLIC, Scope.PLAYLIST_MODIFY_PRIVATE},
            any_of=True,
        )

    def test_any_of_none_granted(self):
        with pytest.raises(MissingScopeError) as exc_info:
            require_scopes(
                {Scope.USER_LIBRARY_READ},
                {Scope.PLAYLIST_MODIFY_PUBLIC, Scope.PLAYLIST_MODIFY_PRIVATE},
                any_of=True,
            )

        assert exc_info.value.any_of is True
        assert exc_info.value.missing == frozenset(
            {Scope.PLAYLIST_MODIFY_PUBLIC, Scope.PLAYLIST_MODIFY_PRIVATE}
        )
        assert "at least one of" in str(exc_info.value)


class TestScopeGuard:
    """Test ScopeGuard."""

    def test_has(self):
        guard = ScopeGuard([Scope.USER_TOP_READ])
        assert guard.has(Scope.USER_TOP_READ)
        assert not guard.has(Scope.USER_FOLLOW_READ)

    def test_granted_is_frozen(self):
        guard = ScopeGuard([Scope.USER_TOP_READ, Scope.USER_TOP_READ])
        assert guard.granted == frozenset({Scope.USER_TOP_READ})

    def test_require(self):
        guard = ScopeGuard([Scope.USER_FOLLOW_READ])
        guard.require(Scope.USER_FOLLOW_READ)
        with pytest.raises(MissingScopeError):
            guard.require(Scope.USER_FOLLOW_MODIFY)

    def test_no_scopes(self):
        guard = ScopeGuard()
        guard.require()
        with pytest.raises(MissingScopeError):
            guard.require(Scope.USER_READ_PRIVATE)
