"""Local scope checks performed before a request is issued."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from ..core.enums import Scope
from ..core.exceptions import MissingScopeError

logger = logging.getLogger(__name__)


def require_scopes(
    granted: Iterable[Scope],
    required: Iterable[Scope],
    *,
    any_of: bool = False,
) -> None:
    """Check that ``granted`` satisfies ``required``.

    Args:
        granted: Scopes on the active credential
        required: Scopes the operation needs
        any_of: If True one required scope is enough, otherwise all are needed

    Raises:
        MissingScopeError: Naming the missing scopes
    """
    granted_set = frozenset(granted)
    required_set = frozenset(required)
    if not required_set:
        return

    missing = required_set - granted_set
    if any_of:
        satisfied = len(missing) < len(required_set)
    else:
        satisfied = not missing

    if not satisfied:
        logger.debug(
            "scope_check_failed",
            extra={
                "required": sorted(scope.value for scope in required_set),
                "missing": sorted(scope.value for scope in missing),
                "any_of": any_of,
            },
        )
        raise MissingScopeError(missing, any_of=any_of)


class ScopeGuard:
    """Scope checker bound to one credential's granted scopes."""

    def __init__(self, granted: Iterable[Scope] = ()) -> None:
        self._granted = frozenset(granted)

    @property
    def granted(self) -> frozenset[Scope]:
        return self._granted

    def has(self, scope: Scope) -> bool:
        return scope in self._granted

    def require(self, *scopes: Scope, any_of: bool = False) -> None:
        """Raise MissingScopeError unless ``scopes`` are granted (all, or one with any_of)."""
        require_scopes(self._granted, scopes, any_of=any_of)
