"""Access token held by the WebAPI facade."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from .enums import Scope


@dataclass(frozen=True)
class Token:
    """Bearer token plus the scopes that were granted with it.

    Obtaining and refreshing tokens happens outside this library; callers
    construct a Token from whatever OAuth flow they use.
    """

    access_token: str
    scopes: frozenset[Scope] = field(default_factory=frozenset)
    token_type: str = "Bearer"

    @classmethod
    def from_scope_string(cls, access_token: str, scope: str, token_type: str = "Bearer") -> Token:
        """Build a token from the space separated ``scope`` field of a token response."""
        return cls(access_token=access_token, scopes=frozenset(Scope.parse(scope)), token_type=token_type)

    @classmethod
    def with_scopes(cls, access_token: str, scopes: Iterable[Scope]) -> Token:
        return cls(access_token=access_token, scopes=frozenset(scopes))

    @property
    def authorization_header(self) -> dict[str, str]:
        return {"Authorization": f"{self.token_type} {self.access_token}"}
