"""Static subscription key resolver."""

from __future__ import annotations

from dataclasses import dataclass

from goteborgco.auth.base import KeyResolver
from goteborgco.exceptions import AuthenticationError


@dataclass(frozen=True)
class StaticKeyResolver(KeyResolver):
    key: str

    async def resolve(self) -> str:
        resolved = self.key.strip()
        if not resolved:
            raise AuthenticationError("Subscription key is empty")
        return resolved
