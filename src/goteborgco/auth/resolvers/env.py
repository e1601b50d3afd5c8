"""Environment subscription key resolver."""

from __future__ import annotations

import os
from dataclasses import dataclass

from goteborgco.auth.base import KeyResolver
from goteborgco.exceptions import AuthenticationError

DEFAULT_KEY_VAR = "GOTEBORGCO_SUBSCRIPTION_KEY"


@dataclass(frozen=True)
class EnvKeyResolver(KeyResolver):
    var: str = DEFAULT_KEY_VAR

    async def resolve(self) -> str:
        key = (os.getenv(self.var) or "").strip()
        if not key:
            raise AuthenticationError(f"{self.var} is not set or empty")
        return key
