"""Subscription key resolver interface."""

from __future__ import annotations

from abc import ABC, abstractmethod


class KeyResolver(ABC):
    @abstractmethod
    async def resolve(self) -> str:
        """Resolve and return the API subscription key."""
