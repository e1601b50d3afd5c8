"""Concrete subscription key resolvers."""

from goteborgco.auth.resolvers.env import EnvKeyResolver
from goteborgco.auth.resolvers.static import StaticKeyResolver

__all__ = ["EnvKeyResolver", "StaticKeyResolver"]
