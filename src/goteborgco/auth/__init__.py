"""Auth module public exports."""

from goteborgco.auth.base import KeyResolver
from goteborgco.auth.factory import create_key_resolver

__all__ = ["KeyResolver", "create_key_resolver"]
