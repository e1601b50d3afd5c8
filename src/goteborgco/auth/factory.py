"""Key resolver factory."""

from __future__ import annotations

from goteborgco.auth.base import KeyResolver
from goteborgco.auth.resolvers.env import EnvKeyResolver
from goteborgco.auth.resolvers.static import StaticKeyResolver
from goteborgco.config import ClientConfig
from goteborgco.exceptions import ConfigError

RESOLVERS: dict[str, type[KeyResolver]] = {
    "env": EnvKeyResolver,
    "key": StaticKeyResolver,
}


def create_key_resolver(config: ClientConfig) -> KeyResolver:
    auth_mode = config.auth
    if auth_mode not in RESOLVERS:
        raise ConfigError(f"Unknown auth mode: {auth_mode}")

    if auth_mode == "env":
        return EnvKeyResolver()
    return StaticKeyResolver(key=config.subscription_key or "")
