"""Client configuration model and loaders."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, Field, ValidationError, model_validator

from goteborgco.exceptions import ConfigError

ENV_API_URL = "GOTEBORGCO_API_URL"
ENV_SUBSCRIPTION_KEY = "GOTEBORGCO_SUBSCRIPTION_KEY"
ENV_TIMEOUT = "GOTEBORGCO_TIMEOUT"


class ClientConfig(BaseModel):
    """Connection settings for :class:`~goteborgco.sdk.GoteborgCo`.

    ``auth="key"`` uses ``subscription_key`` directly; ``auth="env"`` reads
    the key from ``GOTEBORGCO_SUBSCRIPTION_KEY`` when the client is built.
    """

    api_url: str
    auth: str = "key"
    subscription_key: str | None = None
    key_location: Literal["query", "header"] = "query"
    timeout: float = Field(default=30.0, gt=0)

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_auth_key(self) -> ClientConfig:
        if not self.api_url.strip():
            raise ValueError("api_url must be non-empty")
        key = (self.subscription_key or "").strip()
        if self.auth == "key":
            if not key:
                raise ValueError("key auth requires a non-empty subscription_key")
            return self
        if key:
            raise ValueError("subscription_key must be unset when auth is not 'key'")
        if self.auth not in {"key", "env"}:
            raise ValueError("auth must be one of: key, env")
        return self


def load_config(path: str | Path) -> ClientConfig:
    config_path = Path(path).expanduser().resolve()

    try:
        raw_payload: Any = json.loads(config_path.read_text(encoding="utf-8"))
        return ClientConfig.model_validate(raw_payload)
    except OSError as exc:
        raise ConfigError(f"failed reading config file: {config_path}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"invalid JSON in config file: {config_path}") from exc
    except ValidationError as exc:
        raise ConfigError(f"invalid config: {exc}") from exc


def config_from_env() -> ClientConfig:
    """Build a config from ``GOTEBORGCO_*`` environment variables.

    The key, when set, is used directly (``auth="key"``); otherwise the
    config defers to :class:`~goteborgco.auth.resolvers.EnvKeyResolver`.
    """
    payload: dict[str, Any] = {}
    api_url = os.getenv(ENV_API_URL, "").strip()
    if api_url:
        payload["api_url"] = api_url
    key = os.getenv(ENV_SUBSCRIPTION_KEY, "").strip()
    if key:
        payload["auth"] = "key"
        payload["subscription_key"] = key
    else:
        payload["auth"] = "env"
    timeout = os.getenv(ENV_TIMEOUT, "").strip()
    if timeout:
        payload["timeout"] = timeout

    try:
        return ClientConfig.model_validate(payload)
    except ValidationError as exc:
        raise ConfigError(f"invalid environment config: {exc}") from exc
