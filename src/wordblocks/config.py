"""Environment-driven settings for the wordblocks server and CLI."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from wordblocks.exceptions import ConfigError

ENV_PREFIX = "WORDBLOCKS_"

_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


@dataclass(frozen=True)
class Settings:
    host: str = "127.0.0.1"
    port: int = 5000
    seed_file: Path | None = None
    log_level: str = "INFO"
    cors_origins: tuple[str, ...] = ("*",)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Read ``WORDBLOCKS_*`` variables, falling back to defaults.

        Raises:
            ConfigError: If a variable holds an unusable value.
        """
        env = os.environ if environ is None else environ

        def get(name: str) -> str | None:
            value = env.get(ENV_PREFIX + name)
            return value.strip() if value and value.strip() else None

        kwargs: dict = {}
        host = get("HOST")
        if host is not None:
            kwargs["host"] = host
        port = get("PORT")
        if port is not None:
            kwargs["port"] = _parse_port(port)
        seed_file = get("SEED_FILE")
        if seed_file is not None:
            kwargs["seed_file"] = Path(seed_file)
        level = get("LOG_LEVEL")
        if level is not None:
            kwargs["log_level"] = parse_log_level(level)
        origins = get("CORS_ORIGINS")
        if origins is not None:
            kwargs["cors_origins"] = tuple(
                o.strip() for o in origins.split(",") if o.strip()
            )
        return cls(**kwargs)


def parse_log_level(value: str) -> str:
    level = value.upper()
    if level not in _LOG_LEVELS:
        raise ConfigError(f"Invalid log level: {value!r}")
    return level


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, parse_log_level(level)),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _parse_port(value: str) -> int:
    try:
        port = int(value)
    except ValueError as e:
        raise ConfigError(f"Invalid port: {value!r}") from e
    if not 0 < port < 65536:
        raise ConfigError(f"Port out of range: {port}")
    return port
