"""Configuration for tinyquest."""

import os
from dataclasses import dataclass
from pathlib import Path


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.lower() in ("true", "1", "yes")


@dataclass
class Config:
    """Application configuration."""

    host: str = "localhost"
    port: int = 1965
    certfile: Path | None = None
    keyfile: Path | None = None
    log_level: str = "WARNING"
    log_file: Path | None = None
    json_logs: bool = False
    hash_fingerprints: bool = True
    world_file: Path | None = None
    start_room: str | None = None
    max_sessions: int = 1000

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from TINYQUEST_* environment variables."""
        certfile = os.getenv("TINYQUEST_CERTFILE")
        keyfile = os.getenv("TINYQUEST_KEYFILE")
        log_file = os.getenv("TINYQUEST_LOG_FILE")
        world_file = os.getenv("TINYQUEST_WORLD_FILE")

        return cls(
            host=os.getenv("TINYQUEST_HOST", cls.host),
            port=int(os.getenv("TINYQUEST_PORT", str(cls.port))),
            certfile=Path(certfile) if certfile else None,
            keyfile=Path(keyfile) if keyfile else None,
            log_level=os.getenv("TINYQUEST_LOG_LEVEL", cls.log_level),
            log_file=Path(log_file) if log_file else None,
            json_logs=_env_flag("TINYQUEST_JSON_LOGS", False),
            hash_fingerprints=_env_flag("TINYQUEST_HASH_FINGERPRINTS", True),
            world_file=Path(world_file) if world_file else None,
            start_room=os.getenv("TINYQUEST_START_ROOM") or None,
            max_sessions=int(
                os.getenv("TINYQUEST_MAX_SESSIONS", str(cls.max_sessions))
            ),
        )
