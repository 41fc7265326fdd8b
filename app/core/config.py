import os
from dataclasses import dataclass


def _is_enabled(env_var: str, default: bool = True) -> bool:
    """Check if a feature is enabled via environment variable."""
    value = os.getenv(env_var, str(default)).lower()
    return value in ("true", "1", "yes", "on")


DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)


@dataclass(frozen=True)
class Settings:
    fetch_timeout: float = 20.0
    max_body_bytes: int = 5 * 1024 * 1024
    verify_ssl: bool = True
    http2: bool = True
    user_agent: str = DEFAULT_USER_AGENT
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            fetch_timeout=float(os.getenv("FETCH_TIMEOUT", cls.fetch_timeout)),
            max_body_bytes=int(os.getenv("MAX_BODY_BYTES", cls.max_body_bytes)),
            verify_ssl=_is_enabled("FETCH_VERIFY_SSL"),
            http2=_is_enabled("FETCH_HTTP2"),
            user_agent=os.getenv("FETCH_USER_AGENT", DEFAULT_USER_AGENT),
            log_level=os.getenv("LOG_LEVEL", cls.log_level).upper(),
        )


_settings: Settings | None = None


def get_settings() -> Settings:
    """Settings are read from the environment once per process."""
    global _settings
    if _settings is None:
        _settings = Settings.from_env()
    return _settings
