import os
from dataclasses import dataclass


@dataclass(frozen=True)
class Settings:
    """Process settings read from the environment

    Args:
        host: Interface to bind
        port: Port to listen on
        public_url: Externally reachable base URL, advertised in logs
        log_level: Root logging level name
    """
    host: str = "0.0.0.0"
    port: int = 8080
    public_url: str = "http://localhost:8080"
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        port = int(os.getenv("PORT") or 8080)
        return cls(
            host=os.getenv("HOST") or "0.0.0.0",
            port=port,
            public_url=(os.getenv("PUBLIC_URL") or f"http://localhost:{port}").rstrip("/"),
            log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
        )


__all__ = ["Settings"]
