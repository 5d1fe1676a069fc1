import os
from dataclasses import dataclass

TRUTHY = {"1", "true", "yes", "on"}


@dataclass
class Settings:
    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "INFO"
    seed_sample_data: bool = True
    version: str = "1.0.0"


def load_settings() -> Settings:
    """Reads settings from the environment, falling back to the defaults."""
    return Settings(
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT") or 8080),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        seed_sample_data=os.getenv("SEED_SAMPLE_DATA", "true").strip().lower() in TRUTHY,
        version=os.getenv("APP_VERSION", "1.0.0"),
    )
