"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from environment
variables.  Defaults are provided for all fields so the services start
without any configuration at all.  Both services read the same settings
object; the pokedex only looks at the fields it needs.
"""

import os
from dataclasses import dataclass


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Doc Agent Demo API")
    pokedex_name: str = os.getenv("POKEDEX_NAME", "Pokedex API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = _env_flag("DEBUG", "false")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Optional log file.  Empty means console only.
    log_file: str = os.getenv("LOG_FILE", "")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8080"))
    pokedex_port: int = int(os.getenv("POKEDEX_PORT", "8081"))

    # How new catalog ids are minted: ``sequential`` (counter taken under
    # the store's write lock) or ``count`` (``<prefix>_<size + 1>`` computed
    # before the lock is taken; may collide under concurrent creates).
    id_policy: str = os.getenv("ID_POLICY", "sequential")

    # Whether the catalog starts with the fixed sample users and products.
    seed_sample_data: bool = _env_flag("SEED_SAMPLE_DATA", "true")


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Because the dataclass
# computes defaults at class creation time, environment variables should
# be set before importing this module.
settings = Settings()
