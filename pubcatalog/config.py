"""Runtime configuration read from environment variables."""

import os
from dataclasses import dataclass
from pathlib import Path


DEFAULT_DATA_FILE = Path(__file__).resolve().parent / "data" / "publications.json"


@dataclass(frozen=True)
class Settings:
    """Service settings.

    Attributes:
        data_file: Seed JSON holding the publications, the author profile
                   and optional display rules.
        contact_delay: Seconds the simulated contact submission takes.
        log_level: Name of the root logging level.
        session_ttl: Seconds of inactivity after which a session is ended.
    """
    data_file: Path = DEFAULT_DATA_FILE
    contact_delay: float = 1.0
    log_level: str = "INFO"
    session_ttl: float = 1800.0


def get_settings() -> Settings:
    """Build settings from ``PUBCATALOG_*`` environment variables."""
    data_file = os.getenv("PUBCATALOG_DATA_FILE")
    return Settings(
        data_file=Path(data_file) if data_file else DEFAULT_DATA_FILE,
        contact_delay=max(0.0, float(os.getenv("PUBCATALOG_CONTACT_DELAY", "1.0"))),
        log_level=os.getenv("PUBCATALOG_LOG_LEVEL", "INFO").upper(),
        session_ttl=max(0.0, float(os.getenv("PUBCATALOG_SESSION_TTL", "1800"))),
    )
