"""Runtime settings, read from the environment (and a .env file, via main)."""
import os
from dataclasses import dataclass
from typing import Optional


def _flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "y")


@dataclass
class Settings:
    world_file: Optional[str] = None
    use_color: bool = True
    log_level: str = "WARNING"
    log_file: Optional[str] = None

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            world_file=os.getenv("MANOR_WORLD_FILE") or None,
            use_color=_flag("MANOR_USE_COLOR", "1"),
            log_level=os.getenv("MANOR_LOG_LEVEL", "WARNING").upper(),
            log_file=os.getenv("MANOR_LOG_FILE") or None,
        )
