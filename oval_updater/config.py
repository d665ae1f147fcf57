# config.py
import os
from dataclasses import dataclass


def _env_flag(name):
    return os.environ.get(name, "0").strip().lower() in ("1", "true", "yes", "on")


@dataclass
class UpdaterConfig:
    # Logging
    debug_level: int = 1
    quiet: bool = False
    syslog: bool = False
    # Extraction behavior
    max_depth: int = 64
    description_width: int = 150
    # evr value that carries no version constraint
    null_version: str = "0:0"

    @classmethod
    def from_env(cls):
        """Defaults overridden by OVAL_UPDATER_* environment variables."""
        cfg = cls()
        level = os.environ.get("OVAL_UPDATER_DEBUG", "").strip()
        if level.lstrip("-").isdigit():
            cfg.debug_level = int(level)
        cfg.quiet = _env_flag("OVAL_UPDATER_QUIET")
        return cfg


# Global defaults used across modules
DEFAULTS = UpdaterConfig()
