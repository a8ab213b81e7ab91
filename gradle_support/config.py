"""Environment-driven settings for gradle-support."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass

ENV_WORKSPACE_ROOT = "GRADLE_SUPPORT_WORKSPACE_ROOT"
ENV_PLATFORM = "GRADLE_SUPPORT_PLATFORM"
ENV_LOG_LEVEL = "GRADLE_SUPPORT_LOG_LEVEL"
ENV_LOG_FORMAT = "GRADLE_SUPPORT_LOG_FORMAT"


@dataclass(frozen=True)
class Settings:
    workspace_root: str
    platform: str
    log_level: str = "INFO"
    log_format: str = "console"  # "console" | "json"

    @classmethod
    def from_env(cls) -> Settings:
        """Build settings from GRADLE_SUPPORT_* environment variables.

        Unset or empty variables fall back to their defaults.
        """
        return cls(
            workspace_root=os.environ.get(ENV_WORKSPACE_ROOT) or os.getcwd(),
            platform=os.environ.get(ENV_PLATFORM) or sys.platform,
            log_level=(os.environ.get(ENV_LOG_LEVEL) or "INFO").upper(),
            log_format=(os.environ.get(ENV_LOG_FORMAT) or "console").lower(),
        )
