"""Locate the Gradle wrapper script for the current platform."""

from __future__ import annotations

import logging
import os
import sys

from gradle_support.exceptions import GradleNotSetupError

logger = logging.getLogger(__name__)

GRADLEW = "gradlew"
GRADLEW_BAT = "gradlew.bat"


def is_windows(platform: str | None = None) -> bool:
    return (platform or sys.platform).startswith("win")


def gradlew_filename(platform: str | None = None) -> str:
    """Wrapper script name for *platform* (``sys.platform`` when omitted)."""
    return GRADLEW_BAT if is_windows(platform) else GRADLEW


def gradle_exec_file(platform: str | None = None) -> str:
    """Invocation token for the wrapper when cwd is already its directory."""
    return ".\\" + GRADLEW_BAT if is_windows(platform) else "./" + GRADLEW


def locate_gradlew(workspace_root: str, platform: str | None = None) -> str:
    """Return the absolute path of the wrapper at the workspace root.

    Raises:
        GradleNotSetupError: if the wrapper script does not exist.
    """
    path = os.path.join(os.path.abspath(workspace_root), gradlew_filename(platform))
    if not os.path.exists(path):
        logger.warning("Gradle wrapper not found at %s", path)
        raise GradleNotSetupError("Gradle is not setup")
    logger.debug("Found Gradle wrapper: %s", path)
    return path
