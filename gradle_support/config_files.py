"""Split workspace files into Gradle build, settings and test files.

Settings files are further resolved to the nearest ``gradlew`` script by
walking up from the settings file's directory towards the workspace root.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable

from gradle_support.exceptions import GradleNotSetupError
from gradle_support.models import ConfigFiles
from gradle_support.wrapper import gradlew_filename

logger = logging.getLogger(__name__)

GRADLE_BUILD_FILES: frozenset[str] = frozenset({"build.gradle", "build.gradle.kts"})
GRADLE_SETTINGS_FILES: frozenset[str] = frozenset({"settings.gradle", "settings.gradle.kts"})
GRADLE_TEST_FILES: tuple[str, ...] = (
    "**/src/test/java/**/*Test.java",
    "**/src/test/kotlin/**/*Test.kt",
    "**/src/test/java/**/*Tests.java",
    "**/src/test/kotlin/**/*Tests.kt",
)


def combine_glob_patterns(*patterns: str) -> str:
    """Join glob patterns into a single ``{a,b,...}`` alternation."""
    if len(patterns) == 1:
        return patterns[0]
    return "{" + ",".join(patterns) + "}"


GRADLE_CONFIG_GLOBS: tuple[str, ...] = tuple(f"**/{f}" for f in sorted(GRADLE_BUILD_FILES))
GRADLE_CONFIG_AND_TEST_GLOBS: tuple[str, ...] = (
    GRADLE_CONFIG_GLOBS
    + tuple(f"**/{f}" for f in sorted(GRADLE_SETTINGS_FILES))
    + GRADLE_TEST_FILES
)
GRADLE_CONFIG_GLOB = combine_glob_patterns(*GRADLE_CONFIG_GLOBS)
GRADLE_CONFIG_AND_TEST_GLOB = combine_glob_patterns(*GRADLE_CONFIG_AND_TEST_GLOBS)


def split_config_files(
    files: Iterable[str],
    workspace_root: str,
    platform: str | None = None,
) -> ConfigFiles:
    """Classify *files* into build files, test files and project roots.

    Anything that is neither a build nor a settings file is treated as a test
    file; the host's glob only hands us matching paths. Each settings file is
    resolved to its nearest wrapper, deduplicated in discovery order.

    Raises:
        GradleNotSetupError: if a settings file has no wrapper above it.
    """
    build_files: list[str] = []
    settings_files: list[str] = []
    test_files: list[str] = []
    project_roots: dict[str, None] = {}

    for file in files:
        filename = os.path.basename(file)
        file_directory = os.path.dirname(file) or os.curdir
        if filename in GRADLE_BUILD_FILES:
            build_files.append(file)
            project_roots.setdefault(file_directory)
        elif filename in GRADLE_SETTINGS_FILES:
            settings_files.append(file)
            project_roots.setdefault(file_directory)
        else:
            test_files.append(file)

    gradlew_files: dict[str, None] = {}
    for settings_file in settings_files:
        gradlew_files.setdefault(find_gradlew_file(settings_file, workspace_root, platform))

    logger.debug(
        "Split %d build, %d settings, %d test files into %d project roots",
        len(build_files),
        len(settings_files),
        len(test_files),
        len(project_roots),
    )
    return ConfigFiles(
        build_files=tuple(build_files),
        gradlew_files=tuple(gradlew_files),
        test_files=tuple(test_files),
        project_roots=tuple(project_roots),
    )


def find_gradlew_file(
    file_path: str,
    workspace_root: str,
    platform: str | None = None,
) -> str:
    """Find the wrapper nearest to *file_path*, relative to *workspace_root*.

    Only the wrapper name for *platform* is checked at each level
    (``gradlew.bat`` on Windows, ``gradlew`` elsewhere).

    Raises:
        GradleNotSetupError: if no wrapper exists between the file and the
            workspace root.
    """
    filename = gradlew_filename(platform)
    directory = os.path.dirname(file_path)

    while True:
        candidate = os.path.normpath(os.path.join(directory, filename))
        if os.path.exists(os.path.join(workspace_root, candidate)):
            logger.debug("Resolved %s to wrapper %s", file_path, candidate)
            return candidate

        parent = os.path.dirname(directory)
        if not directory or directory == os.curdir or parent == directory:
            break
        directory = parent

    logger.warning("No Gradle wrapper found above %s", file_path)
    raise GradleNotSetupError("No Gradlew file found")
