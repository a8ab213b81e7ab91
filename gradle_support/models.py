"""Data models for Gradle config file classification."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ConfigFiles:
    """Result of splitting a file list into Gradle config categories."""

    build_files: tuple[str, ...] = ()  # build.gradle / build.gradle.kts
    gradlew_files: tuple[str, ...] = ()  # wrapper paths relative to workspace root
    test_files: tuple[str, ...] = ()
    project_roots: tuple[str, ...] = ()  # dirs holding a build or settings file

    def to_dict(self) -> dict[str, list[str]]:
        """Render with the camelCase keys the host plugin expects."""
        return {
            "buildFiles": list(self.build_files),
            "gradlewFiles": list(self.gradlew_files),
            "testFiles": list(self.test_files),
            "projectRoots": list(self.project_roots),
        }
