"""Custom exceptions for gradle-support."""

from __future__ import annotations

from collections.abc import Sequence

GRADLE_INIT_HINT = 'Run "gradle init"'


class GradleSupportError(Exception):
    """Base exception for all gradle-support errors."""


class GradleNotSetupError(GradleSupportError):
    """Raised when no Gradle wrapper script can be found."""

    def __init__(self, message: str, remediation: str = GRADLE_INIT_HINT):
        self.remediation = remediation
        super().__init__(f"{message}. {remediation}")


class GradleExecutionError(GradleSupportError):
    """Raised when the Gradle wrapper exits with a non-zero code."""

    def __init__(
        self,
        code: int | None,
        args: Sequence[str],
        output: bytes = b"",
        stderr: bytes = b"",
    ):
        self.code = code
        self.args_list = list(args)
        self.output = output
        self.stderr = stderr
        super().__init__(
            f"Executing Gradle with {' '.join(self.args_list)} failed with code: {code}. "
            f"\nLogs: {output.decode(errors='replace')}"
        )
