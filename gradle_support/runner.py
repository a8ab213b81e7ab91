"""Run the Gradle wrapper as a child process and collect its output."""

from __future__ import annotations

import asyncio
import logging
import os
import shlex
import subprocess
from collections.abc import Mapping, Sequence

from gradle_support.exceptions import GradleExecutionError
from gradle_support.wrapper import is_windows

logger = logging.getLogger(__name__)

_CHUNK_SIZE = 64 * 1024


def _build_command(gradle_binary_path: str, args: Sequence[str], platform: str | None) -> str:
    argv = [gradle_binary_path, *args]
    if is_windows(platform):
        return subprocess.list2cmdline(argv)
    return shlex.join(argv)


async def _drain(stream: asyncio.StreamReader, chunks: list[bytes]) -> None:
    while True:
        chunk = await stream.read(_CHUNK_SIZE)
        if not chunk:
            break
        chunks.append(chunk)


async def exec_gradle(
    gradle_binary_path: str,
    args: Sequence[str],
    env: Mapping[str, str] | None = None,
    platform: str | None = None,
) -> bytes:
    """Execute the Gradle wrapper with *args* and return its stdout.

    The process runs through the shell with its working directory set to the
    wrapper's directory. *env* entries override the inherited environment.
    Standard error is drained alongside stdout but only attached to failures.

    Raises:
        GradleExecutionError: if the wrapper exits with a non-zero code.
    """
    cmd = _build_command(gradle_binary_path, args, platform)
    kwargs = {}
    if is_windows(platform):
        kwargs["creationflags"] = getattr(subprocess, "CREATE_NO_WINDOW", 0)

    logger.info("Running Gradle: %s", " ".join(args))
    proc = await asyncio.create_subprocess_shell(
        cmd,
        cwd=os.path.dirname(gradle_binary_path) or os.curdir,
        env={**os.environ, **(env or {})},
        stdout=asyncio.subprocess.PIPE,
        stderr=asyncio.subprocess.PIPE,
        **kwargs,
    )

    stdout_chunks: list[bytes] = []
    stderr_chunks: list[bytes] = []
    await asyncio.gather(
        _drain(proc.stdout, stdout_chunks),
        _drain(proc.stderr, stderr_chunks),
    )
    code = await proc.wait()

    stdout = b"".join(stdout_chunks)
    stderr = b"".join(stderr_chunks)
    if stderr:
        logger.debug("Gradle stderr: %s", stderr.decode(errors="replace"))

    if code != 0:
        logger.error("Gradle exited with code %s (args: %s)", code, " ".join(args))
        raise GradleExecutionError(code, args, stdout, stderr)
    return stdout


def exec_gradle_sync(
    gradle_binary_path: str,
    args: Sequence[str],
    env: Mapping[str, str] | None = None,
    platform: str | None = None,
) -> bytes:
    """Blocking variant of :func:`exec_gradle` for non-async callers."""
    return asyncio.run(exec_gradle(gradle_binary_path, args, env=env, platform=platform))
