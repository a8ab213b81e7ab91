"""CLI entry point for standalone usage: gradle-support.

Subcommands:
    gradle-support locate                          # Print the workspace wrapper path
    gradle-support split FILE...                   # Classify files, print JSON
    gradle-support find-gradlew FILE               # Nearest wrapper for a file
    gradle-support exec -- projects --quiet        # Run the wrapper, print stdout
"""

from __future__ import annotations

import json
import sys
from typing import IO

import click

from gradle_support.config import Settings
from gradle_support.config_files import find_gradlew_file, split_config_files
from gradle_support.core.logging import setup_logging
from gradle_support.exceptions import GradleExecutionError, GradleNotSetupError
from gradle_support.runner import exec_gradle_sync
from gradle_support.wrapper import locate_gradlew


def _exit_status(code: int | None) -> int:
    """Map a child return code to a shell exit status (signals become 128 + N)."""
    if code is None or code == 0:
        return 1
    if code < 0:
        return 128 - code
    return code


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Verbose logging")
@click.option(
    "--workspace-root",
    default=None,
    help="Workspace root (default: $GRADLE_SUPPORT_WORKSPACE_ROOT or cwd)",
)
@click.option("--platform", default=None, help="Platform identifier override, e.g. win32")
@click.pass_context
def main(
    ctx: click.Context, verbose: bool, workspace_root: str | None, platform: str | None
) -> None:
    """gradle-support: locate, run and classify Gradle wrapper projects."""
    settings = Settings.from_env()
    setup_logging(settings, level="DEBUG" if verbose else None)
    ctx.obj = Settings(
        workspace_root=workspace_root or settings.workspace_root,
        platform=platform or settings.platform,
        log_level=settings.log_level,
        log_format=settings.log_format,
    )


@main.command("locate")
@click.pass_obj
def locate(settings: Settings) -> None:
    """Print the absolute path of the workspace root wrapper."""
    try:
        click.echo(locate_gradlew(settings.workspace_root, settings.platform))
    except GradleNotSetupError as e:
        raise click.ClickException(str(e)) from e


@main.command("split")
@click.argument("files", nargs=-1)
@click.option(
    "--from-file", type=click.File("r"), default=None, help="Read paths from a file ('-' for stdin)"
)
@click.pass_obj
def split(settings: Settings, files: tuple[str, ...], from_file: IO[str] | None) -> None:
    """Classify FILES into build files, wrappers, tests and project roots."""
    paths = list(files)
    if from_file is not None:
        paths.extend(line.strip() for line in from_file if line.strip())

    try:
        result = split_config_files(paths, settings.workspace_root, settings.platform)
    except GradleNotSetupError as e:
        raise click.ClickException(str(e)) from e
    click.echo(json.dumps(result.to_dict(), indent=2))


@main.command("find-gradlew")
@click.argument("file_path")
@click.pass_obj
def find_gradlew(settings: Settings, file_path: str) -> None:
    """Print the wrapper nearest to FILE_PATH, relative to the workspace root."""
    try:
        click.echo(find_gradlew_file(file_path, settings.workspace_root, settings.platform))
    except GradleNotSetupError as e:
        raise click.ClickException(str(e)) from e


@main.command("exec", context_settings={"ignore_unknown_options": True})
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
@click.option("-e", "--env", "env_pairs", multiple=True, help="Extra KEY=VALUE environment entries")
@click.pass_obj
def exec_(settings: Settings, args: tuple[str, ...], env_pairs: tuple[str, ...]) -> None:
    """Run the workspace wrapper with ARGS and print its stdout."""
    env = {}
    for pair in env_pairs:
        if "=" not in pair:
            raise click.BadParameter(f"expected KEY=VALUE, got '{pair}'", param_hint="--env")
        key, value = pair.split("=", 1)
        env[key] = value

    try:
        gradlew = locate_gradlew(settings.workspace_root, settings.platform)
        output = exec_gradle_sync(gradlew, list(args), env=env, platform=settings.platform)
    except GradleNotSetupError as e:
        raise click.ClickException(str(e)) from e
    except GradleExecutionError as e:
        click.echo(e.output.decode(errors="replace"), nl=False)
        click.echo(f"Error: Gradle failed with code {e.code}", err=True)
        sys.exit(_exit_status(e.code))

    click.echo(output.decode(errors="replace"), nl=False)


if __name__ == "__main__":
    main()
