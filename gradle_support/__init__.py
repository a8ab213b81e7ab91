"""gradle-support: Gradle wrapper lookup, execution and config file splitting."""

__version__ = "0.1.0"

from gradle_support.config_files import (
    GRADLE_BUILD_FILES,
    GRADLE_CONFIG_AND_TEST_GLOB,
    GRADLE_CONFIG_GLOB,
    GRADLE_SETTINGS_FILES,
    GRADLE_TEST_FILES,
    find_gradlew_file,
    split_config_files,
)
from gradle_support.exceptions import (
    GradleExecutionError,
    GradleNotSetupError,
    GradleSupportError,
)
from gradle_support.models import ConfigFiles
from gradle_support.runner import exec_gradle, exec_gradle_sync
from gradle_support.wrapper import gradle_exec_file, gradlew_filename, locate_gradlew

__all__ = [
    "GRADLE_BUILD_FILES",
    "GRADLE_CONFIG_AND_TEST_GLOB",
    "GRADLE_CONFIG_GLOB",
    "GRADLE_SETTINGS_FILES",
    "GRADLE_TEST_FILES",
    "ConfigFiles",
    "GradleExecutionError",
    "GradleNotSetupError",
    "GradleSupportError",
    "exec_gradle",
    "exec_gradle_sync",
    "find_gradlew_file",
    "gradle_exec_file",
    "gradlew_filename",
    "locate_gradlew",
    "split_config_files",
]
