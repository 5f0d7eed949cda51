"""
The catalog of pipeline functions.

Order matters: it is the order of the reference index. Names must be unique
and anchor-safe.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from . import commands

GROUP_IMAGES = "Images"
GROUP_DEPLOYMENTS = "Deployments"
GROUP_DEV = "Dev"
GROUP_PIPELINES = "Pipelines"
GROUP_CHECKS = "Checks"
GROUP_OTHER = "Other"

OS_VALUES = (
    "darwin", "linux", "windows", "aix", "android", "dragonfly", "freebsd", "hurd", "illumos",
    "ios", "js", "nacl", "netbsd", "openbsd", "plan9", "solaris", "zos",
)


@dataclass(frozen=True)
class FunctionEntry:
    name: str
    description: str = ""
    args: str = ""
    arg_enum: tuple[str, ...] = ()
    returns: str = ""
    group: str = ""
    is_global: bool = False
    flags: Optional[Any] = None


FUNCTIONS = [
    FunctionEntry(
        name="build_images",
        description="Builds all images passed as arguments in parallel",
        args="[image-1] [image-2] ...",
        flags=commands.BuildImagesOptions,
        group=GROUP_IMAGES,
    ),
    FunctionEntry(
        name="ensure_pull_secrets",
        description="Creates pull secrets for all images passed as arguments",
        args="[image-1] [image-2] ...",
        flags=commands.EnsurePullSecretsOptions,
        group=GROUP_IMAGES,
    ),
    FunctionEntry(
        name="get_image",
        description="Returns the most recently built image and/or tag for a given image name",
        args="[image]",
        flags=commands.GetImageOptions,
        returns="string",
        group=GROUP_IMAGES,
    ),
    FunctionEntry(
        name="create_deployments",
        description="Creates all deployments passed as arguments in parallel",
        args="[deployment-1] [deployment-2] ...",
        flags=commands.CreateDeploymentsOptions,
        group=GROUP_DEPLOYMENTS,
    ),
    FunctionEntry(
        name="purge_deployments",
        description="Purges all deployments passed as arguments",
        args="[deployment-1] [deployment-2] ...",
        flags=commands.PurgeDeploymentsOptions,
        group=GROUP_DEPLOYMENTS,
    ),
    FunctionEntry(
        name="start_dev",
        description="Starts all dev modes passed as arguments",
        args="[dev-1] [dev-2] ...",
        flags=commands.StartDevOptions,
        group=GROUP_DEV,
    ),
    FunctionEntry(
        name="stop_dev",
        description="Stops all dev modes passed as arguments",
        args="[dev-1] [dev-2] ...",
        flags=commands.StopDevOptions,
        group=GROUP_DEV,
    ),
    FunctionEntry(
        name="run_pipelines",
        description="Runs all pipelines passed as arguments",
        args="[pipeline-1] [pipeline-2] ...",
        flags=commands.RunPipelineOptions,
        group=GROUP_PIPELINES,
    ),
    FunctionEntry(
        name="run_default_pipeline",
        description="Runs the default pipeline passed as arguments",
        args="[pipeline]",
        group=GROUP_PIPELINES,
    ),
    FunctionEntry(
        name="run_dependency_pipelines",
        description="Runs a pipeline of each dependency passed as arguments",
        args="[dependency-1] [dependency-2] ...",
        flags=commands.RunDependencyPipelinesOptions,
        group=GROUP_PIPELINES,
    ),
    FunctionEntry(
        name="is_empty",
        description="Returns true if the value of the argument is empty string",
        args="[value]",
        returns="bool",
        group=GROUP_CHECKS,
        is_global=True,
    ),
    FunctionEntry(
        name="is_equal",
        description="Returns true if the values of both arguments provided are equal",
        args="[value-1] [value-2]",
        returns="bool",
        group=GROUP_CHECKS,
        is_global=True,
    ),
    FunctionEntry(
        name="is_os",
        description="Returns true if the current operating system equals the value provided as argument",
        args="[os]",
        arg_enum=OS_VALUES,
        returns="bool",
        group=GROUP_CHECKS,
        is_global=True,
    ),
    FunctionEntry(
        name="is_true",
        description='Returns true if the value of the argument is "true"',
        args="[value]",
        returns="bool",
        group=GROUP_CHECKS,
        is_global=True,
    ),
    FunctionEntry(
        name="select_pod",
        description="Returns the name of a Kubernetes pod",
        flags=commands.SelectPodOptions,
        returns="string",
        group=GROUP_OTHER,
    ),
    FunctionEntry(
        name="exec_container",
        description="Executes the command provided as argument inside a container",
        args="[command]",
        group=GROUP_OTHER,
    ),
    FunctionEntry(
        name="get_config_value",
        description="Returns the value of the config loaded from the project configuration",
        args="[json.path]",
        returns="string",
        group=GROUP_OTHER,
    ),
    FunctionEntry(
        name="cat",
        description="Returns the content of a file",
        args="[file-path]",
        returns="string",
        group=GROUP_OTHER,
        is_global=True,
    ),
    FunctionEntry(
        name="get_flag",
        description="Returns the value of the flag that is provided as argument",
        args="[flag-name]",
        returns="string",
        group=GROUP_OTHER,
        is_global=True,
    ),
    FunctionEntry(
        name="run_watch",
        description="Executes the command provided as argument and watches for conditions to restart the command",
        args="[command]",
        flags=commands.RunWatchOptions,
        group=GROUP_OTHER,
        is_global=True,
    ),
    FunctionEntry(
        name="sleep",
        description="Pauses the script execution for the number of seconds provided as argument",
        args="[seconds]",
        group=GROUP_OTHER,
        is_global=True,
    ),
    FunctionEntry(
        name="xargs",
        description=(
            "Reads from stdin, splits input by blanks and executes the command provided as "
            "argument for each blank-separated input value (often used in pipes, e.g. "
            "`echo 'image-1 image-2' | xargs build_images`)"
        ),
        args="[command]",
        flags=commands.XArgsOptions,
        group=GROUP_OTHER,
        is_global=True,
    ),
]
