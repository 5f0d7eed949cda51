"""
Option structures of the pipeline commands.

Only the metadata matters here: field names, types and flag metadata are
read by :func:`mkdocs_funcref.options.extract_flags`. The commands
themselves live in the pipeline engine and are never executed.
"""

from dataclasses import dataclass, field

from .options import embed, flag


@dataclass
class SelectionOptions:
    all: bool = flag("all", description="Selects all entries defined in the config")
    except_: list[str] = flag(
        "except", description="Excludes the given entries when used with --all", default_factory=list
    )


# -- images --


@dataclass
class BuildOptions:
    tags: list[str] = flag("tag", "t", "Use the given tag for all built images", default_factory=list)
    skip_push: bool = flag("skip-push", description="Skip pushing images to registries")
    skip_push_on_local_cluster: bool = flag(
        "skip-push-local-kube", description="Skip pushing images if the cluster is local"
    )
    force_rebuild: bool = flag("force-rebuild", "b", "Forces the image to be rebuilt")
    sequential: bool = flag("sequential", description="Builds the images one after another")
    max_concurrent: int = flag(
        "max-concurrent", description="Maximum number of images to build in parallel", default=0
    )


@dataclass
class BuildImagesOptions:
    selection: SelectionOptions = embed(SelectionOptions)
    build: BuildOptions = embed(BuildOptions)


@dataclass
class EnsurePullSecretsOptions:
    selection: SelectionOptions = embed(SelectionOptions)


@dataclass
class GetImageOptions:
    only: str = flag("only", description='Displays either only the "image" or "tag"', default="")
    dependency: str = flag("dependency", description="Retrieves the image from the given dependency", default="")


# -- deployments --


@dataclass
class DeployOptions:
    force_deploy: bool = flag("force-redeploy", description="Forces redeployment")
    sequential: bool = flag("sequential", description="Deploys one deployment after another")
    render: bool = flag("render", description="Prints the rendered manifests instead of deploying them")
    set_values: list[str] = flag(
        "set", description="Sets a deployment value in the form key=value", default_factory=list
    )
    set_string: list[str] = flag(
        "set-string", description="Sets a deployment string value in the form key=value", default_factory=list
    )
    from_file: list[str] = flag(
        "from-file", description="Reuses an existing deployment config from a file", default_factory=list
    )


@dataclass
class CreateDeploymentsOptions:
    selection: SelectionOptions = embed(SelectionOptions)
    deploy: DeployOptions = embed(DeployOptions)


@dataclass
class PurgeDeploymentsOptions:
    selection: SelectionOptions = embed(SelectionOptions)
    force_purge: bool = flag("force-purge", description="Purges deployments even if they are in use")
    sequential: bool = flag("sequential", description="Purges one deployment after another")


# -- dev --


@dataclass
class StartDevOptions:
    selection: SelectionOptions = embed(SelectionOptions)
    disable_sync: bool = flag("disable-sync", description="Disables file synchronization")
    disable_port_forwarding: bool = flag(
        "disable-port-forwarding", description="Disables port forwarding and reverse port forwarding"
    )
    disable_pod_replace: bool = flag("disable-pod-replace", description="Disables pod replacing")
    disable_open: bool = flag("disable-open", description="Disables opening of urls")
    continue_on_term: bool = flag(
        "continue-on-term", description="Continues the pipeline when dev mode is terminated"
    )


@dataclass
class StopDevOptions:
    selection: SelectionOptions = embed(SelectionOptions)


# -- pipelines --


@dataclass
class PipelineFlagOptions:
    set_values: list[str] = flag(
        "set-flag", description="Sets a pipeline flag in the form name=value", default_factory=list
    )
    background: bool = flag("background", description="Runs the pipeline in the background")
    sequential: bool = flag("sequential", description="Runs the pipelines one after another")


@dataclass
class RunPipelineOptions:
    flags: PipelineFlagOptions = embed(PipelineFlagOptions)


@dataclass
class RunDependencyPipelinesOptions:
    flags: PipelineFlagOptions = embed(PipelineFlagOptions)
    all: bool = flag("all", description="Runs the pipeline of all direct dependencies")
    exclude: list[str] = flag("exclude", description="Excludes the given dependencies", default_factory=list)
    pipeline: str = flag("pipeline", description="The pipeline to run in each dependency", default="deploy")


# -- other --


@dataclass
class SelectPodOptions:
    image_selector: str = flag("image-selector", description="The image selector to use to select the pod", default="")
    label_selector: str = flag("label-selector", description="The label selector to use to select the pod", default="")
    container: str = flag("container", description="The container to use", default="")
    namespace: str = flag("namespace", "n", "The namespace to use", default="")


@dataclass
class RunWatchOptions:
    skip_initial: bool = flag("skip-initial", description="Skips the initial command execution")
    paths: list[str] = flag("path", "p", "The paths to watch, can be patterns", default_factory=list)
    exclude: list[str] = flag("exclude", "e", "The paths to exclude from watching", default_factory=list)
    env: dict = field(default_factory=dict)


@dataclass
class XArgsOptions:
    delimiter: str = flag("delimiter", "d", "Delimiter to split the input by", default="")
