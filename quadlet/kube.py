from pathlib import Path
from typing import Iterator

from pydantic import BaseModel, ConfigDict, model_validator

from quadlet.auto_update import LABEL_KEY, AutoUpdate
from quadlet.base import QuadletModel, path_items
from quadlet.downgrade import check_option
from quadlet.host_paths import HostPath
from quadlet.rendering import Entries, collect_entries, join_command
from quadlet.version import PodmanVersion


class KubeAutoUpdate(BaseModel):
    """A `.kube` `AutoUpdate=` value: `[container/]registry|local`

    Without a container the value applies to every container in the pod.
    """
    model_config = ConfigDict(extra="forbid")

    container: str | None = None
    auto_update: AutoUpdate

    @model_validator(mode="before")
    @classmethod
    def from_string(cls, data):
        if not isinstance(data, str):
            return data

        container, sep, value = data.rpartition("/")
        if not sep:
            return {"auto_update": value}
        return {"container": container, "auto_update": value}

    @property
    def annotation(self) -> str:
        """The `podman kube play` annotation equivalent to this value."""
        if self.container is None:
            return f"{LABEL_KEY}={self.auto_update}"
        return f"{LABEL_KEY}/{self.container}={self.auto_update}"

    def __str__(self) -> str:
        if self.container is None:
            return str(self.auto_update)
        return f"{self.container}/{self.auto_update}"


class Kube(QuadletModel):
    """Options for the `[Kube]` section of a `.kube` file"""
    SECTION = "Kube"

    yaml: Path
    config_map: list[Path] = []
    network: list[str] = []
    publish_port: list[str] = []
    user_ns: str | None = None

    # podman 4.5
    log_driver: str | None = None
    podman_args: list[str] = []

    # podman 4.6
    set_working_directory: str | None = None

    # podman 4.7
    exit_code_propagation: str | None = None

    # podman 4.8
    auto_update: list[KubeAutoUpdate] = []

    # podman 5.0
    kube_down_force: bool | None = None

    def entries(self) -> Entries:
        return collect_entries([
            ("Yaml", self.yaml),
            ("ConfigMap", self.config_map),
            ("AutoUpdate", self.auto_update),
            ("Network", self.network),
            ("PublishPort", self.publish_port),
            ("UserNS", self.user_ns),
            ("LogDriver", self.log_driver),
            ("SetWorkingDirectory", self.set_working_directory),
            ("ExitCodePropagation", self.exit_code_propagation),
            ("KubeDownForce", self.kube_down_force),
            ("PodmanArgs", join_command(self.podman_args)),
        ])

    def host_paths(self) -> Iterator[HostPath]:
        yield HostPath.attribute(self, "yaml")
        yield from path_items(self.config_map)

    def downgrade(self, version: PodmanVersion) -> None:
        """
        Downgrade to `version`.

        `AutoUpdate=` is turned into `--annotation` podman args, every other
        unsupported option raises UnsupportedOptionError.
        """
        check_option(version, PodmanVersion.V5_0, "KubeDownForce", self.kube_down_force)

        if version < PodmanVersion.V4_8:
            for auto_update in self.auto_update:
                self.podman_args.extend(["--annotation", auto_update.annotation])
            self.auto_update = []

        check_option(version, PodmanVersion.V4_7, "ExitCodePropagation", self.exit_code_propagation)
        check_option(version, PodmanVersion.V4_6, "SetWorkingDirectory", self.set_working_directory)
        check_option(version, PodmanVersion.V4_5, "LogDriver", self.log_driver)
        check_option(version, PodmanVersion.V4_5, "PodmanArgs", join_command(self.podman_args))
