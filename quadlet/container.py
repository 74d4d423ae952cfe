from enum import Enum
from itertools import chain
from pathlib import Path
from typing import Iterator

from pydantic import field_validator

from quadlet.auto_update import AutoUpdate
from quadlet.base import Bind, QuadletModel, bind_host_paths, path_items
from quadlet.downgrade import check_option, is_set
from quadlet.host_paths import HostPath
from quadlet.rendering import Entries, collect_entries, format_value, join_command, quote
from quadlet.version import PodmanVersion


class PullPolicy(Enum):
    """Valid values for the `Pull=` quadlet option."""
    ALWAYS = "always"
    MISSING = "missing"
    NEVER = "never"
    NEWER = "newer"

    def __str__(self) -> str:
        return self.value


class Container(QuadletModel):
    """Options for the `[Container]` section of a `.container` file"""
    SECTION = "Container"

    image: str | None = None
    container_name: str | None = None
    exec: list[str] = []
    environment: dict[str, str] = {}
    label: list[str] = []
    annotation: list[str] = []
    publish_port: list[str] = []
    expose_host_port: list[str] = []
    volume: list[Bind] = []
    network: list[str] = []
    user: str | None = None
    group: str | None = None
    add_capability: list[str] = []
    drop_capability: list[str] = []
    read_only: bool | None = None
    notify: bool | None = None
    timezone: str | None = None
    no_new_privileges: bool | None = None
    run_init: bool | None = None
    seccomp_profile: Path | None = None

    # podman 4.5
    environment_file: list[Path] = []
    secret: list[str] = []
    mount: list[str] = []
    tmpfs: list[str] = []
    log_driver: str | None = None
    rootfs: Path | None = None
    podman_args: list[str] = []

    # podman 4.6
    sysctl: dict[str, str] = {}
    host_name: str | None = None

    # podman 4.7
    auto_update: AutoUpdate | None = None
    dns: list[str] = []
    pids_limit: int | None = None

    # podman 4.8
    pull: PullPolicy | None = None
    shm_size: str | None = None

    # podman 5.0
    entrypoint: str | None = None
    stop_timeout: int | None = None

    @field_validator("environment", "sysctl", mode="before")
    @classmethod
    def values_to_str(cls, value):
        # YAML reads `PORT: 8080` as an int
        if isinstance(value, dict):
            return {k: format_value(v) for k, v in value.items()}
        return value

    def entries(self) -> Entries:
        return collect_entries([
            ("Image", self.image),
            ("Rootfs", self.rootfs),
            ("ContainerName", self.container_name),
            ("Entrypoint", self.entrypoint),
            ("Exec", join_command(self.exec)),
            ("Environment", self.environment),
            ("EnvironmentFile", self.environment_file),
            ("Label", [quote(label) for label in self.label]),
            ("Annotation", [quote(annotation) for annotation in self.annotation]),
            ("AutoUpdate", self.auto_update),
            ("PublishPort", self.publish_port),
            ("ExposeHostPort", self.expose_host_port),
            ("Volume", self.volume),
            ("Mount", self.mount),
            ("Tmpfs", self.tmpfs),
            ("Network", self.network),
            ("DNS", self.dns),
            ("HostName", self.host_name),
            ("User", self.user),
            ("Group", self.group),
            ("AddCapability", " ".join(self.add_capability) or None),
            ("DropCapability", " ".join(self.drop_capability) or None),
            ("Sysctl", " ".join(f"{k}={v}" for k, v in self.sysctl.items()) or None),
            ("SeccompProfile", self.seccomp_profile),
            ("ReadOnly", self.read_only),
            ("NoNewPrivileges", self.no_new_privileges),
            ("RunInit", self.run_init),
            ("Notify", self.notify),
            ("Timezone", self.timezone),
            ("Secret", self.secret),
            ("LogDriver", self.log_driver),
            ("PidsLimit", self.pids_limit),
            ("ShmSize", self.shm_size),
            ("Pull", self.pull),
            ("StopTimeout", self.stop_timeout),
            ("PodmanArgs", join_command(self.podman_args)),
        ])

    def host_paths(self) -> Iterator[HostPath]:
        if self.rootfs is not None:
            yield HostPath.attribute(self, "rootfs")
        yield from chain(path_items(self.environment_file), bind_host_paths(self.volume))
        if self.seccomp_profile is not None:
            yield HostPath.attribute(self, "seccomp_profile")

    def _move_to_podman_args(self, name: str, flag: str) -> None:
        """Replace an option with the equivalent `podman run` flag."""
        value = getattr(self, name)
        if not is_set(value):
            return

        if isinstance(value, dict):
            args = [f"{k}={v}" for k, v in value.items()]
            empty = {}
        elif isinstance(value, list):
            args = [format_value(item) for item in value]
            empty = []
        else:
            args = [format_value(value)]
            empty = None

        for arg in args:
            self.podman_args.extend([flag, arg])
        setattr(self, name, empty)

    def downgrade(self, version: PodmanVersion) -> None:
        """
        Downgrade to `version` by moving unsupported options into `PodmanArgs=`.

        `AutoUpdate=` falls back to the `io.containers.autoupdate` label.
        Raises UnsupportedOptionError if `PodmanArgs=` is still needed for a
        version before 4.5, the moved options stay in `podman_args`.
        """
        if version < PodmanVersion.V5_0:
            self._move_to_podman_args("entrypoint", "--entrypoint")
            self._move_to_podman_args("stop_timeout", "--stop-timeout")

        if version < PodmanVersion.V4_8:
            self._move_to_podman_args("pull", "--pull")
            self._move_to_podman_args("shm_size", "--shm-size")

        if version < PodmanVersion.V4_7:
            if self.auto_update is not None:
                self.label.append(self.auto_update.label())
                self.auto_update = None
            self._move_to_podman_args("dns", "--dns")
            self._move_to_podman_args("pids_limit", "--pids-limit")

        if version < PodmanVersion.V4_6:
            self._move_to_podman_args("sysctl", "--sysctl")
            self._move_to_podman_args("host_name", "--hostname")

        if version < PodmanVersion.V4_5:
            self._move_to_podman_args("environment_file", "--env-file")
            self._move_to_podman_args("secret", "--secret")
            self._move_to_podman_args("mount", "--mount")
            self._move_to_podman_args("tmpfs", "--tmpfs")
            self._move_to_podman_args("log_driver", "--log-driver")
            self._move_to_podman_args("rootfs", "--rootfs")
            check_option(version, PodmanVersion.V4_5, "PodmanArgs", join_command(self.podman_args))
