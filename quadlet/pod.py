from typing import Iterator

from quadlet.base import Bind, QuadletModel, bind_host_paths
from quadlet.host_paths import HostPath
from quadlet.rendering import Entries, collect_entries, join_command
from quadlet.version import PodmanVersion


class Pod(QuadletModel):
    """Options for the `[Pod]` section of a `.pod` file"""
    SECTION = "Pod"

    pod_name: str | None = None
    network: list[str] = []
    publish_port: list[str] = []
    volume: list[Bind] = []
    podman_args: list[str] = []

    def entries(self) -> Entries:
        return collect_entries([
            ("PodName", self.pod_name),
            ("Network", self.network),
            ("PublishPort", self.publish_port),
            ("Volume", self.volume),
            ("PodmanArgs", join_command(self.podman_args)),
        ])

    def host_paths(self) -> Iterator[HostPath]:
        return bind_host_paths(self.volume)

    def downgrade(self, version: PodmanVersion) -> None:
        # Every option is as old as `.pod` files themselves
        pass
