from pathlib import Path
from typing import Iterator

from quadlet.base import QuadletModel, path_items
from quadlet.downgrade import check_option
from quadlet.host_paths import HostPath
from quadlet.rendering import Entries, collect_entries, join_command
from quadlet.version import PodmanVersion


class Globals(QuadletModel):
    """Options valid for every quadlet file kind.

    Rendered into the resource's section, so there is no header of its own.
    """
    SECTION = None

    containers_conf_module: list[Path] = []
    global_args: list[str] = []

    def entries(self) -> Entries:
        return collect_entries([
            ("ContainersConfModule", self.containers_conf_module),
            ("GlobalArgs", join_command(self.global_args)),
        ])

    def host_paths(self) -> Iterator[HostPath]:
        return path_items(self.containers_conf_module)

    def downgrade(self, version: PodmanVersion) -> None:
        check_option(version, PodmanVersion.V4_8, "ContainersConfModule", self.containers_conf_module)
        check_option(version, PodmanVersion.V4_8, "GlobalArgs", join_command(self.global_args))
