from typing import Iterator

from pydantic import ConfigDict, Field

from quadlet.base import QuadletModel
from quadlet.downgrade import check_option
from quadlet.host_paths import HostPath, is_host_path
from quadlet.rendering import Entries, collect_entries, join_command, quote
from quadlet.version import PodmanVersion


class Volume(QuadletModel):
    """Options for the `[Volume]` section of a `.volume` file"""
    model_config = ConfigDict(extra="forbid", populate_by_name=True)
    SECTION = "Volume"

    label: list[str] = []
    # `copy` would shadow BaseModel.copy()
    copy_: bool | None = Field(None, alias="copy")
    device: str | None = None
    group: str | None = None
    user: str | None = None
    options: str | None = None
    type: str | None = None

    # podman 4.7
    volume_name: str | None = None
    podman_args: list[str] = []

    # podman 4.8
    driver: str | None = None
    image: str | None = None

    def entries(self) -> Entries:
        return collect_entries([
            ("VolumeName", self.volume_name),
            ("Driver", self.driver),
            ("Image", self.image),
            ("Label", [quote(label) for label in self.label]),
            ("Copy", self.copy_),
            ("Device", self.device),
            ("Type", self.type),
            ("Options", self.options),
            ("User", self.user),
            ("Group", self.group),
            ("PodmanArgs", join_command(self.podman_args)),
        ])

    def host_paths(self) -> Iterator[HostPath]:
        # Devices like `tmpfs` or `server:/export` are not host paths
        if self.device is not None and is_host_path(self.device):
            yield HostPath.attribute(self, "device")

    def downgrade(self, version: PodmanVersion) -> None:
        check_option(version, PodmanVersion.V4_8, "Driver", self.driver)
        check_option(version, PodmanVersion.V4_8, "Image", self.image)
        check_option(version, PodmanVersion.V4_7, "VolumeName", self.volume_name)
        check_option(version, PodmanVersion.V4_7, "PodmanArgs", join_command(self.podman_args))
