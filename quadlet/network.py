import ipaddress
from typing import Annotated, Iterator

from pydantic import AfterValidator

from quadlet.base import QuadletModel
from quadlet.downgrade import check_option
from quadlet.host_paths import HostPath
from quadlet.rendering import Entries, collect_entries, join_command, quote
from quadlet.version import PodmanVersion


def check_ip_range(value: str) -> str:
    """Accept a CIDR subnet or a `start-end` address range."""
    if "-" in value:
        start, _, end = value.partition("-")
        first, last = ipaddress.ip_address(start), ipaddress.ip_address(end)
        if first.version != last.version or first > last:
            raise ValueError(f"invalid ip range `{value}`")
    else:
        ipaddress.ip_network(value, strict=False)
    return value


IpRange = Annotated[str, AfterValidator(check_ip_range)]


class Network(QuadletModel):
    """Options for the `[Network]` section of a `.network` file"""
    SECTION = "Network"

    label: list[str] = []
    disable_dns: bool | None = None
    driver: str | None = None
    gateway: list[str] = []
    internal: bool | None = None
    ipam_driver: str | None = None
    ip_range: list[IpRange] = []
    ipv6: bool | None = None
    options: list[str] = []
    subnet: list[str] = []

    # podman 4.7
    network_name: str | None = None
    podman_args: list[str] = []

    # podman 5.0
    dns: list[str] = []

    def entries(self) -> Entries:
        return collect_entries([
            ("NetworkName", self.network_name),
            ("Label", [quote(label) for label in self.label]),
            ("DisableDNS", self.disable_dns),
            ("DNS", self.dns),
            ("Driver", self.driver),
            ("Gateway", self.gateway),
            ("Internal", self.internal),
            ("IPAMDriver", self.ipam_driver),
            ("IPRange", self.ip_range),
            ("IPv6", self.ipv6),
            ("Options", self.options),
            ("Subnet", self.subnet),
            ("PodmanArgs", join_command(self.podman_args)),
        ])

    def host_paths(self) -> Iterator[HostPath]:
        return iter(())

    def downgrade(self, version: PodmanVersion) -> None:
        check_option(version, PodmanVersion.V5_0, "DNS", self.dns)
        check_option(version, PodmanVersion.V4_7, "NetworkName", self.network_name)
        check_option(version, PodmanVersion.V4_7, "PodmanArgs", join_command(self.podman_args))
