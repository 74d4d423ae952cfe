import copy
from dataclasses import dataclass, field
from itertools import chain
from typing import Iterator

from quadlet.global_options import Globals
from quadlet.host_paths import HostPath
from quadlet.rendering import render_file
from quadlet.resource import Resource
from quadlet.systemd import Install, Service, Unit
from quadlet.version import PodmanVersion


@dataclass
class File:
    """A complete quadlet file, the unit of rendering and downgrading"""
    name: str
    resource: Resource
    unit: Unit | None = None
    globals: Globals = field(default_factory=Globals)
    service: Service | None = None
    install: Install | None = None

    def __str__(self) -> str:
        return render_file(self)

    def service_name(self) -> str:
        """Name of the service file generated by quadlet"""
        return self.resource.name_to_service(self.name)

    def file_name(self) -> str:
        """Name of the quadlet file itself, e.g. `web.container`"""
        return f"{self.name}.{self.resource.extension()}"

    def host_paths(self) -> Iterator[HostPath]:
        """Host paths of the resource, followed by those of the globals."""
        return chain(self.resource.host_paths(), self.globals.host_paths())

    def downgrade(self, version: PodmanVersion) -> None:
        """
        Downgrade compatibility to `version`.

        This is a one-way transformation, calling downgrade a second time with a
        higher version will not increase the quadlet options used.

        Raises DowngradeError if a used quadlet option is incompatible with the
        given version. Options already changed before the error stay changed,
        use downgraded() to leave this file untouched on failure.
        """
        self.resource.downgrade(version)
        self.globals.downgrade(version)

    def downgraded(self, version: PodmanVersion) -> "File":
        """Return a downgraded copy, this file is not modified."""
        result = copy.deepcopy(self)
        result.downgrade(version)
        return result
