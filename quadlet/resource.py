from enum import Enum
from typing import Iterator, Union

from quadlet.container import Container
from quadlet.downgrade import UnsupportedKindError
from quadlet.host_paths import HostPath
from quadlet.image import Image
from quadlet.kube import Kube
from quadlet.network import Network
from quadlet.pod import Pod
from quadlet.version import PodmanVersion
from quadlet.volume import Volume

Payload = Union[Container, Pod, Kube, Network, Volume, Image]


class ResourceKind(Enum):
    """Quadlet resource kinds, valued by their file extension"""
    CONTAINER = "container"
    POD = "pod"
    KUBE = "kube"
    NETWORK = "network"
    VOLUME = "volume"
    IMAGE = "image"

    def __str__(self) -> str:
        return self.value

    @property
    def service_suffix(self) -> str:
        """Suffix quadlet adds to the file name for the generated service."""
        return _SERVICE_SUFFIXES[self]

    @property
    def since(self) -> PodmanVersion:
        """First podman version with quadlet support for this kind."""
        return _SUPPORTED_SINCE.get(self, PodmanVersion.V4_4)

    @classmethod
    def of(cls, payload: Payload) -> "ResourceKind":
        for payload_type, kind in _PAYLOAD_KINDS:
            if isinstance(payload, payload_type):
                return kind
        raise TypeError(f"Not a quadlet resource: {type(payload).__name__}")


_SERVICE_SUFFIXES = {
    ResourceKind.CONTAINER: "",
    ResourceKind.POD: "-pod",
    ResourceKind.KUBE: "",
    ResourceKind.NETWORK: "-network",
    ResourceKind.VOLUME: "-volume",
    ResourceKind.IMAGE: "-image",
}

_SUPPORTED_SINCE = {
    ResourceKind.POD: PodmanVersion.V5_0,
    ResourceKind.IMAGE: PodmanVersion.V4_8,
}

_PAYLOAD_KINDS = [
    (Container, ResourceKind.CONTAINER),
    (Pod, ResourceKind.POD),
    (Kube, ResourceKind.KUBE),
    (Network, ResourceKind.NETWORK),
    (Volume, ResourceKind.VOLUME),
    (Image, ResourceKind.IMAGE),
]


class ResourceHostPaths:
    """Host paths of a Resource, whatever kind it holds.

    Wraps the iterator of the active payload so every kind returns the same
    iterator type. Single pass, like the iterator it wraps.
    """

    def __init__(self, kind: ResourceKind, inner: Iterator[HostPath]):
        self.kind = kind
        self._inner = inner

    def __iter__(self) -> "ResourceHostPaths":
        return self

    def __next__(self) -> HostPath:
        return next(self._inner)


class Resource:
    """A quadlet resource, holding exactly one payload of a known kind."""

    def __init__(self, payload: Payload):
        self.kind = ResourceKind.of(payload)
        self.payload = payload

    def __repr__(self) -> str:
        return f"Resource({self.payload!r})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, Resource):
            return NotImplemented
        return self.kind == other.kind and self.payload == other.payload

    def __str__(self) -> str:
        return str(self.payload)

    def extension(self) -> str:
        """The extension that should be used for the generated file."""
        return self.kind.value

    def name_to_service(self, name: str) -> str:
        """
        Takes a file name (no extension) and returns the name of the service
        file quadlet generates for it.
        """
        return f"{name}{self.kind.service_suffix}.service"

    def host_paths(self) -> ResourceHostPaths:
        return ResourceHostPaths(self.kind, iter(self.payload.host_paths()))

    def downgrade(self, version: PodmanVersion) -> None:
        """
        Downgrade compatibility to `version`.

        Raises UnsupportedKindError if the resource kind itself is newer than
        `version`, otherwise whatever the payload's downgrade raises.
        """
        if version < self.kind.since:
            raise UnsupportedKindError(self.kind, self.kind.since)
        self.payload.downgrade(version)
