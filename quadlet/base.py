from typing import ClassVar, Iterator

from pydantic import BaseModel, ConfigDict, model_validator

from quadlet.host_paths import HostPath, is_host_path
from quadlet.rendering import Entries, render_section


class QuadletModel(BaseModel):
    """Base for every model that renders to a quadlet section."""
    model_config = ConfigDict(extra="forbid")

    SECTION: ClassVar[str | None] = None

    def entries(self) -> Entries:
        raise NotImplementedError

    def __str__(self) -> str:
        return render_section(self.SECTION, self.entries())


class Bind(BaseModel):
    """A `Volume=` value: `[source:]destination[:options]`"""
    model_config = ConfigDict(extra="forbid")

    source: str | None = None
    destination: str
    options: str | None = None

    @model_validator(mode="before")
    @classmethod
    def from_string(cls, data):
        if not isinstance(data, str):
            return data

        parts = data.split(":", 2)
        if len(parts) == 1:
            return {"destination": parts[0]}
        if len(parts) == 2:
            return {"source": parts[0], "destination": parts[1]}
        return {"source": parts[0], "destination": parts[1], "options": parts[2]}

    @classmethod
    def parse(cls, value: str) -> "Bind":
        return cls.model_validate(value)

    @property
    def is_host_path(self) -> bool:
        return self.source is not None and is_host_path(self.source)

    def __str__(self) -> str:
        return ":".join(part for part in (self.source, self.destination, self.options) if part)


def bind_host_paths(binds: list[Bind]) -> Iterator[HostPath]:
    """Handles to the sources of binds that mount a host path."""
    for bind in binds:
        if bind.is_host_path:
            yield HostPath.attribute(bind, "source")


def path_items(paths: list) -> Iterator[HostPath]:
    for index in range(len(paths)):
        yield HostPath.item(paths, index)
