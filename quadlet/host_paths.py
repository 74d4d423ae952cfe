"""Access to the host filesystem paths embedded in quadlet models."""

import os
from pathlib import Path
from typing import Any, Iterator, Protocol, runtime_checkable

HOST_PATH_PREFIXES = ("/", ".", "~")


class HostPath:
    """Mutable handle to one path value stored inside a model.

    The handle does not copy the value: reading `path` reads the model and
    assigning `path` writes straight back into it. Handles must not be kept
    across other mutations of the same model.
    """

    def __init__(self, owner: Any, key: str | int):
        self._owner = owner
        self._key = key

    @classmethod
    def attribute(cls, owner: Any, name: str) -> "HostPath":
        return cls(owner, name)

    @classmethod
    def item(cls, sequence: list, index: int) -> "HostPath":
        return cls(sequence, index)

    def _get(self) -> Any:
        if isinstance(self._key, int):
            return self._owner[self._key]
        return getattr(self._owner, self._key)

    def _set(self, value: Any) -> None:
        if isinstance(self._key, int):
            self._owner[self._key] = value
        else:
            setattr(self._owner, self._key, value)

    @property
    def path(self) -> Path:
        return Path(self._get())

    @path.setter
    def path(self, value: Path | str) -> None:
        # Keep whatever type the model stores
        if isinstance(self._get(), Path):
            self._set(Path(value))
        else:
            self._set(str(value))

    def __repr__(self) -> str:
        return f"HostPath({self._get()!r})"


@runtime_checkable
class HostPaths(Protocol):
    def host_paths(self) -> Iterator[HostPath]:
        """Yield a handle for every host path in the model."""
        ...


def is_host_path(value: str) -> bool:
    """Whether a bind source names a host path rather than a named volume."""
    return value.startswith(HOST_PATH_PREFIXES)


def absolutize(model: HostPaths, base_dir: Path) -> int:
    """
    Make every relative host path in `model` absolute.

    Relative paths are resolved against `base_dir` and normalized, `~` is
    expanded to the user's home directory. The filesystem is not accessed.

    Returns:
        Number of paths that were rewritten
    """
    changed = 0
    for handle in model.host_paths():
        path = handle.path.expanduser()
        if not path.is_absolute():
            path = base_dir / path
        path = Path(os.path.normpath(path))
        if path != handle.path:
            handle.path = path
            changed += 1
    return changed
